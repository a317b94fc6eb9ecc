from __future__ import annotations


def main() -> None:
    from hist_var import compute_historical_var
    from hist_var.viz.plot_changes import plot_change_distribution

    res = compute_historical_var(1.0, 0.05, 1_000, 0.2, 45.0, 0.01, seed=1)
    plot_change_distribution(res, bins=60)


if __name__ == "__main__":
    main()
