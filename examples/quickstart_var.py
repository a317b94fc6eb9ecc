from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    from hist_var import compute_historical_var

    res = compute_historical_var(
        maturity=1.0,
        interest_rate=0.05,
        hist_data=500,
        volatility=0.2,
        strike_price=45.0,
        alpha=0.05,
        seed=0,
    )

    print(res.VaR)
    print("ES:", res.expected_shortfall)
    print("changes:", res.ChangeSeries.size)
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
