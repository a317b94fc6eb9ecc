from __future__ import annotations


def main() -> None:
    import logging

    from hist_var import ContractParameters
    from hist_var.diagnostics.batch import alpha_cases, var_table

    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    base = ContractParameters(
        maturity=1.0,
        interest_rate=0.05,
        volatility=0.2,
        strike_price=45.0,
        alpha=0.05,
        today=0.25,
    )
    df = var_table(alpha_cases(base), hist_data=1_000, seed=0, per_case_seed=False)
    print(df[["case", "VaR", "loss", "ES"]].to_string(index=False))


if __name__ == "__main__":
    main()
