from .var import expected_shortfall, historical_var, quantile_rank, tail_statistics

__all__ = [
    "quantile_rank",
    "historical_var",
    "expected_shortfall",
    "tail_statistics",
]
