"""
hist_var

Historical-simulation Value-at-Risk for a position in European calls.

The main entry point is re-exported at the top level:

    from hist_var import compute_historical_var
"""

from .config import PriceConfig, QuantileConfig, RandomConfig, RankPolicy, VaRConfig
from .exceptions import DomainError, InvalidInputError, InvalidParameterError, VaRError
from .pipeline import compute_historical_var, run_pipeline
from .types import ContractParameters, VaRResult

__all__ = [
    # Types
    "ContractParameters",
    "VaRResult",
    # Config
    "VaRConfig",
    "PriceConfig",
    "QuantileConfig",
    "RandomConfig",
    "RankPolicy",
    # Errors
    "VaRError",
    "InvalidParameterError",
    "DomainError",
    "InvalidInputError",
    # Entry points
    "compute_historical_var",
    "run_pipeline",
]
