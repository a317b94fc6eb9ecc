from __future__ import annotations

import logging
import math

import numpy as np

from ..config import QuantileConfig, RankPolicy
from ..exceptions import InvalidInputError, InvalidParameterError
from ..typing import FloatArray, FloatDType, SeriesLike

logger = logging.getLogger(__name__)


def _round_rank(x: float, rounding: str) -> int:
    if rounding == "half_even":
        return int(round(x))
    # half_up; the epsilon absorbs alpha*k landing a hair under .5
    return int(math.floor(x + 0.5 + 1e-12))


def quantile_rank(alpha: float, k: int, cfg: QuantileConfig | None = None) -> int:
    """
    1-indexed rank of the alpha-quantile within ``k`` sorted observations.

    The raw rank is ``round(alpha * k)``. It is 0 whenever ``alpha * k < 0.5``
    (in particular for ``alpha = 0``). Under ``RankPolicy.CLAMP`` such a rank
    becomes 1, the worst observation; under ``RankPolicy.RAISE`` it is
    rejected.

    Raises
    ------
    InvalidParameterError
        If alpha is outside ``[0, 1]``, ``k < 1``, or the rank is out of range
        under ``RankPolicy.RAISE``.
    """
    cfg = cfg or QuantileConfig()
    if not 0.0 <= alpha <= 1.0:
        raise InvalidParameterError(f"alpha must lie in [0, 1], got {alpha}")
    if k < 1:
        raise InvalidParameterError(f"k must be >= 1, got {k}")

    rank = _round_rank(alpha * k, cfg.rounding)
    if 1 <= rank <= k:
        return rank

    if cfg.rank_policy == RankPolicy.RAISE:
        raise InvalidParameterError(
            f"quantile rank {rank} out of range [1, {k}] for alpha={alpha}"
        )
    clamped = min(max(rank, 1), k)
    logger.warning(
        "quantile rank %d out of range [1, %d] for alpha=%g; clamped to %d",
        rank,
        k,
        alpha,
        clamped,
    )
    return clamped


def _sorted_changes(changes: SeriesLike) -> FloatArray:
    x = np.asarray(changes, dtype=FloatDType)
    if x.ndim != 1 or x.size < 1:
        raise InvalidInputError(
            f"changes must be a non-empty 1-d series, got shape {x.shape}"
        )
    return np.sort(x, kind="stable")


def historical_var(
    changes: SeriesLike, alpha: float, cfg: QuantileConfig | None = None
) -> float:
    """
    Empirical alpha-quantile of `changes` (ascending order statistic).

    Returns the change itself, not its magnitude: a loss comes back negative.

    Examples
    --------
    >>> historical_var([-50.0, -10.0, 0.0, 10.0, 50.0], alpha=0.2)
    -50.0
    """
    x = _sorted_changes(changes)
    rank = quantile_rank(alpha, x.size, cfg)
    return float(x[rank - 1])


def expected_shortfall(
    changes: SeriesLike, alpha: float, cfg: QuantileConfig | None = None
) -> float:
    """Mean of the sorted changes from the worst up to and including the VaR rank."""
    x = _sorted_changes(changes)
    rank = quantile_rank(alpha, x.size, cfg)
    return float(np.mean(x[:rank]))


def tail_statistics(
    changes: SeriesLike, alpha: float, cfg: QuantileConfig | None = None
) -> tuple[float, float]:
    """VaR and expected shortfall from a single sort; returns ``(var, es)``."""
    x = _sorted_changes(changes)
    rank = quantile_rank(alpha, x.size, cfg)
    return float(x[rank - 1]), float(np.mean(x[:rank]))
