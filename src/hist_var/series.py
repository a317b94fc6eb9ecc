"""
Series transforms between the price path and the P&L series.

All functions are pure and index-aligned: an output of length ``n - 1``
corresponds to positions ``1..n-1`` of its input. The undefined first
position is sliced off, never filled or filtered.
"""

from __future__ import annotations

import logging

import numpy as np

from .exceptions import InvalidInputError
from .typing import FloatArray, FloatDType, SeriesLike

logger = logging.getLogger(__name__)


def _as_1d(values: SeriesLike, *, name: str, min_len: int) -> FloatArray:
    arr = np.asarray(values, dtype=FloatDType)
    if arr.ndim != 1:
        raise InvalidInputError(f"{name} must be one-dimensional, got shape {arr.shape}")
    if arr.size < min_len:
        raise InvalidInputError(
            f"{name} needs at least {min_len} elements, got {arr.size}"
        )
    return arr


def log_returns(prices: SeriesLike) -> FloatArray:
    """
    Continuously-compounded returns ``log(p[i] / p[i-1])`` for ``i = 1..n-1``.

    Raises
    ------
    InvalidInputError
        If fewer than two prices are given or any price is not finite and
        strictly positive.
    """
    p = _as_1d(prices, name="prices", min_len=2)
    bad = ~(np.isfinite(p) & (p > 0.0))
    if np.any(bad):
        idx = int(np.flatnonzero(bad)[0])
        raise InvalidInputError(
            f"prices must be finite and strictly positive, got {p[idx]} at index {idx}"
        )
    out = np.log(p[1:] / p[:-1])
    logger.debug("extracted %d log returns from %d prices", out.size, p.size)
    return out


def portfolio_values(option_values: SeriesLike, position_size: float) -> FloatArray:
    """Scale per-contract values by the number of contracts held."""
    return float(position_size) * np.asarray(option_values, dtype=FloatDType)


def first_differences(values: SeriesLike) -> FloatArray:
    """Day-over-day changes ``v[i] - v[i-1]`` for ``i = 1..m-1``."""
    v = _as_1d(values, name="values", min_len=2)
    out = v[1:] - v[:-1]
    logger.debug("built %d changes from %d values", out.size, v.size)
    return out
