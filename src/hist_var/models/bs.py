from __future__ import annotations

import math

import numpy as np
from scipy.stats import norm

from ..exceptions import DomainError, InvalidInputError, InvalidParameterError
from ..typing import FloatArray, FloatDType


def _validate_contract(
    *, strike: float, r: float, sigma: float, tau: float
) -> None:
    for name, value in (("strike", strike), ("r", r), ("sigma", sigma), ("tau", tau)):
        if not math.isfinite(value):
            raise DomainError(f"{name} must be finite, got {value}")
    if strike <= 0.0:
        raise InvalidParameterError(f"strike must be positive, got {strike}")
    if sigma <= 0.0:
        raise DomainError(f"sigma must be positive for d1/d2, got {sigma}")
    if tau <= 0.0:
        raise DomainError(f"tau must be positive for d1/d2, got {tau}")


def discount_factor(rate: float, tau: float) -> float:
    return math.exp(-rate * tau)


def d1_d2(
    *, spot: FloatArray, strike: float, r: float, sigma: float, tau: float
) -> tuple[FloatArray, FloatArray]:
    """
    Elementwise d1, d2 for an array of spots.

    The drift term inside d1 is ``r - sigma^2 / 2``.
    """
    _validate_contract(strike=strike, r=r, sigma=sigma, tau=tau)
    spot = np.asarray(spot, dtype=FloatDType)
    if np.any(~(np.isfinite(spot) & (spot > 0.0))):
        raise InvalidInputError("spot prices must be finite and strictly positive")

    vol_sqrt_t = sigma * math.sqrt(tau)
    num = np.log(spot / strike) + (r - 0.5 * sigma * sigma) * tau
    d1 = num / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return d1, d2


def call_price_vec(
    *, spot: FloatArray, strike: float, r: float, sigma: float, tau: float
) -> FloatArray:
    """
    European call values for every spot in `spot`, same shape and order.

    Parameters
    ----------
    spot : array_like
        Underlying prices, all strictly positive.
    strike : float
        Strike ``K`` (> 0).
    r : float
        Flat continuously-compounded rate.
    sigma : float
        Volatility (> 0). A single value for the whole horizon.
    tau : float
        Time to maturity (> 0).

    Returns
    -------
    np.ndarray
        ``S * N(d1) - K * exp(-r * tau) * N(d2)`` elementwise.

    Raises
    ------
    DomainError
        If ``sigma <= 0`` or ``tau <= 0``.
    InvalidInputError
        If any spot is not strictly positive.
    """
    d1, d2 = d1_d2(spot=spot, strike=strike, r=r, sigma=sigma, tau=tau)
    S = np.asarray(spot, dtype=FloatDType)
    df_r = discount_factor(r, tau)
    return S * norm.cdf(d1) - strike * df_r * norm.cdf(d2)


def call_price(*, spot: float, strike: float, r: float, sigma: float, tau: float) -> float:
    """Scalar wrapper around :func:`call_price_vec`."""
    out = call_price_vec(
        spot=np.array([spot], dtype=FloatDType),
        strike=strike,
        r=r,
        sigma=sigma,
        tau=tau,
    )
    return float(out[0])
