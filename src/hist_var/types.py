from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .exceptions import InvalidParameterError


@dataclass(frozen=True, slots=True)
class ContractParameters:
    """Contract and risk settings for a position in European calls.

    Parameters
    ----------
    maturity : float
        Option expiry measured in years from the valuation origin, typically
        denoted :math:`T`.
    interest_rate : float
        Continuously-compounded, flat risk-free rate :math:`r` (annualized).
    volatility : float
        Black-Scholes volatility :math:`\\sigma` (annualized). Must be >= 0;
        the pricer itself additionally needs it strictly positive.
    strike_price : float
        Strike :math:`K`.
    alpha : float
        Tail probability level in ``[0, 1]``. VaR is reported at confidence
        ``1 - alpha``.
    position_size : float, default 100.0
        Number of contracts held.
    today : float, default 0.0
        Valuation time in the same units as `maturity`.

    Attributes
    ----------
    T : float
        Alias for ``maturity``.
    K : float
        Alias for ``strike_price``.
    r : float
        Alias for ``interest_rate``.
    sigma : float
        Alias for ``volatility``.
    tau : float
        Time to maturity, ``maturity - today``.

    Raises
    ------
    InvalidParameterError
        On construction, checked in this order: alpha outside ``[0, 1]``,
        a non-finite field, ``maturity < 0``, ``volatility < 0``,
        ``maturity <= today``, ``position_size <= 0``.
    """

    maturity: float
    interest_rate: float
    volatility: float
    strike_price: float
    alpha: float
    position_size: float = 100.0
    today: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.alpha <= 1.0:
            raise InvalidParameterError(f"alpha must lie in [0, 1], got {self.alpha}")
        for name in (
            "maturity",
            "interest_rate",
            "volatility",
            "strike_price",
            "position_size",
            "today",
        ):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidParameterError(f"{name} must be finite, got {value}")
        if self.maturity < 0.0:
            raise InvalidParameterError(f"maturity must be >= 0, got {self.maturity}")
        if self.volatility < 0.0:
            raise InvalidParameterError(
                f"volatility must be >= 0, got {self.volatility}"
            )
        if self.maturity <= self.today:
            raise InvalidParameterError(
                f"maturity must be > today, got maturity={self.maturity}, "
                f"today={self.today}"
            )
        if self.position_size <= 0.0:
            raise InvalidParameterError(
                f"position_size must be > 0, got {self.position_size}"
            )

    @property
    def T(self) -> float:
        return self.maturity

    @property
    def K(self) -> float:
        return self.strike_price

    @property
    def r(self) -> float:
        return self.interest_rate

    @property
    def sigma(self) -> float:
        return self.volatility

    @property
    def tau(self) -> float:
        return self.maturity - self.today

    @property
    def confidence(self) -> float:
        return 1.0 - self.alpha


@dataclass(frozen=True, slots=True)
class VaRResult:
    """Outcome of one historical-simulation VaR run.

    Parameters
    ----------
    report : str
        Narrative line, e.g. ``"The 95% VaR is £12.5"``.
    changes : np.ndarray
        Day-over-day portfolio changes in chronological order (unsorted),
        suitable for a histogram.
    var : float
        The selected order statistic of `changes`. A negative value is a loss.
    expected_shortfall : float
        Mean of the sorted changes up to and including the VaR rank.
    alpha : float
        Tail probability level used.
    log_returns : np.ndarray
        Log returns of the underlying price path.

    Attributes
    ----------
    VaR : str
        Alias for ``report``.
    ChangeSeries : np.ndarray
        Alias for ``changes``.
    """

    report: str
    changes: np.ndarray
    var: float
    expected_shortfall: float
    alpha: float
    log_returns: np.ndarray

    @property
    def VaR(self) -> str:
        return self.report

    @property
    def ChangeSeries(self) -> np.ndarray:
        return self.changes

    @property
    def loss(self) -> float:
        """VaR expressed as a positive loss, rounded to pence."""
        return -round(float(self.var), 2) + 0.0
