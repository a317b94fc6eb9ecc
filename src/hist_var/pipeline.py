"""
Historical-simulation VaR for a position in European calls on one underlying.

The pipeline runs strictly forward:

    prices -> log returns -> call values -> portfolio values
           -> changes -> sorted quantile -> report

Every intermediate series is local to one call, so independent calls can be
run in parallel without coordination.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import replace

import numpy as np

from .config import VaRConfig
from .exceptions import InvalidParameterError
from .models.bs import call_price_vec
from .models.sampling import NormalSampler, generate_prices, make_sampler
from .report import assemble_result
from .risk.var import tail_statistics
from .series import first_differences, log_returns, portfolio_values
from .types import ContractParameters, VaRResult

logger = logging.getLogger(__name__)


def _validate_hist_data(hist_data: int) -> int:
    if isinstance(hist_data, bool) or not isinstance(hist_data, numbers.Integral):
        raise InvalidParameterError(f"hist_data must be an integer, got {hist_data!r}")
    if hist_data < 2:
        raise InvalidParameterError(f"hist_data must be >= 2, got {hist_data}")
    return int(hist_data)


def run_pipeline(
    params: ContractParameters,
    hist_data: int,
    *,
    sampler: NormalSampler,
    cfg: VaRConfig | None = None,
) -> VaRResult:
    """
    Run every stage for an already validated contract.

    Parameters
    ----------
    params : ContractParameters
        Contract, position and alpha level.
    hist_data : int
        Length of the price history (>= 2).
    sampler : NormalSampler
        Source of the price history.
    cfg : VaRConfig, optional
        Price distribution and quantile settings.

    Returns
    -------
    VaRResult
    """
    cfg = cfg or VaRConfig()
    n = _validate_hist_data(hist_data)

    prices = generate_prices(n, cfg.prices.mean, cfg.prices.std, sampler)
    # also the positivity gate for the pricer's log-moneyness
    rets = log_returns(prices)

    option_values = call_price_vec(
        spot=prices,
        strike=params.K,
        r=params.r,
        sigma=params.sigma,
        tau=params.tau,
    )
    values = portfolio_values(option_values, params.position_size)
    changes = first_differences(values)

    var, es = tail_statistics(changes, params.alpha, cfg.quantile)
    logger.debug("n=%d tau=%g var=%g es=%g", n, params.tau, var, es)
    return assemble_result(
        var=var,
        expected_shortfall=es,
        alpha=params.alpha,
        changes=changes,
        log_returns=rets,
    )


def compute_historical_var(
    maturity: float,
    interest_rate: float,
    hist_data: int,
    volatility: float,
    strike_price: float,
    alpha: float,
    today: float = 0.0,
    *,
    position_size: float = 100.0,
    cfg: VaRConfig | None = None,
    sampler: NormalSampler | None = None,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> VaRResult:
    """
    Historical-simulation VaR of ``position_size`` European calls.

    Parameters
    ----------
    maturity : float
        Expiry in years from the valuation origin; must exceed `today`.
    interest_rate : float
        Flat continuously-compounded rate.
    hist_data : int
        Number of price observations to simulate (>= 2).
    volatility : float
        Black-Scholes volatility (>= 0; the pricer needs > 0).
    strike_price : float
        Strike of each call.
    alpha : float
        Tail probability in ``[0, 1]``; VaR is reported at ``1 - alpha``.
    today : float, default 0.0
        Valuation time.
    position_size : float, default 100.0
        Number of calls held.
    cfg : VaRConfig, optional
        Price distribution, quantile and RNG settings.
    sampler : NormalSampler, optional
        Explicit price sampler. Takes precedence over `rng`, `seed` and
        ``cfg.random``.
    seed : int, optional
        Seed for a fresh generator. Overrides ``cfg.random.seed``.
    rng : np.random.Generator, optional
        Generator to draw from. Takes precedence over `seed`.

    Returns
    -------
    VaRResult
        ``result.VaR`` holds the narrative line and ``result.ChangeSeries``
        the unsorted changes.

    Raises
    ------
    InvalidParameterError
        For alpha outside ``[0, 1]``, ``maturity < 0``, ``volatility < 0``,
        ``maturity <= today`` or ``hist_data < 2`` (checked in that order,
        before any sampling).
    DomainError
        If ``volatility == 0`` reaches the pricer or a sampled price is not
        positive.

    Examples
    --------
    >>> res = compute_historical_var(1.0, 0.05, 250, 0.2, 45.0, 0.05, seed=0)
    >>> res.VaR  # doctest: +SKIP
    'The 95% VaR is £...'
    """
    params = ContractParameters(
        maturity=maturity,
        interest_rate=interest_rate,
        volatility=volatility,
        strike_price=strike_price,
        alpha=alpha,
        position_size=position_size,
        today=today,
    )
    _validate_hist_data(hist_data)

    cfg = cfg or VaRConfig()
    if sampler is None:
        rand = cfg.random if seed is None else replace(cfg.random, seed=int(seed))
        sampler = make_sampler(rand, rng=rng)

    return run_pipeline(params, hist_data, sampler=sampler, cfg=cfg)
