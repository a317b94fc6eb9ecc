import math

import numpy as np
import pytest

from hist_var.exceptions import DomainError, InvalidInputError
from hist_var.models.bs import call_price, call_price_vec


def test_call_monotone_non_decreasing_in_spot():
    """For fixed (K, r, sigma, tau), call value should not fall as spot rises."""
    spots = np.linspace(20.0, 80.0, 61)
    prices = call_price_vec(spot=spots, strike=45.0, r=0.05, sigma=0.2, tau=1.0)

    assert prices.shape == spots.shape
    assert np.all(np.diff(prices) >= -1e-12)


def test_small_tau_converges_to_intrinsic():
    """As tau -> 0+, the call value approaches max(S - K, 0)."""
    spots = np.array([30.0, 40.0, 50.0, 60.0])
    K = 45.0
    prices = call_price_vec(spot=spots, strike=K, r=0.05, sigma=0.2, tau=1e-10)

    intrinsic = np.maximum(spots - K, 0.0)
    np.testing.assert_allclose(prices, intrinsic, atol=1e-6)


def test_call_bounds():
    """0 <= C <= S elementwise."""
    spots = np.array([35.0, 45.0, 55.0])
    prices = call_price_vec(spot=spots, strike=45.0, r=0.03, sigma=0.35, tau=0.75)

    assert np.all(prices >= -1e-12)
    assert np.all(prices <= spots + 1e-12)


def test_scalar_matches_vector_and_closed_form():
    S, K, r, sigma, tau = 47.0, 45.0, 0.04, 0.25, 0.5

    vol_sqrt_t = sigma * math.sqrt(tau)
    d1 = (math.log(S / K) + (r - 0.5 * sigma**2) * tau) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    Phi = lambda x: 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))  # noqa: E731
    expected = S * Phi(d1) - K * math.exp(-r * tau) * Phi(d2)

    scalar = call_price(spot=S, strike=K, r=r, sigma=sigma, tau=tau)
    vec = call_price_vec(spot=np.array([S, S]), strike=K, r=r, sigma=sigma, tau=tau)

    assert scalar == pytest.approx(expected, rel=1e-10)
    np.testing.assert_allclose(vec, [scalar, scalar], rtol=1e-12)


def test_zero_volatility_is_a_domain_error():
    with pytest.raises(DomainError):
        call_price_vec(spot=np.array([45.0]), strike=45.0, r=0.05, sigma=0.0, tau=1.0)


def test_zero_tau_is_a_domain_error():
    with pytest.raises(DomainError):
        call_price(spot=45.0, strike=45.0, r=0.05, sigma=0.2, tau=0.0)


def test_non_positive_spot_is_rejected():
    with pytest.raises(InvalidInputError):
        call_price_vec(
            spot=np.array([45.0, 0.0]), strike=45.0, r=0.05, sigma=0.2, tau=1.0
        )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"strike": float("nan")},
        {"r": float("nan")},
        {"sigma": float("inf")},
        {"tau": float("nan")},
    ],
)
def test_non_finite_contract_inputs_are_domain_errors(kwargs):
    args = {"strike": 45.0, "r": 0.05, "sigma": 0.2, "tau": 1.0, **kwargs}
    with pytest.raises(DomainError, match="must be finite"):
        call_price_vec(spot=np.array([45.0]), **args)


def test_infinite_spot_is_rejected():
    with pytest.raises(InvalidInputError):
        call_price_vec(
            spot=np.array([45.0, np.inf]), strike=45.0, r=0.05, sigma=0.2, tau=1.0
        )
