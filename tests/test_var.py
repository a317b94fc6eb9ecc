import logging

import numpy as np
import pytest

from hist_var.config import QuantileConfig, RankPolicy
from hist_var.exceptions import InvalidParameterError
from hist_var.risk.var import (
    expected_shortfall,
    historical_var,
    quantile_rank,
    tail_statistics,
)

CHANGES = [-50.0, -10.0, 0.0, 10.0, 50.0]


def test_worked_example_selects_first_order_statistic():
    """alpha=0.2, k=5 -> rank round(1.0)=1 -> -50."""
    assert quantile_rank(0.2, 5) == 1
    assert historical_var(CHANGES, 0.2) == -50.0


def test_var_sorts_before_selecting():
    shuffled = [10.0, -10.0, 50.0, -50.0, 0.0]
    assert historical_var(shuffled, 0.4) == -10.0


def test_alpha_zero_clamps_to_worst_observation(caplog):
    with caplog.at_level(logging.WARNING, logger="hist_var.risk.var"):
        rank = quantile_rank(0.0, 5)

    assert rank == 1
    assert "clamped to 1" in caplog.text
    assert historical_var(CHANGES, 0.0) == -50.0


def test_alpha_zero_raises_under_raise_policy():
    cfg = QuantileConfig(rank_policy=RankPolicy.RAISE)
    with pytest.raises(InvalidParameterError, match="out of range"):
        historical_var(CHANGES, 0.0, cfg)


def test_alpha_one_selects_best_observation():
    assert quantile_rank(1.0, 5) == 5
    assert historical_var(CHANGES, 1.0) == 50.0


@pytest.mark.parametrize(
    "rounding, expected",
    [("half_up", 3), ("half_even", 2)],
)
def test_half_rank_rounding(rounding, expected):
    """alpha*k = 2.5 exactly; half_up is the default."""
    assert quantile_rank(0.5, 5, QuantileConfig(rounding=rounding)) == expected


def test_default_rounding_is_half_up():
    assert quantile_rank(0.5, 5) == 3
    # 0.1 * 25 = 2.5 in floating point
    assert quantile_rank(0.1, 25) == 3


@pytest.mark.parametrize("alpha", [-0.01, 1.01])
def test_alpha_outside_unit_interval_is_rejected(alpha):
    with pytest.raises(InvalidParameterError):
        quantile_rank(alpha, 10)


def test_expected_shortfall_averages_the_tail():
    assert expected_shortfall(CHANGES, 0.4) == pytest.approx(-30.0)
    assert expected_shortfall(CHANGES, 0.2) == pytest.approx(-50.0)


def test_tail_statistics_matches_separate_calls():
    rng = np.random.default_rng(3)
    x = rng.normal(size=500)
    var, es = tail_statistics(x, 0.05)

    assert var == historical_var(x, 0.05)
    assert es == pytest.approx(expected_shortfall(x, 0.05))
    assert es <= var
