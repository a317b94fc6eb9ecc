"""Pytest helpers for the hist_var library."""

from __future__ import annotations

import numpy as np
import pytest

from hist_var.models.sampling import FixedSequenceSampler
from hist_var.types import ContractParameters


@pytest.fixture
def base_params() -> dict:
    """A small set of canonical contract parameters used across tests."""
    return {
        "maturity": 1.0,
        "interest_rate": 0.05,
        "volatility": 0.2,
        "strike_price": 45.0,
        "alpha": 0.05,
    }


@pytest.fixture
def make_params(base_params):
    """Factory fixture for ContractParameters with per-test overrides."""

    def _make(**overrides) -> ContractParameters:
        kwargs = {**base_params, **overrides}
        return ContractParameters(**kwargs)

    return _make


@pytest.fixture
def fixed_sampler():
    """Factory for a sampler that replays the given prices."""

    def _make(values) -> FixedSequenceSampler:
        return FixedSequenceSampler(values=list(values))

    return _make


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng
