from __future__ import annotations

import logging
import numbers
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

import numpy as np

from ..config import RandomConfig
from ..exceptions import InvalidParameterError
from ..typing import FloatArray, FloatDType

logger = logging.getLogger(__name__)


class NormalSampler(Protocol):
    """Anything that can draw ``n`` independent Normal(mean, std) samples."""

    def sample(self, n: int, mean: float, std: float) -> FloatArray: ...


@dataclass(frozen=True, slots=True)
class GeneratorSampler:
    """
    Normal sampler backed by a :class:`numpy.random.Generator`.

    Parameters
    ----------
    rng : np.random.Generator, optional
        Random number generator. If omitted, a new default_rng() is created.
    """

    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def sample(self, n: int, mean: float, std: float) -> FloatArray:
        return self.rng.normal(loc=mean, scale=std, size=int(n)).astype(FloatDType)


@dataclass(frozen=True, slots=True)
class FixedSequenceSampler:
    """Replays a fixed sequence; ``mean`` and ``std`` are ignored."""

    values: Sequence[float]

    def sample(self, n: int, mean: float, std: float) -> FloatArray:
        if n > len(self.values):
            raise InvalidParameterError(
                f"requested {n} samples but only {len(self.values)} are available"
            )
        return np.asarray(self.values[:n], dtype=FloatDType)


def make_rng(cfg: RandomConfig) -> np.random.Generator:
    if cfg.rng_type == "mt19937":
        return np.random.Generator(np.random.MT19937(cfg.seed))
    return np.random.Generator(np.random.PCG64(cfg.seed))


def make_sampler(
    cfg: RandomConfig | None = None, rng: np.random.Generator | None = None
) -> GeneratorSampler:
    """
    Build the production sampler.

    An explicit `rng` takes precedence over `cfg`; with neither, the
    generator is seeded from OS entropy.
    """
    if rng is not None:
        return GeneratorSampler(rng=rng)
    return GeneratorSampler(rng=make_rng(cfg or RandomConfig()))


def generate_prices(
    n: int, mean: float, std: float, sampler: NormalSampler
) -> FloatArray:
    """
    Draw a synthetic price history of length `n`.

    The draws are independent; downstream stages treat the result as a
    chronologically ordered path.

    Raises
    ------
    InvalidParameterError
        If `n` is not a positive integer. Checked before the sampler is called.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n <= 0:
        raise InvalidParameterError(f"n must be a positive integer, got {n}")

    draws = sampler.sample(int(n), mean, std)
    # own copy, so freezing it never touches the sampler's buffer
    prices = np.array(draws, dtype=FloatDType, copy=True)
    if prices.shape != (n,):
        raise InvalidParameterError(
            f"sampler returned shape {prices.shape}, expected ({n},)"
        )
    # the path is read-only from here on
    prices.setflags(write=False)
    logger.debug("generated %d prices (mean=%g, std=%g)", n, mean, std)
    return prices
