from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from .exceptions import InvalidParameterError


class RankPolicy(str, Enum):
    CLAMP = "clamp"  # move an out-of-range rank to the nearest valid rank
    RAISE = "raise"  # reject an out-of-range rank


RngType = Literal["pcg64", "mt19937"]
Rounding = Literal["half_up", "half_even"]


@dataclass(frozen=True, slots=True)
class RandomConfig:
    seed: int | None = None
    rng_type: RngType = "pcg64"

    def __post_init__(self) -> None:
        if self.rng_type not in ("pcg64", "mt19937"):
            raise InvalidParameterError(f"Unsupported rng_type: {self.rng_type!r}")


@dataclass(frozen=True, slots=True)
class PriceConfig:
    """Normal distribution the synthetic price history is drawn from."""

    mean: float = 45.0
    std: float = 3.0

    def __post_init__(self) -> None:
        if self.std <= 0.0:
            raise InvalidParameterError(f"std must be > 0, got {self.std}")


@dataclass(frozen=True, slots=True)
class QuantileConfig:
    rounding: Rounding = "half_up"
    rank_policy: RankPolicy = RankPolicy.CLAMP

    def __post_init__(self) -> None:
        if self.rounding not in ("half_up", "half_even"):
            raise InvalidParameterError(f"Unsupported rounding: {self.rounding!r}")


@dataclass(frozen=True, slots=True)
class VaRConfig:
    """Pipeline settings that are not part of the option contract."""

    prices: PriceConfig = field(default_factory=PriceConfig)
    quantile: QuantileConfig = field(default_factory=QuantileConfig)
    random: RandomConfig = field(default_factory=RandomConfig)
