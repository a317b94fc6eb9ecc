from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

# typing only
FloatArray: TypeAlias = NDArray[np.floating]
SeriesLike: TypeAlias = Sequence[float] | np.ndarray

# Runtime types
FloatDType = np.float64  # runtime dtype only
