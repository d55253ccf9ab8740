"""Running arithmetic mean.

Maintains the mean of all values added so far as a weighted blend of the
previous mean and each new value.
"""

import numpy as np
from typing import Any
from ..utils.precision import FloatLike, resolve_dtype


class MeanIncrementor:
    """Running mean over a stream of scalars.

    Usage:
        inc = MeanIncrementor()
        for x_t in stream:
            inc.add(x_t)
        inc.mean, inc.count

    Parameters
    ----------
    dtype : type, np.dtype or str
        Floating-point width of the stored mean (float32 or float64).

    Attributes
    ----------
    mean : np.floating
        Current running mean, 0 before any value is added.
    count : int
        Number of values added so far.
    """

    def __init__(self, dtype: Any = np.float64):
        self._dtype = resolve_dtype(dtype)
        self._mean = self._dtype(0.0)
        self._count = 0

    def add(self, value: FloatLike) -> None:
        """Update the mean with another value.

        The new value is weighted by one over the new count. No validation
        is done; NaN or infinite input propagates into the mean.

        Parameters
        ----------
        value : float
            New observation.
        """
        value = self._dtype(value)

        if self._count == 0:
            # First value is the mean
            self._mean = value
        else:
            weight = self._dtype(1.0) / self._dtype(self._count + 1)
            self._mean = self._mean * (self._dtype(1.0) - weight) + value * weight

        self._count += 1

    @property
    def mean(self) -> np.floating:
        """Current running mean."""
        return self._mean

    @property
    def count(self) -> int:
        """Number of values added."""
        return self._count

    @property
    def dtype(self) -> type:
        return self._dtype

    def __repr__(self) -> str:
        return f"MeanIncrementor(count={self._count}, mean={self._mean})"
