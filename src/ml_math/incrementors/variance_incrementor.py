"""Running variance built on a running mean.

The variance recurrence needs the mean from before each update, so the
accumulator owns a MeanIncrementor and reads it before advancing it.
"""

import numpy as np
from typing import Any
from ..utils.precision import FloatLike, resolve_dtype
from .mean_incrementor import MeanIncrementor


class VarianceIncrementor:
    """Running variance over a stream of scalars.

    For ``n`` values already seen with mean ``m`` and variance ``s``,
    adding ``x`` sets::

        s = (n - 1) / n * s + (x - m) ** 2 / (n + 1)

    which is the incremental form of the sample variance (``N - 1``
    denominator for ``N`` values). The variance is exactly 0 after zero
    or one value. See
    http://math.stackexchange.com/questions/102978/incremental-computation-of-standard-deviation

    Parameters
    ----------
    dtype : type, np.dtype or str
        Floating-point width of the stored statistics (float32 or float64).

    Attributes
    ----------
    variance : np.floating
        Current running variance.
    mean : np.floating
        Current running mean, read from the owned MeanIncrementor.
    count : int
        Number of values added, read from the owned MeanIncrementor.
    """

    def __init__(self, dtype: Any = np.float64):
        self._dtype = resolve_dtype(dtype)
        self._variance = self._dtype(0.0)
        self._mean_incrementor = MeanIncrementor(dtype=self._dtype)

    def add(self, value: FloatLike) -> None:
        """Update the variance and the owned mean with another value.

        Parameters
        ----------
        value : float
            New observation.
        """
        value = self._dtype(value)

        # The recurrence uses the count and mean from before this value
        n = self._mean_incrementor.count
        previous_mean = self._mean_incrementor.mean
        self._mean_incrementor.add(value)

        if n == 0:
            self._variance = self._dtype(0.0)
        else:
            self._variance = (
                self._dtype(n - 1) / self._dtype(n) * self._variance
                + (value - previous_mean) ** 2 / self._dtype(n + 1)
            )

    @property
    def variance(self) -> np.floating:
        """Current running variance."""
        return self._variance

    @property
    def mean(self) -> np.floating:
        return self._mean_incrementor.mean

    @property
    def count(self) -> int:
        return self._mean_incrementor.count

    @property
    def dtype(self) -> type:
        return self._dtype

    def __repr__(self) -> str:
        return (f"VarianceIncrementor(count={self.count}, "
                f"mean={self.mean}, variance={self._variance})")
