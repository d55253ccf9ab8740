"""ml_math: Streaming mean and variance accumulators.

A small library for maintaining running statistics over a stream of
scalar values, one value at a time, without storing the history.
"""

__version__ = "0.1.0"

from .incrementors.mean_incrementor import MeanIncrementor
from .incrementors.variance_incrementor import VarianceIncrementor

__all__ = ["MeanIncrementor", "VarianceIncrementor"]
