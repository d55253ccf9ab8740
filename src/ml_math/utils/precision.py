"""Floating-point width handling for the incrementors.

Both accumulators keep their state in a single numpy scalar type so the
same code serves 32-bit and 64-bit use cases.
"""

import numpy as np
from typing import Any, Type, Union

FloatLike = Union[float, int, np.floating, np.integer]

SUPPORTED_DTYPES = (np.float32, np.float64)


def resolve_dtype(dtype: Any = np.float64) -> Type[np.floating]:
    """Resolve a user supplied precision to a numpy scalar type.

    Parameters
    ----------
    dtype : type, np.dtype or str
        ``np.float32``, ``np.float64``, their ``np.dtype`` objects,
        the strings ``"float32"``/``"float64"``, or the builtin ``float``.

    Returns
    -------
    type
        ``np.float32`` or ``np.float64``.
    """
    try:
        scalar_type = np.dtype(dtype).type
    except TypeError:
        raise ValueError(f"Unsupported dtype {dtype!r}; expected float32 or float64")

    if scalar_type not in SUPPORTED_DTYPES:
        raise ValueError(
            f"Unsupported dtype {np.dtype(scalar_type).name}; "
            f"expected float32 or float64"
        )
    return scalar_type
