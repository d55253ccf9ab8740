"""Tests for precision resolution."""

import numpy as np
import pytest
from ml_math.utils.precision import resolve_dtype


class TestResolveDtype:
    """Test cases for resolve_dtype."""

    @pytest.mark.parametrize("dtype", [np.float64, float, "float64", np.dtype("float64")])
    def test_float64(self, dtype):
        assert resolve_dtype(dtype) is np.float64

    @pytest.mark.parametrize("dtype", [np.float32, "float32", np.dtype(np.float32)])
    def test_float32(self, dtype):
        assert resolve_dtype(dtype) is np.float32

    def test_default(self):
        """Test that the default width is 64-bit."""
        assert resolve_dtype() is np.float64

    @pytest.mark.parametrize("dtype", [int, np.int32, np.float16, complex, "not_a_type"])
    def test_unsupported(self, dtype):
        """Test error conditions."""
        with pytest.raises(ValueError, match="expected float32 or float64"):
            resolve_dtype(dtype)
