"""Type conversion utilities."""

from __future__ import annotations
from typing import List, Union
import numpy as np


def to_vector3(
    x: Union[np.ndarray, list, tuple],
    dtype: np.dtype = np.float64
) -> np.ndarray:
    """
    Convert input to a (3,) NumPy vector.

    Args:
        x: Input (numpy array, list or tuple with three components)
        dtype: Target dtype (default float64; Earth-fixed coordinates
            lose centimetres in float32)

    Returns:
        (3,) NumPy array

    Raises:
        ValueError: If input does not hold exactly three components
    """
    v = np.asarray(x, dtype=dtype).reshape(-1)
    if v.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {v.shape}")
    return v


def to_float_list(x) -> List[float]:
    """Convert an array-like to a plain list of Python floats (JSON friendly)."""
    return [float(c) for c in np.asarray(x, dtype=np.float64).reshape(-1)]


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Return v scaled to unit length.

    Raises:
        ValueError: If v has zero length
    """
    v = np.asarray(v, dtype=np.float64)
    n = np.linalg.norm(v)
    if n == 0.0:
        raise ValueError("Cannot normalize a zero-length vector")
    return v / n
