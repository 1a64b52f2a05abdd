"""Debug utilities."""

from __future__ import annotations
import os

import numpy as np

DEBUG_ENV_VAR = "GLOBEFRAME_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def format_vector(v) -> str:
    """Format a 3-vector for log lines."""
    v = np.asarray(v, dtype=np.float64)
    return "[" + ", ".join(f"{c:.3f}" for c in v) + "]"


def debug_vector_info(name: str, v):
    """Print a vector and its norm when debug mode is enabled."""
    if is_debug_enabled():
        v = np.asarray(v, dtype=np.float64)
        print(f"[{name}] {format_vector(v)} |v|={np.linalg.norm(v):.6f}")
