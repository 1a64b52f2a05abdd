"""Common utilities for camera framing."""

from .conversion import (
    to_vector3,
    to_float_list,
    normalize,
)
from .validation import (
    validate_region_bounds,
    validate_heights,
    validate_viewport,
    validate_non_negative,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_vector_info,
    format_vector,
)

__all__ = [
    # Conversion
    "to_vector3",
    "to_float_list",
    "normalize",

    # Validation
    "validate_region_bounds",
    "validate_heights",
    "validate_viewport",
    "validate_non_negative",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_vector_info",
    "format_vector",
]
