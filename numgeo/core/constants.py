"""Central numerical tolerances and integer range limits.

This module centralizes the default comparison tolerances used across the
kernel so they can be tuned consistently and referenced without scattering
literals.
"""
from __future__ import annotations

# Default comparison tolerances
DEFAULT_FRACTION_TOLERANCE: float = 0.0001  # fractional (floating-point) values
DEFAULT_FLOAT32_TOLERANCE: float = DEFAULT_FRACTION_TOLERANCE
DEFAULT_FLOAT64_TOLERANCE: float = DEFAULT_FRACTION_TOLERANCE
DEFAULT_INTEGER_TOLERANCE: int = 0               # integers compare exactly

# Signed 32-bit range used to clamp comparison differences
INT32_MIN: int = -2 ** 31
INT32_MAX: int = 2 ** 31 - 1

__all__ = [
    'DEFAULT_FRACTION_TOLERANCE',
    'DEFAULT_FLOAT32_TOLERANCE',
    'DEFAULT_FLOAT64_TOLERANCE',
    'DEFAULT_INTEGER_TOLERANCE',
    'INT32_MIN',
    'INT32_MAX',
]
