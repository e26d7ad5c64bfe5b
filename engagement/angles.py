"""
Shared numeric utilities for the engagement geometry package.

Provides:
- Clamped inverse trigonometry (never raises on out-of-domain input)
- Degree/radian conversion
- Finiteness validation for public entry points
"""

from __future__ import annotations

import math
from typing import Any

from .vector import Vector3D


# =============================================================================
# CONSTANTS
# =============================================================================

# Below this |sin(j)| the law-of-sines division is treated as singular
SINE_RULE_EPSILON = 1e-6

# Magnitudes at or below this are not normalised
NORMALIZE_EPSILON = 1e-12


# =============================================================================
# ERRORS
# =============================================================================

class InvalidInputError(ValueError):
    """Raised when a public entry point receives NaN or infinite input."""


# =============================================================================
# CLAMPED INVERSE TRIG
# =============================================================================

def clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def safe_acos(x: float) -> float:
    """acos with its argument clamped to [-1, 1]."""
    return math.acos(clamp(x))


def safe_asin(x: float) -> float:
    """asin with its argument clamped to [-1, 1]."""
    return math.asin(clamp(x))


def rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def deg(radians: float) -> float:
    return radians * 180.0 / math.pi


# =============================================================================
# VALIDATION
# =============================================================================

def require_finite(**values: Any) -> None:
    """
    Check that every keyword argument is finite.

    Accepts plain numbers, Vector3D, and objects exposing ``as_tuple()``
    (bearings, orientations). NaN would otherwise propagate silently
    through every formula.

    Raises:
        InvalidInputError: Naming the first non-finite argument.
    """
    for name, value in values.items():
        if isinstance(value, Vector3D):
            try:
                finite = value.is_finite()
            except TypeError:
                raise InvalidInputError(f"{name} must be numeric, got {value!r}") from None
            if not finite:
                raise InvalidInputError(f"{name} must be finite, got {value!r}")
            continue

        if hasattr(value, "as_tuple"):
            components = value.as_tuple()
        else:
            components = (value,)

        for component in components:
            try:
                finite = math.isfinite(component)
            except TypeError:
                raise InvalidInputError(
                    f"{name} must be numeric, got {type(component).__name__}"
                ) from None
            if not finite:
                raise InvalidInputError(f"{name} must be finite, got {value!r}")
