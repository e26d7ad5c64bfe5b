"""
3D vector type for the engagement geometry package.

World frame used throughout the package:
- X: east / starboard of the canonical body
- Y: north / canonical body forward (zero azimuth)
- Z: up

Vectors are immutable values; every operation returns a new vector.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


# =============================================================================
# VECTOR3D CLASS
# =============================================================================

@dataclass(frozen=True, eq=False)
class Vector3D:
    """
    Immutable 3D vector for positions and directions in the world frame.

    Magnitude is unrestricted; unit length is only guaranteed where a
    function documents it (e.g. the forward vector).

    Equality is tolerance-based, so vectors are not hashable.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3D:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3D:
        if scalar == 0:
            raise ValueError("Cannot divide vector by zero")
        return Vector3D(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        """Equality check with tolerance."""
        if not isinstance(other, Vector3D):
            return False
        eps = 1e-10
        return (abs(self.x - other.x) < eps and
                abs(self.y - other.y) < eps and
                abs(self.z - other.z) < eps)

    def dot(self, other: Vector3D) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        """Cross product."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    @property
    def magnitude(self) -> float:
        """Vector magnitude (length)."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    @property
    def horizontal_magnitude(self) -> float:
        """Length of the projection onto the X-Y plane."""
        return math.sqrt(self.x**2 + self.y**2)

    def normalized(self) -> Vector3D:
        """Return unit vector in same direction (zero vector stays zero)."""
        mag = self.magnitude
        if mag == 0:
            return Vector3D(0.0, 0.0, 0.0)
        return self / mag

    def distance_to(self, other: Vector3D) -> float:
        """Distance to another point."""
        return (self - other).magnitude

    def angle_to(self, other: Vector3D) -> float:
        """Angle between vectors in radians."""
        mags = self.magnitude * other.magnitude
        if mags == 0:
            return 0.0
        # Clamp to avoid floating point errors with acos
        cos_angle = max(-1.0, min(1.0, self.dot(other) / mags))
        return math.acos(cos_angle)

    def rotate_around_axis(self, axis: Vector3D, angle_rad: float) -> Vector3D:
        """Rotate vector around an axis using Rodrigues' rotation formula."""
        k = axis.normalized()
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)

        # v_rot = v*cos(a) + (k x v)*sin(a) + k*(k.v)*(1-cos(a))
        return (self * cos_a +
                k.cross(self) * sin_a +
                k * k.dot(self) * (1 - cos_a))

    def is_finite(self) -> bool:
        """True if no component is NaN or infinite."""
        return (math.isfinite(self.x) and
                math.isfinite(self.y) and
                math.isfinite(self.z))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_tuple(cls, t: tuple[float, float, float]) -> Vector3D:
        return cls(float(t[0]), float(t[1]), float(t[2]))

    def to_array(self) -> np.ndarray:
        """Convert to a float64 numpy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, a: np.ndarray) -> Vector3D:
        """Create from any length-3 array-like."""
        values = np.asarray(a, dtype=float).reshape(3)
        return cls(float(values[0]), float(values[1]), float(values[2]))

    @classmethod
    def zero(cls) -> Vector3D:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector3D:
        """Unit vector in X direction (east)."""
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vector3D:
        """Unit vector in Y direction (canonical forward)."""
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vector3D:
        """Unit vector in Z direction (up)."""
        return cls(0.0, 0.0, 1.0)

    def __repr__(self) -> str:
        return f"Vector3D({self.x:.6g}, {self.y:.6g}, {self.z:.6g})"
