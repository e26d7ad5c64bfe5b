"""
Bearing extraction from 3D vectors.

Azimuth is measured compass-style: atan2(dx, dy), so zero azimuth points
along +Y and azimuth increases toward +X. The spherical-triangle formulas
in spherical.py are written against this argument order; do not swap it
for the mathematical atan2(dy, dx).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .angles import deg, require_finite
from .vector import Vector3D


@dataclass(frozen=True)
class Bearing:
    """
    Direction expressed as azimuth and elevation (radians).

    Attributes:
        azimuth: atan2(dx, dy), zero along +Y, positive toward +X
        elevation: atan2(dz, horizontal distance), in [-pi/2, pi/2]
    """
    azimuth: float
    elevation: float

    @property
    def azimuth_deg(self) -> float:
        return deg(self.azimuth)

    @property
    def elevation_deg(self) -> float:
        return deg(self.elevation)

    def as_tuple(self) -> tuple[float, float]:
        return (self.azimuth, self.elevation)

    def __str__(self) -> str:
        return f"Bearing(az={self.azimuth_deg:.1f}deg, el={self.elevation_deg:.1f}deg)"


def bearing_of(vector: Vector3D) -> Bearing:
    """
    Bearing of a direction vector.

    A vector with no horizontal component gets azimuth atan2(0, 0) = 0;
    that is the defined result, not an error.

    Raises:
        InvalidInputError: If any component is NaN or infinite.
    """
    require_finite(vector=vector)
    horizontal = vector.horizontal_magnitude
    azimuth = math.atan2(vector.x, vector.y)
    elevation = math.atan2(vector.z, horizontal)
    return Bearing(azimuth, elevation)


def bearing_between(observer: Vector3D, target: Vector3D) -> Bearing:
    """Bearing from observer to target."""
    require_finite(observer=observer, target=target)
    return bearing_of(target - observer)
