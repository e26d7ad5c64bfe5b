"""
Orientation solver: yaw/pitch/roll to body directions.

The canonical body points along +Y with +Z up. Rotations are applied to
that vector in body order - roll about the longitudinal axis, pitch about
the lateral axis, then yaw about the world vertical - each as an explicit
two-component rotation on the axes it affects.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .angles import NORMALIZE_EPSILON, rad, require_finite
from .vector import Vector3D


# Below this |forward x up| the forward vector is treated as vertical
VERTICAL_AXIS_EPSILON = 1e-6


# =============================================================================
# DATACLASSES
# =============================================================================

@dataclass(frozen=True)
class Orientation:
    """
    Observer attitude in radians.

    Angles are unrestricted and never wrapped; callers may accumulate
    yaw well past 2*pi.
    """
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    @classmethod
    def from_degrees(cls, yaw: float, pitch: float, roll: float) -> Orientation:
        return cls(rad(yaw), rad(pitch), rad(roll))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.yaw, self.pitch, self.roll)


@dataclass(frozen=True)
class BodyAxes:
    """
    Orthonormal body frame.

    Attributes:
        forward: Nose direction (unit vector)
        right: Starboard wing direction, rolled with the body
        up: Dorsal direction, rolled with the body
    """
    forward: Vector3D
    right: Vector3D
    up: Vector3D


# =============================================================================
# FORWARD VECTOR
# =============================================================================

def forward_vector(yaw: float, pitch: float, roll: float) -> Vector3D:
    """
    Unit forward vector for the given attitude.

    Args:
        yaw: Rotation about world Z (radians)
        pitch: Rotation about body X (radians)
        roll: Rotation about body Y (radians)

    Returns:
        Unit vector in world coordinates. A vector whose magnitude falls
        to NORMALIZE_EPSILON or below is returned unnormalised.

    Raises:
        InvalidInputError: If any angle is NaN or infinite.
    """
    require_finite(yaw=yaw, pitch=pitch, roll=roll)

    cy, sy = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cr, sr = math.cos(roll), math.sin(roll)

    x, y, z = 0.0, 1.0, 0.0

    # Roll about Y: leaves the canonical forward unchanged
    x, z = cr * x + sr * z, -sr * x + cr * z

    # Pitch about X
    y, z = cp * y - sp * z, sp * y + cp * z

    # Yaw about Z
    x, y = cy * x - sy * y, sy * x + cy * y

    n = math.sqrt(x * x + y * y + z * z)
    if n > NORMALIZE_EPSILON:
        x, y, z = x / n, y / n, z / n
    return Vector3D(x, y, z)


def orientation_forward(orientation: Orientation) -> Vector3D:
    """forward_vector() for an Orientation value."""
    return forward_vector(orientation.yaw, orientation.pitch, orientation.roll)


# =============================================================================
# BODY AXES
# =============================================================================

def body_axes(yaw: float, pitch: float, roll: float) -> BodyAxes:
    """
    Full body frame for drawing the observer.

    Right is taken from forward x world-up (falling back to +X when the
    nose points straight up or down), up completes the frame, and both
    are then rolled about the forward axis.
    """
    fwd = forward_vector(yaw, pitch, roll)

    right = fwd.cross(Vector3D.unit_z())
    if right.magnitude < VERTICAL_AXIS_EPSILON:
        right = Vector3D.unit_x()
    else:
        right = right.normalized()
    up = right.cross(fwd)

    if roll != 0.0:
        right = right.rotate_around_axis(fwd, roll)
        up = up.rotate_around_axis(fwd, roll)

    return BodyAxes(forward=fwd, right=right, up=up)
