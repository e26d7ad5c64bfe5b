"""
Per-tick engagement state and pipeline.

The external loop owns an EngagementState, feeds it through advance()
with that tick's control axes, and calls evaluate() to get the bearings
and reticle angles. Both functions return new values; nothing here keeps
state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from .angles import InvalidInputError, require_finite
from .bearing import Bearing, bearing_between, bearing_of
from .config import EngagementConfig
from .orientation import Orientation, orientation_forward
from .spherical import AngleSet, solve
from .vector import Vector3D


# =============================================================================
# STATE
# =============================================================================

@dataclass(frozen=True)
class EngagementState:
    """
    Observer, target, and observer attitude for one tick.

    Attributes:
        observer: Observer position (world units)
        target: Target position (world units)
        orientation: Observer yaw/pitch/roll (radians)
    """
    observer: Vector3D = field(default_factory=Vector3D.zero)
    target: Vector3D = field(default_factory=Vector3D.unit_y)
    orientation: Orientation = field(default_factory=Orientation)

    @classmethod
    def default(cls) -> EngagementState:
        """Starting scene: aircraft at (0,0,2), target at (8,6,4)."""
        return cls(
            observer=Vector3D(0.0, 0.0, 2.0),
            target=Vector3D(8.0, 6.0, 4.0),
            orientation=Orientation.from_degrees(20.0, -5.0, 15.0),
        )


@dataclass(frozen=True)
class ControlInput:
    """
    Control axes for one tick, nominally in [-1, 1].

    Attributes:
        observer_move: Observer translation axes (x, y, z)
        target_move: Target translation axes (x, y, z)
        yaw: Yaw axis (positive = increase yaw)
        pitch: Pitch axis (positive = nose up)
        roll: Roll axis
    """
    observer_move: Vector3D = field(default_factory=Vector3D.zero)
    target_move: Vector3D = field(default_factory=Vector3D.zero)
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0


@dataclass(frozen=True)
class EngagementSolution:
    """Everything the presentation layer needs from one tick."""
    forward: Vector3D
    target_bearing: Bearing
    reference_bearing: Bearing
    angles: AngleSet
    range: float


# =============================================================================
# PIPELINE
# =============================================================================

def advance(
    state: EngagementState,
    controls: ControlInput,
    dt: float,
    config: Optional[EngagementConfig] = None
) -> EngagementState:
    """
    Apply one tick of control input.

    Positions move at config.move_speed per unit axis, angles at
    config.rotation_speed_rad per unit axis. Angles accumulate without
    wrapping.

    Raises:
        InvalidInputError: If dt is negative or anything is non-finite.
    """
    if config is None:
        config = EngagementConfig()
    require_finite(
        dt=dt,
        observer_move=controls.observer_move,
        target_move=controls.target_move,
        yaw=controls.yaw,
        pitch=controls.pitch,
        roll=controls.roll,
    )
    if dt < 0:
        raise InvalidInputError(f"dt must be non-negative, got {dt}")

    step = config.move_speed * dt
    turn = config.rotation_speed_rad * dt
    o = state.orientation

    return replace(
        state,
        observer=state.observer + controls.observer_move * step,
        target=state.target + controls.target_move * step,
        orientation=Orientation(
            yaw=o.yaw + controls.yaw * turn,
            pitch=o.pitch + controls.pitch * turn,
            roll=o.roll + controls.roll * turn,
        ),
    )


def evaluate(state: EngagementState) -> EngagementSolution:
    """Run forward vector -> bearings -> solver for one tick."""
    target_bearing = bearing_between(state.observer, state.target)
    forward = orientation_forward(state.orientation)
    reference_bearing = bearing_of(forward)
    angles = solve(target_bearing, reference_bearing)

    return EngagementSolution(
        forward=forward,
        target_bearing=target_bearing,
        reference_bearing=reference_bearing,
        angles=angles,
        range=state.observer.distance_to(state.target),
    )
