"""Engagement geometry for HUD target reticles."""

from .vector import Vector3D

from .angles import (
    InvalidInputError,
    SINE_RULE_EPSILON,
    clamp,
    safe_acos,
    safe_asin,
    rad,
    deg,
)

from .orientation import (
    Orientation,
    BodyAxes,
    forward_vector,
    orientation_forward,
    body_axes,
)

from .bearing import (
    Bearing,
    bearing_of,
    bearing_between,
)

from .spherical import (
    AngleSet,
    solve,
)

from .config import (
    HudConfig,
    EngagementConfig,
)

from .hud import (
    HudMarker,
    project_marker,
    marker_within_reticle,
    range_ring_radii,
    format_bearing_readout,
    format_angle_readout,
    format_controls_help,
)

from .simulation import (
    EngagementState,
    ControlInput,
    EngagementSolution,
    advance,
    evaluate,
)

__all__ = [
    # Vectors
    "Vector3D",
    # Numeric utilities
    "InvalidInputError",
    "SINE_RULE_EPSILON",
    "clamp",
    "safe_acos",
    "safe_asin",
    "rad",
    "deg",
    # Orientation
    "Orientation",
    "BodyAxes",
    "forward_vector",
    "orientation_forward",
    "body_axes",
    # Bearings
    "Bearing",
    "bearing_of",
    "bearing_between",
    # Solver
    "AngleSet",
    "solve",
    # Configuration
    "HudConfig",
    "EngagementConfig",
    # HUD
    "HudMarker",
    "project_marker",
    "marker_within_reticle",
    "range_ring_radii",
    "format_bearing_readout",
    "format_angle_readout",
    "format_controls_help",
    # Engagement loop
    "EngagementState",
    "ControlInput",
    "EngagementSolution",
    "advance",
    "evaluate",
]
