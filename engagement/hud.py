"""
HUD projection and text readouts.

Presentation layer on top of the solver: consumes an AngleSet plus the
observer roll and produces a 2D reticle offset. The reticle sits at
radius scale * j from screen centre (clamped) and clock angle G + roll,
with screen y growing downward.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .angles import deg, rad, require_finite
from .bearing import Bearing
from .config import HudConfig
from .spherical import AngleSet


# Short descriptions for the annotated readout
ANGLE_LABELS = {
    "j": "separation",
    "J": "pole dihedral",
    "E": "reference angle",
    "F": "sine-rule angle",
    "G": "reticle clock",
}

CONTROLS_HELP = (
    "Controls: Aircraft I/K J/L U/O, Target W/S A/D Q/E, "
    "Yaw/Pitch Arrows, Roll Z/X, Orbit Cam RMB"
)


@dataclass(frozen=True)
class HudMarker:
    """
    Reticle position relative to screen centre.

    Attributes:
        radius_px: Distance from centre after clamping
        angle_rad: Clock angle G + roll (0 = up, positive = clockwise)
        offset_x: Horizontal offset, positive right
        offset_y: Vertical offset, positive down
        clamped: True if the radius hit the configured maximum
    """
    radius_px: float
    angle_rad: float
    offset_x: float
    offset_y: float
    clamped: bool

    def screen_position(self, center_x: float, center_y: float) -> tuple[float, float]:
        return (center_x + self.offset_x, center_y + self.offset_y)


def project_marker(
    angles: AngleSet,
    roll: float,
    config: Optional[HudConfig] = None
) -> HudMarker:
    """
    Map solver output to a reticle offset.

    Args:
        angles: Solver output for this tick
        roll: Observer roll in radians (same sign as G)
        config: Screen parameters (defaults to HudConfig())

    Returns:
        HudMarker relative to screen centre
    """
    if config is None:
        config = HudConfig()
    require_finite(separation=angles.separation, marker_angle=angles.marker_angle, roll=roll)

    radius = config.scale_px_per_rad * angles.separation
    max_radius = config.max_radius_px
    clamped = radius > max_radius
    if clamped:
        radius = max_radius

    angle = angles.marker_angle + roll
    return HudMarker(
        radius_px=radius,
        angle_rad=angle,
        offset_x=radius * math.sin(angle),
        offset_y=-radius * math.cos(angle),
        clamped=clamped,
    )


def marker_within_reticle(marker: HudMarker, config: Optional[HudConfig] = None) -> bool:
    """
    True when the reticle circle, drawn at the marker, covers screen centre.

    This is the on-boresight cue: the target lies within
    reticle_radius_px / scale_px_per_rad radians of the reference direction
    as measured by j.
    """
    if config is None:
        config = HudConfig()
    return marker.radius_px <= config.reticle_radius_px


def range_ring_radii(config: Optional[HudConfig] = None) -> list[int]:
    """Pixel radii of the fixed angular reference rings."""
    if config is None:
        config = HudConfig()
    return [int(config.scale_px_per_rad * rad(ring)) for ring in config.range_rings_deg]


# -----------------------------------------------------------------------------
# Text readouts
# -----------------------------------------------------------------------------

def format_bearing_readout(target: Bearing, reference: Bearing) -> str:
    return (
        f"AzT={deg(target.azimuth):.1f} deg  ElT={deg(target.elevation):.1f} deg  "
        f"AzR={deg(reference.azimuth):.1f} deg  ElR={deg(reference.elevation):.1f} deg"
    )


def format_angle_readout(angles: AngleSet, annotated: bool = False) -> str:
    """
    One-line readout of the solver angles in degrees.

    With annotated=True each value is followed by its label, e.g.
    "j=12.00 deg (separation)".
    """
    parts = []
    for name, value in angles.as_degrees().items():
        text = f"{name}={value:.2f} deg"
        if annotated:
            text += f" ({ANGLE_LABELS[name]})"
        parts.append(text)
    return "  ".join(parts)


def format_controls_help() -> str:
    return CONTROLS_HELP
