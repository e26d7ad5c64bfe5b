"""
Configuration for the HUD projector and the engagement loop.

Values come from, in order of use:
- Keyword arguments / dataclass defaults
- A JSON file (EngagementConfig.from_json)
- Environment variables, optionally via a .env file (EngagementConfig.from_env)
"""

import json
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from dotenv import load_dotenv


# Defaults taken from the reference HUD layout
DEFAULT_SCALE_PX_PER_RAD = 220.0
DEFAULT_SCREEN_WIDTH = 1280
DEFAULT_SCREEN_HEIGHT = 720
DEFAULT_MAX_RADIUS_FRACTION = 0.45
DEFAULT_RANGE_RINGS_DEG = (10.0, 20.0, 30.0)
DEFAULT_RETICLE_RADIUS_PX = 12

DEFAULT_MOVE_SPEED = 5.0  # world units per second
DEFAULT_ROTATION_SPEED_DEG = 45.0  # degrees per second


@dataclass
class HudConfig:
    """Screen-space parameters for the reticle projection."""
    scale_px_per_rad: float = DEFAULT_SCALE_PX_PER_RAD
    screen_width: int = DEFAULT_SCREEN_WIDTH
    screen_height: int = DEFAULT_SCREEN_HEIGHT
    max_radius_fraction: float = DEFAULT_MAX_RADIUS_FRACTION  # of screen height
    range_rings_deg: Tuple[float, ...] = DEFAULT_RANGE_RINGS_DEG
    reticle_radius_px: int = DEFAULT_RETICLE_RADIUS_PX

    def __post_init__(self) -> None:
        if not math.isfinite(self.scale_px_per_rad) or self.scale_px_per_rad <= 0:
            raise ValueError("HUD scale must be positive")
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError("Screen dimensions must be positive")
        if not 0.0 < self.max_radius_fraction <= 1.0:
            raise ValueError("max_radius_fraction must be in (0, 1]")
        if self.reticle_radius_px <= 0:
            raise ValueError("reticle_radius_px must be positive")
        self.range_rings_deg = tuple(float(r) for r in self.range_rings_deg)

    @property
    def max_radius_px(self) -> float:
        """Largest reticle offset from screen centre."""
        return self.screen_height * self.max_radius_fraction

    @property
    def center(self) -> Tuple[int, int]:
        return (self.screen_width // 2, self.screen_height // 2)


@dataclass
class EngagementConfig:
    """Complete configuration for an engagement loop."""
    hud: HudConfig = field(default_factory=HudConfig)
    move_speed: float = DEFAULT_MOVE_SPEED
    rotation_speed_deg: float = DEFAULT_ROTATION_SPEED_DEG

    def __post_init__(self) -> None:
        if not math.isfinite(self.move_speed) or self.move_speed <= 0:
            raise ValueError("Move speed must be positive")
        if not math.isfinite(self.rotation_speed_deg) or self.rotation_speed_deg <= 0:
            raise ValueError("Rotation speed must be positive")

    @property
    def rotation_speed_rad(self) -> float:
        return math.radians(self.rotation_speed_deg)

    @classmethod
    def from_json(cls, path: str) -> 'EngagementConfig':
        """Load configuration from JSON file."""
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Engagement config not found: {path}")

        with open(config_path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EngagementConfig':
        """Create configuration from dictionary."""
        hud_data = data.get("hud", {})
        hud = HudConfig(
            scale_px_per_rad=hud_data.get("scale_px_per_rad", DEFAULT_SCALE_PX_PER_RAD),
            screen_width=hud_data.get("screen_width", DEFAULT_SCREEN_WIDTH),
            screen_height=hud_data.get("screen_height", DEFAULT_SCREEN_HEIGHT),
            max_radius_fraction=hud_data.get("max_radius_fraction", DEFAULT_MAX_RADIUS_FRACTION),
            range_rings_deg=tuple(hud_data.get("range_rings_deg", DEFAULT_RANGE_RINGS_DEG)),
            reticle_radius_px=hud_data.get("reticle_radius_px", DEFAULT_RETICLE_RADIUS_PX),
        )

        return cls(
            hud=hud,
            move_speed=data.get("move_speed", DEFAULT_MOVE_SPEED),
            rotation_speed_deg=data.get("rotation_speed_deg", DEFAULT_ROTATION_SPEED_DEG),
        )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'EngagementConfig':
        """
        Build configuration from ENGAGEMENT_* environment variables.

        Args:
            dotenv_path: Optional .env file to load first (defaults to the
                usual python-dotenv search). Existing variables win.
        """
        load_dotenv(dotenv_path)

        hud = HudConfig(
            scale_px_per_rad=_env_float("ENGAGEMENT_HUD_SCALE", DEFAULT_SCALE_PX_PER_RAD),
            screen_width=int(_env_float("ENGAGEMENT_SCREEN_WIDTH", DEFAULT_SCREEN_WIDTH)),
            screen_height=int(_env_float("ENGAGEMENT_SCREEN_HEIGHT", DEFAULT_SCREEN_HEIGHT)),
            max_radius_fraction=_env_float(
                "ENGAGEMENT_MAX_RADIUS_FRACTION", DEFAULT_MAX_RADIUS_FRACTION
            ),
        )

        return cls(
            hud=hud,
            move_speed=_env_float("ENGAGEMENT_MOVE_SPEED", DEFAULT_MOVE_SPEED),
            rotation_speed_deg=_env_float(
                "ENGAGEMENT_ROTATION_SPEED_DEG", DEFAULT_ROTATION_SPEED_DEG
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "hud": {
                "scale_px_per_rad": self.hud.scale_px_per_rad,
                "screen_width": self.hud.screen_width,
                "screen_height": self.hud.screen_height,
                "max_radius_fraction": self.hud.max_radius_fraction,
                "range_rings_deg": list(self.hud.range_rings_deg),
                "reticle_radius_px": self.hud.reticle_radius_px,
            },
            "move_speed": self.move_speed,
            "rotation_speed_deg": self.rotation_speed_deg,
        }


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return float(default)
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {raw!r}")
    return value
