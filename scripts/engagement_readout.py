#!/usr/bin/env python3
"""
Compute one engagement tick and print the HUD readouts.

Usage:
    python scripts/engagement_readout.py
    python scripts/engagement_readout.py --observer 0 0 2 --target 8 6 4 --yaw 20 --pitch -5 --roll 15
    python scripts/engagement_readout.py --annotated --config engagement.json
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from engagement.config import EngagementConfig
from engagement.hud import (
    format_angle_readout,
    format_bearing_readout,
    format_controls_help,
    marker_within_reticle,
    project_marker,
    range_ring_radii,
)
from engagement.orientation import Orientation
from engagement.simulation import EngagementState, evaluate
from engagement.vector import Vector3D


def main():
    default = EngagementState.default()

    parser = argparse.ArgumentParser(
        description="Print bearings, solver angles and reticle position for one tick",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/engagement_readout.py --target 0 10 0 --yaw 0 --pitch 0 --roll 0
    python scripts/engagement_readout.py --annotated
        """,
    )
    parser.add_argument(
        "--observer", type=float, nargs=3, metavar=("X", "Y", "Z"),
        default=list(default.observer.to_tuple()),
        help="Observer position (default: 0 0 2)",
    )
    parser.add_argument(
        "--target", type=float, nargs=3, metavar=("X", "Y", "Z"),
        default=list(default.target.to_tuple()),
        help="Target position (default: 8 6 4)",
    )
    parser.add_argument("--yaw", type=float, default=20.0, help="Yaw in degrees (default: 20)")
    parser.add_argument("--pitch", type=float, default=-5.0, help="Pitch in degrees (default: -5)")
    parser.add_argument("--roll", type=float, default=15.0, help="Roll in degrees (default: 15)")
    parser.add_argument("--annotated", action="store_true", help="Label each solver angle")
    parser.add_argument("--config", help="JSON config file (default: environment / .env)")

    args = parser.parse_args()

    config = EngagementConfig.from_json(args.config) if args.config else EngagementConfig.from_env()

    state = EngagementState(
        observer=Vector3D.from_tuple(args.observer),
        target=Vector3D.from_tuple(args.target),
        orientation=Orientation.from_degrees(args.yaw, args.pitch, args.roll),
    )
    solution = evaluate(state)
    marker = project_marker(solution.angles, state.orientation.roll, config.hud)
    cx, cy = config.hud.center
    hx, hy = marker.screen_position(cx, cy)

    print("=" * 70)
    print("ENGAGEMENT READOUT")
    print("=" * 70)
    print(f"  Observer: {state.observer}")
    print(f"  Target:   {state.target}  (range {solution.range:.2f})")
    print(f"  Forward:  {solution.forward}")
    print()
    print("  " + format_bearing_readout(solution.target_bearing, solution.reference_bearing))
    print("  " + format_angle_readout(solution.angles, annotated=args.annotated))
    print()
    print(f"  Reticle radius: {marker.radius_px:.1f} px{' (clamped)' if marker.clamped else ''}")
    print(f"  Reticle screen position: ({hx:.0f}, {hy:.0f}) on {config.hud.screen_width}x{config.hud.screen_height}")
    on_boresight = "yes" if marker_within_reticle(marker, config.hud) else "no"
    print(f"  On boresight: {on_boresight} (reticle {config.hud.reticle_radius_px} px)")
    print(f"  Range rings: {', '.join(str(r) for r in range_ring_radii(config.hud))} px")
    print()
    print(format_controls_help())


if __name__ == "__main__":
    main()
