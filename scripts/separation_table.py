#!/usr/bin/env python3
# /// script
# requires-python = ">=3.10"
# dependencies = ["numpy", "python-dotenv"]
# ///
"""
Tabulate reticle separation j over a grid of target directions.

For a fixed observer attitude, prints j (degrees) for target azimuths
across the columns and target elevations down the rows.

Usage:
    python scripts/separation_table.py
    python scripts/separation_table.py --yaw 30 --pitch 10 --step 15
"""

import argparse
import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from engagement.bearing import bearing_of
from engagement.orientation import forward_vector
from engagement.sweep import separation_grid


def main():
    parser = argparse.ArgumentParser(description="Tabulate reticle separation j")
    parser.add_argument("--yaw", type=float, default=0.0, help="Yaw in degrees")
    parser.add_argument("--pitch", type=float, default=0.0, help="Pitch in degrees")
    parser.add_argument("--roll", type=float, default=0.0, help="Roll in degrees")
    parser.add_argument("--step", type=float, default=30.0, help="Grid step in degrees")
    args = parser.parse_args()

    if args.step <= 0:
        parser.error("--step must be positive")

    fwd = forward_vector(np.radians(args.yaw), np.radians(args.pitch), np.radians(args.roll))
    reference = bearing_of(fwd)

    azimuths_deg = np.arange(-180.0, 180.0 + 1e-9, args.step)
    elevations_deg = np.arange(-90.0, 90.0 + 1e-9, args.step)
    j = np.degrees(separation_grid(reference, np.radians(azimuths_deg), np.radians(elevations_deg)))

    print(f"Reference bearing: {reference}")
    print()
    header = "El\\Az " + "".join(f"{az:>8.0f}" for az in azimuths_deg)
    print(header)
    print("-" * len(header))
    for el, row in zip(elevations_deg, j):
        print(f"{el:>5.0f} " + "".join(f"{value:>8.1f}" for value in row))


if __name__ == "__main__":
    main()
