"""
Spherical triangle solver for the HUD reticle.

Given the target bearing and the reference (forward) bearing, the solver
works on the unit sphere with the pole on +Y (zero azimuth, zero
elevation):

- f, h: polar distances of the target and reference directions
- C, D: cotangent-rule angles at the pole, one per bearing
- J: dihedral angle at the pole, pi - C - D
- j: spherical law of cosines on (f, h, J); the separation used for the
  reticle radius
- E: cotangent-rule angle for the reference bearing
- F: spherical law of sines, sin F = sin J sin f / sin j
- G: pi - E - F; the reticle clock angle before roll is added

Numerical policy:
- Every acos/asin argument is clamped to [-1, 1].
- The law-of-sines division is skipped when |sin j| <= SINE_RULE_EPSILON
  and F is defined as 0 (coincident or antipodal directions).
- Nothing here raises for any finite input.

Because J is formed as pi - C - D rather than C - D, j equals the angle
between the target direction and the reference direction reflected
through the Y-Z plane (x -> -x). Coincident bearings therefore give j = 0
only on the zero/pi azimuth meridian. The forward bearing produced by
orientation.forward_vector carries azimuth -yaw, so the reflection puts
the reference at compass azimuth +yaw.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .angles import SINE_RULE_EPSILON, deg, require_finite, safe_acos, safe_asin
from .bearing import Bearing


# =============================================================================
# DATACLASSES
# =============================================================================

@dataclass(frozen=True)
class AngleSet:
    """
    Solver output (radians).

    Attributes:
        separation: j, always in [0, pi]
        pole_angle: J, dihedral angle at the pole (unbounded)
        reference_angle: E, cotangent-rule angle of the reference bearing
        target_angle: F, law-of-sines angle in [-pi/2, pi/2]
        marker_angle: G, pi - E - F
    """
    separation: float
    pole_angle: float
    reference_angle: float
    target_angle: float
    marker_angle: float

    # Letter aliases used in readouts and derivations
    @property
    def j(self) -> float:
        return self.separation

    @property
    def J(self) -> float:
        return self.pole_angle

    @property
    def E(self) -> float:
        return self.reference_angle

    @property
    def F(self) -> float:
        return self.target_angle

    @property
    def G(self) -> float:
        return self.marker_angle

    def as_dict(self) -> dict[str, float]:
        return {"j": self.j, "J": self.J, "E": self.E, "F": self.F, "G": self.G}

    def as_degrees(self) -> dict[str, float]:
        return {name: deg(value) for name, value in self.as_dict().items()}

    def __str__(self) -> str:
        parts = ", ".join(f"{k}={v:.2f}deg" for k, v in self.as_degrees().items())
        return f"AngleSet({parts})"


# =============================================================================
# SOLVER
# =============================================================================

def polar_distance(bearing: Bearing) -> float:
    """Angular distance of a bearing from the +Y pole."""
    return safe_acos(math.cos(bearing.azimuth) * math.cos(bearing.elevation))


def pole_angle(bearing: Bearing) -> float:
    """Cotangent rule at the pole: ctn(C) = sin(Az) / tan(El)."""
    return math.atan2(math.tan(bearing.elevation), math.sin(bearing.azimuth))


def solve(target_bearing: Bearing, reference_bearing: Bearing) -> AngleSet:
    """
    Solve the reticle triangle.

    Args:
        target_bearing: Bearing from observer to target
        reference_bearing: Bearing of the observer's forward vector

    Returns:
        AngleSet with j in [0, pi]; F is 0 when sin(j) is within
        SINE_RULE_EPSILON of zero.

    Raises:
        InvalidInputError: If either bearing holds NaN or infinity.
    """
    require_finite(target_bearing=target_bearing, reference_bearing=reference_bearing)

    az_r, el_r = reference_bearing.azimuth, reference_bearing.elevation

    f = polar_distance(target_bearing)
    h = polar_distance(reference_bearing)

    c = pole_angle(target_bearing)
    d = pole_angle(reference_bearing)

    big_j = math.pi - c - d

    # Spherical law of cosines
    j = safe_acos(
        math.cos(f) * math.cos(h) + math.sin(f) * math.sin(h) * math.cos(big_j)
    )

    # ctn(E) = sin(ElR) / tan(AzR)
    e = math.atan2(math.tan(az_r), math.sin(el_r))

    denom = math.sin(j)
    if abs(denom) > SINE_RULE_EPSILON:
        big_f = safe_asin(math.sin(big_j) * math.sin(f) / denom)
    else:
        big_f = 0.0

    g = math.pi - e - big_f

    return AngleSet(
        separation=j,
        pole_angle=big_j,
        reference_angle=e,
        target_angle=big_f,
        marker_angle=g,
    )


# =============================================================================
# EXAMPLE USAGE / SELF-TEST
# =============================================================================

if __name__ == "__main__":
    from .bearing import bearing_between, bearing_of
    from .orientation import forward_vector
    from .angles import rad
    from .vector import Vector3D

    print("=" * 70)
    print("SPHERICAL TRIANGLE SOLVER - SELF TEST")
    print("=" * 70)

    observer = Vector3D(0.0, 0.0, 2.0)
    target = Vector3D(8.0, 6.0, 4.0)
    fwd = forward_vector(rad(20.0), rad(-5.0), rad(15.0))

    target_bearing = bearing_between(observer, target)
    reference_bearing = bearing_of(fwd)
    print(f"\n  Target:    {target_bearing}")
    print(f"  Reference: {reference_bearing}")
    print(f"  {solve(target_bearing, reference_bearing)}")

    print("\n--- Degenerate cases ---")
    dead_ahead = Bearing(0.0, 0.0)
    print(f"  Coincident on pole: {solve(dead_ahead, dead_ahead)}")
    overhead = bearing_between(Vector3D.zero(), Vector3D(0.0, 0.0, 10.0))
    print(f"  Target overhead:    {solve(overhead, dead_ahead)}")
