"""
Tests for the spherical triangle solver.

Tests cover:
- Separation j always within [0, pi] (including extreme inputs)
- Symmetry of j under swapping the two bearings
- Closed-form identity: j is the angle between the target direction and
  the reference direction reflected through the Y-Z plane
- Reference on the pole: j equals the target's polar distance
- Degenerate law-of-sines branch resolving F to 0 instead of NaN
- Worked values for J, E, F, G
- Non-finite input rejection and immutability of the result
"""

import dataclasses
import math

import pytest

from engagement.angles import SINE_RULE_EPSILON, InvalidInputError
from engagement.bearing import Bearing, bearing_between, bearing_of
from engagement.orientation import forward_vector
from engagement.spherical import AngleSet, polar_distance, solve
from engagement.vector import Vector3D


BEARING_PAIRS = [
    ((0.3, 0.2), (-0.1, 0.05)),
    ((1.2, -0.4), (0.6, 0.9)),
    ((-2.5, 0.7), (2.9, -1.1)),
    ((math.pi, 0.0), (0.0, 0.0)),
    ((0.8, 1.3), (-0.8, -1.3)),
    ((-1.0, -0.2), (1.7, 0.4)),
    ((2.0, 0.5), (-0.4, -0.6)),
]


def unit_direction(bearing: Bearing) -> Vector3D:
    """Unit vector for a compass-style bearing."""
    az, el = bearing.azimuth, bearing.elevation
    return Vector3D(math.sin(az) * math.cos(el), math.cos(az) * math.cos(el), math.sin(el))


def reflect_x(v: Vector3D) -> Vector3D:
    return Vector3D(-v.x, v.y, v.z)


# =============================================================================
# SEPARATION INVARIANT TESTS
# =============================================================================

class TestSeparationInvariants:
    """Properties of j that hold for every finite input."""

    @pytest.mark.parametrize("target,reference", BEARING_PAIRS + [
        ((0.0, math.pi / 2), (0.0, -math.pi / 2)),
        ((1000 * math.pi, 3.0), (-1e6, 1e3)),
        ((1e-12, 1e-12), (0.0, 0.0)),
        ((math.pi / 2, math.pi / 2), (math.pi / 2, 0.0)),
    ])
    def test_separation_in_range(self, target, reference):
        angles = solve(Bearing(*target), Bearing(*reference))
        assert 0.0 <= angles.j <= math.pi
        for value in angles.as_dict().values():
            assert math.isfinite(value)

    @pytest.mark.parametrize("b1,b2", BEARING_PAIRS)
    def test_separation_symmetric(self, b1, b2):
        """j does not depend on which bearing is the target."""
        forward = solve(Bearing(*b1), Bearing(*b2)).j
        backward = solve(Bearing(*b2), Bearing(*b1)).j
        assert forward == pytest.approx(backward, abs=1e-12)

    @pytest.mark.parametrize("target,reference", BEARING_PAIRS)
    def test_separation_matches_reflected_reference(self, target, reference):
        """j = angle(target, reference with x negated)."""
        t, r = Bearing(*target), Bearing(*reference)
        expected = unit_direction(t).angle_to(reflect_x(unit_direction(r)))
        assert solve(t, r).j == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize("target", [(0.3, 0.2), (-1.1, 0.6), (2.8, -0.9)])
    def test_reference_on_pole_gives_polar_distance(self, target):
        """With the reference dead ahead, j is the target's distance from +Y."""
        t = Bearing(*target)
        assert solve(t, Bearing(0.0, 0.0)).j == pytest.approx(polar_distance(t), abs=1e-12)


# =============================================================================
# DEGENERATE CASE TESTS
# =============================================================================

class TestDegenerateConfigurations:
    """Singular configurations resolve to defined values."""

    def test_identical_bearing_on_pole(self):
        """Both bearings dead ahead: j = 0, F = 0, G = pi."""
        angles = solve(Bearing(0.0, 0.0), Bearing(0.0, 0.0))
        assert angles.j == 0.0
        assert angles.F == 0.0
        assert angles.E == 0.0
        assert angles.G == pytest.approx(math.pi)

    @pytest.mark.parametrize("bearing", [(0.0, 0.3), (0.0, -0.7), (math.pi, 0.4), (0.0, 1.5)])
    def test_identical_bearing_on_meridian(self, bearing):
        """Coincident bearings on the zero/pi azimuth meridian give j = 0 and F = 0."""
        b = Bearing(*bearing)
        angles = solve(b, b)
        assert angles.j == pytest.approx(0.0, abs=1e-7)
        assert angles.F == 0.0
        assert not math.isnan(angles.G)

    def test_identical_bearing_off_meridian_is_reflected(self):
        """Coincident bearings on the +X axis measure against -X: j = pi, F = 0."""
        b = Bearing(math.pi / 2, 0.0)
        angles = solve(b, b)
        assert angles.j == pytest.approx(math.pi)
        assert angles.F == 0.0

    def test_identical_bearing_general_position(self):
        """Off the meridian, coincident bearings give the reflected separation and a computed F."""
        b = Bearing(0.5, 0.3)
        angles = solve(b, b)
        u = unit_direction(b)
        assert angles.j == pytest.approx(u.angle_to(reflect_x(u)), abs=1e-9)
        assert abs(math.sin(angles.j)) > SINE_RULE_EPSILON
        assert -math.pi / 2 <= angles.F <= math.pi / 2
        assert angles.G == pytest.approx(math.pi - angles.E - angles.F)

    def test_mirror_pair_gives_zero(self):
        """+X target against a -X reference coincide after reflection."""
        angles = solve(Bearing(math.pi / 2, 0.0), Bearing(-math.pi / 2, 0.0))
        assert angles.j == pytest.approx(0.0, abs=1e-7)
        assert angles.F == 0.0

    def test_sine_rule_guard_threshold(self):
        """F falls back to 0 whenever |sin j| is at or below the epsilon."""
        tiny = SINE_RULE_EPSILON / 10
        angles = solve(Bearing(0.0, tiny), Bearing(0.0, 0.0))
        assert 0.0 < angles.j
        assert abs(math.sin(angles.j)) <= SINE_RULE_EPSILON
        assert angles.F == 0.0

    def test_vertical_target(self):
        """Target straight overhead against a level reference: j = pi/2."""
        target = bearing_between(Vector3D.zero(), Vector3D(0, 0, 10))
        angles = solve(target, Bearing(0.0, 0.0))
        assert angles.j == pytest.approx(math.pi / 2)


# =============================================================================
# WORKED VALUE TESTS
# =============================================================================

class TestWorkedValues:
    """Hand-derived values of the auxiliary angles."""

    def test_target_above_dead_ahead(self):
        """Target 0.2 rad above the nose, reference dead ahead."""
        angles = solve(Bearing(0.0, 0.2), Bearing(0.0, 0.0))
        assert angles.j == pytest.approx(0.2)
        assert angles.J == pytest.approx(math.pi / 2)
        assert angles.E == 0.0
        # sin(J) sin(f) / sin(j) = 1: clamped before asin
        assert angles.F == pytest.approx(math.pi / 2, abs=1e-6)
        assert angles.G == pytest.approx(math.pi / 2, abs=1e-6)

    def test_marker_angle_relation(self):
        """G = pi - E - F for every solution."""
        for target, reference in BEARING_PAIRS:
            a = solve(Bearing(*target), Bearing(*reference))
            assert a.G == pytest.approx(math.pi - a.E - a.F)
            assert -math.pi / 2 <= a.F <= math.pi / 2

    def test_target_along_yaw_heading(self):
        """A target at compass azimuth +yaw is centred for a level observer."""
        yaw = 0.35
        reference = bearing_of(forward_vector(yaw, 0.0, 0.0))
        target = bearing_between(Vector3D.zero(), Vector3D(math.sin(yaw), math.cos(yaw), 0.0))
        assert solve(target, reference).j == pytest.approx(0.0, abs=1e-7)


# =============================================================================
# ANGLE SET TESTS
# =============================================================================

class TestAngleSet:
    """Tests for the AngleSet value."""

    def test_letter_aliases(self):
        a = AngleSet(0.1, 0.2, 0.3, 0.4, 0.5)
        assert (a.j, a.J, a.E, a.F, a.G) == (0.1, 0.2, 0.3, 0.4, 0.5)
        assert a.as_dict() == {"j": 0.1, "J": 0.2, "E": 0.3, "F": 0.4, "G": 0.5}

    def test_as_degrees(self):
        a = AngleSet(math.pi, 0.0, 0.0, 0.0, math.pi / 2)
        assert a.as_degrees()["j"] == pytest.approx(180.0)
        assert a.as_degrees()["G"] == pytest.approx(90.0)

    def test_frozen(self):
        a = solve(Bearing(0.1, 0.1), Bearing(0.0, 0.0))
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.separation = 0.0


# =============================================================================
# VALIDATION TESTS
# =============================================================================

class TestSolverValidation:
    """Non-finite bearings are rejected at the entry point."""

    def test_nan_target(self):
        with pytest.raises(InvalidInputError, match="target_bearing"):
            solve(Bearing(float("nan"), 0.0), Bearing(0.0, 0.0))

    def test_infinite_reference(self):
        with pytest.raises(InvalidInputError, match="reference_bearing"):
            solve(Bearing(0.0, 0.0), Bearing(0.0, float("inf")))
