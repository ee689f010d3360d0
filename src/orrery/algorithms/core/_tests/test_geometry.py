import math

import numpy as np
import pytest

from orrery.algorithms.core.geometry import (
    distance_to_focus,
    orbit_ellipse,
    orbit_path,
    orbit_path_array,
    orbital_period,
    position_for_true_anomaly,
)
from orrery.config import KM_TO_PX
from orrery.exceptions import InvalidOrbitalElements, UnresolvedDependency
from orrery.models import ORIGIN, BodyType, CelestialBody, Point

# --- Constants for testing ---
AU_KM = 1.496e8
SUN_MASS = 1.989e30
EARTH_MASS = 5.972e24


# --- Pytest Fixtures ---
@pytest.fixture
def sun():
    return CelestialBody("sun", SUN_MASS, body_type=BodyType.STAR)


@pytest.fixture
def circular():
    return CelestialBody("earth", EARTH_MASS, semi_major_axis=AU_KM, eccentricity=0.0,
                         mean_anomaly=30.0, orbit_body="sun")


@pytest.fixture
def eccentric():
    return CelestialBody("comet", 1e15, semi_major_axis=2 * AU_KM, eccentricity=0.6,
                         mean_anomaly=100.0, orbit_body="sun")


@pytest.fixture
def positions():
    return {"sun": ORIGIN}


# --- distance_to_focus ---
@pytest.mark.parametrize("nu", [0.0, 90.0, 180.0, 270.0])
def test_circular_distance_is_constant(circular, nu):
    assert distance_to_focus(circular, nu) == pytest.approx(1.496e8, rel=1e-12)


def test_periapsis_and_apoapsis(eccentric):
    a, e = eccentric.semi_major_axis, eccentric.eccentricity
    assert distance_to_focus(eccentric, 0.0) == pytest.approx(a * (1 - e), rel=1e-12)
    assert distance_to_focus(eccentric, 180.0) == pytest.approx(a * (1 + e), rel=1e-12)


def test_distance_is_periodic_in_anomaly(eccentric):
    assert distance_to_focus(eccentric, 400.0) == pytest.approx(distance_to_focus(eccentric, 40.0), rel=1e-12)
    assert distance_to_focus(eccentric, -90.0) == pytest.approx(distance_to_focus(eccentric, 270.0), rel=1e-12)


def test_distance_of_primary_raises(sun):
    with pytest.raises(InvalidOrbitalElements):
        distance_to_focus(sun, 0.0)


# --- position_for_true_anomaly ---
def test_position_at_periapsis_lies_on_positive_x(eccentric, positions):
    a, e = eccentric.semi_major_axis, eccentric.eccentricity
    point = position_for_true_anomaly(eccentric, 0.0, positions)
    assert point.x == pytest.approx(a * (1 - e) / KM_TO_PX)
    assert point.y == pytest.approx(0.0, abs=1e-9)


def test_position_y_axis_points_down(circular, positions):
    # a quarter orbit ahead is "up" on screen, i.e. negative y
    point = position_for_true_anomaly(circular, 90.0, positions)
    assert point.x == pytest.approx(0.0, abs=1e-9)
    assert point.y == pytest.approx(-AU_KM / KM_TO_PX)


def test_position_is_offset_from_orbited_body():
    moon = CelestialBody("moon", 7.348e22, semi_major_axis=384400.0, eccentricity=0.0, orbit_body="earth")
    earth_position = Point(1496.0, -20.0)
    point = position_for_true_anomaly(moon, 180.0, {"earth": earth_position})
    assert point.x == pytest.approx(earth_position.x - 384400.0 / KM_TO_PX)
    assert point.y == pytest.approx(earth_position.y, abs=1e-9)


def test_position_distance_matches_focal_distance(eccentric, positions):
    for nu in (10.0, 135.0, 250.0):
        point = position_for_true_anomaly(eccentric, nu, positions)
        assert point.distance_to(ORIGIN) * KM_TO_PX == pytest.approx(distance_to_focus(eccentric, nu), rel=1e-9)


def test_position_without_parent_position_raises(circular):
    with pytest.raises(UnresolvedDependency):
        position_for_true_anomaly(circular, 0.0, {})


def test_position_of_primary_raises(sun, positions):
    with pytest.raises(InvalidOrbitalElements):
        position_for_true_anomaly(sun, 0.0, positions)


# --- orbit_ellipse ---
def test_circular_ellipse_is_centred_circle(circular):
    parent = Point(12.0, -7.0)
    ellipse = orbit_ellipse(circular, {"sun": parent})
    assert ellipse.rx == pytest.approx(AU_KM / KM_TO_PX)
    assert ellipse.ry == pytest.approx(AU_KM / KM_TO_PX)
    assert ellipse.cx == pytest.approx(parent.x)
    assert ellipse.cy == pytest.approx(parent.y)


def test_eccentric_ellipse_has_orbited_body_at_focus(eccentric, positions):
    ellipse = orbit_ellipse(eccentric, positions)
    linear_eccentricity = math.sqrt(ellipse.rx ** 2 - ellipse.ry ** 2)
    assert ellipse.cx + linear_eccentricity == pytest.approx(0.0, abs=1e-6)
    assert ellipse.ry == pytest.approx(ellipse.rx * math.sqrt(1 - 0.6 ** 2))

    # periapsis and apoapsis are the ends of the major axis
    periapsis = position_for_true_anomaly(eccentric, 0.0, positions)
    apoapsis = position_for_true_anomaly(eccentric, 180.0, positions)
    assert periapsis.x == pytest.approx(ellipse.cx + ellipse.rx)
    assert apoapsis.x == pytest.approx(ellipse.cx - ellipse.rx)


def test_ellipse_without_parent_position_raises(circular):
    with pytest.raises(UnresolvedDependency):
        orbit_ellipse(circular, {})


# --- orbit_path ---
@pytest.mark.parametrize("sample_count", [1, 7, 360])
def test_orbit_path_size_and_order(eccentric, positions, sample_count):
    path = orbit_path(eccentric, eccentric.mean_anomaly, positions, sample_count)
    assert len(path) == sample_count + 1
    anomalies = [p.true_anomaly for p in path]
    assert anomalies == sorted(anomalies)
    assert all(0.0 <= nu < 360.0 for nu in anomalies)


def test_orbit_path_passes_through_current_position(eccentric, positions):
    current = position_for_true_anomaly(eccentric, 100.5, positions)
    path = orbit_path(eccentric, 100.5, dict(positions, comet=current), 360)
    inserted = [p for p in path if p.true_anomaly == 100.5]
    assert len(inserted) == 1
    assert inserted[0].point == current


def test_orbit_path_ignores_stale_stored_position(eccentric, positions):
    stale = position_for_true_anomaly(eccentric, 174.8, positions)
    path = orbit_path(eccentric, 90.5, dict(positions, comet=stale), 360)
    inserted = [p for p in path if p.true_anomaly == 90.5]
    assert len(inserted) == 1
    assert inserted[0].point == position_for_true_anomaly(eccentric, 90.5, positions)
    assert inserted[0].point != stale


def test_orbit_path_computes_missing_current_position(eccentric, positions):
    path = orbit_path_array(eccentric, 45.5, positions, 36)
    row = path[path[:, 0] == 45.5][0]
    expected = position_for_true_anomaly(eccentric, 45.5, positions)
    assert (row[1], row[2]) == (expected.x, expected.y)


def test_orbit_path_reduces_current_anomaly(eccentric, positions):
    path = orbit_path(eccentric, 450.0, positions, 4)
    assert [p.true_anomaly for p in path] == [0.0, 90.0, 90.0, 180.0, 270.0]
    # stable sort keeps the regular sample first
    assert path[2].point == position_for_true_anomaly(eccentric, 450.0, positions)


def test_orbit_path_samples_are_on_the_orbit(eccentric, positions):
    path = orbit_path_array(eccentric, 0.0, positions, 90)
    radii = np.hypot(path[:, 1], path[:, 2]) * KM_TO_PX
    expected = [distance_to_focus(eccentric, nu) for nu in path[:, 0]]
    np.testing.assert_allclose(radii, expected, rtol=1e-9)


@pytest.mark.parametrize("sample_count", [0, -3, 2.5, True])
def test_orbit_path_rejects_bad_sample_count(eccentric, positions, sample_count):
    with pytest.raises(ValueError):
        orbit_path(eccentric, 0.0, positions, sample_count)


# --- orbital_period ---
def test_earth_orbital_period(sun, circular):
    hours = orbital_period(circular, sun)
    assert hours / 24.0 == pytest.approx(365.25, rel=5e-3)


def test_primary_orbital_period_is_zero(sun):
    assert orbital_period(sun, sun) == 0.0
