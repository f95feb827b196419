import math

import pytest

from greatcircle.core.geo import GeoPoint, angular_distance, coordinates, deg_to_rad

MILAN = GeoPoint(latitude=45.465422, longitude=9.185924)
MINSK = GeoPoint(latitude=53.9, longitude=27.566667)


def test_deg_to_rad():
    assert deg_to_rad(180) == math.pi
    assert deg_to_rad(0) == 0


def test_coordinates_from_mapping_and_object():
    assert coordinates({"latitude": 1.5, "longitude": 2.5}) == (1.5, 2.5)
    assert coordinates(GeoPoint(latitude=1.5, longitude=2.5)) == (1.5, 2.5)


def test_identical_points_are_exactly_zero():
    assert angular_distance(MILAN, MILAN, 6371) == 0
    assert angular_distance(MILAN, MILAN, 6371, formula="haversine") == 0


def test_mapping_and_dataclass_points_agree():
    as_dict = {"latitude": MINSK.latitude, "longitude": MINSK.longitude}
    assert angular_distance(MILAN, MINSK, 6371) == angular_distance(MILAN, as_dict, 6371)


def test_in_radians_skips_conversion():
    a = GeoPoint(latitude=deg_to_rad(MILAN.latitude), longitude=deg_to_rad(MILAN.longitude))
    b = GeoPoint(latitude=deg_to_rad(MINSK.latitude), longitude=deg_to_rad(MINSK.longitude))
    assert angular_distance(a, b, 6371, in_radians=True) == angular_distance(MILAN, MINSK, 6371)


def test_antipodal_points_are_half_the_circumference():
    d = angular_distance(GeoPoint(0, 0), GeoPoint(0, 180), 1.0)
    assert d == pytest.approx(math.pi)


def test_quarter_circle_along_the_equator():
    d = angular_distance(GeoPoint(0, 0), GeoPoint(0, 90), 6371)
    assert d == pytest.approx(6371 * math.pi / 2)


def test_haversine_formula_matches_law_of_cosines():
    cosines = angular_distance(MILAN, MINSK, 6371)
    half_angle = angular_distance(MILAN, MINSK, 6371, formula="haversine")
    assert half_angle == pytest.approx(cosines, rel=1e-9)


def test_near_duplicate_points_do_not_fail():
    # Not caught by the equality fast path; the cosine can round above 1.
    a = GeoPoint(latitude=10.0, longitude=20.0)
    b = GeoPoint(latitude=10.0, longitude=20.000000000000004)
    d = angular_distance(a, b, 6371)
    assert 0 <= d < 1e-3


def test_nan_coordinates_propagate():
    d = angular_distance(GeoPoint(math.nan, 0), MINSK, 6371)
    assert math.isnan(d)
    d = angular_distance(GeoPoint(math.nan, 0), MINSK, 6371, formula="haversine")
    assert math.isnan(d)
