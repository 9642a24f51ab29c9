import math

import pytest

from skyshadow.analysis.angular_projector import project, project_point
from skyshadow.geometry.primitives import Azimuth, MeridianSide, Point3D


@pytest.mark.parametrize("x,y,expected", [
    (0.0, -10.0, 0.0),     # south
    (-10.0, 0.0, 90.0),    # west
    (10.0, 0.0, -90.0),    # east
    (0.0, 10.0, -180.0),   # north
    (-10.0, -10.0, 45.0),  # south-west
])
def test_azimuth_convention(observer, x, y, expected):
    point = project_point(observer, Point3D(x, y, 0.0))
    assert point.azimut == pytest.approx(expected)


def test_elevation_angle(observer):
    assert project_point(observer, Point3D(0.0, -10.0, 10.0)).elevation == pytest.approx(45.0)
    assert project_point(observer, Point3D(3.0, -4.0, 5.0)).elevation == pytest.approx(45.0)


def test_elevation_is_clamped_at_horizon():
    observer = Point3D(0.0, 0.0, 12.0)
    assert project_point(observer, Point3D(0.0, -10.0, 0.0)).elevation == 0.0


def test_point_above_observer(observer):
    point = project_point(observer, Point3D(0.0, 0.0, 10.0))
    assert point.azimut == -180.0
    assert point.elevation == 90.0


def test_project_keeps_corner_keys_and_provenance(observer, make_wall):
    quad = make_wall(-5.0, -10.0, 5.0, -10.0, height=10.0, wall_id="w9", cadastral_ref="C9")
    shadow = project(observer, quad)

    assert shadow.id == "w9"
    assert shadow.cadastral_ref == "C9"
    assert shadow.down_left.azimut == pytest.approx(math.degrees(math.atan2(5.0, 10.0)))
    assert shadow.down_right.azimut == pytest.approx(-math.degrees(math.atan2(5.0, 10.0)))
    assert shadow.down_left.elevation == 0.0
    assert shadow.up_left.elevation == pytest.approx(math.degrees(math.atan2(10.0, math.hypot(5.0, 10.0))))


def test_projected_angles_stay_in_range(observer, make_wall):
    for x1, y1, x2, y2 in [(-3, 4, 8, -1), (20, 20, -20, 20), (1, -1, 1, 1), (0, 5, 0, -5)]:
        shadow = project(observer, make_wall(x1, y1, x2, y2, height=30.0))
        for corner in shadow.corners():
            assert -180.0 <= corner.azimut <= 180.0
            assert 0.0 <= corner.elevation <= 90.0


@pytest.mark.parametrize("degrees,expected", [
    (0.0, 0.0),
    (180.0, -180.0),
    (-180.0, -180.0),
    (540.0, -180.0),
    (-190.0, 170.0),
    (359.0, -1.0),
])
def test_azimuth_normalization(degrees, expected):
    assert Azimuth(degrees) == pytest.approx(expected)
    assert -180.0 <= Azimuth(degrees) < 180.0


def test_azimuth_signed_delta_crosses_cut():
    assert Azimuth(170.0).signed_delta(-170.0) == pytest.approx(20.0)
    assert Azimuth(-170.0).signed_delta(170.0) == pytest.approx(-20.0)
    assert Azimuth(10.0).signed_delta(30.0) == pytest.approx(20.0)


def test_cut_extreme_per_side():
    assert Azimuth.cut_extreme(MeridianSide.EAST) == 180.0
    assert Azimuth.cut_extreme(MeridianSide.WEST) == -180.0
