import pytest
from shapely.geometry import MultiPolygon, Point, Polygon

from skyshadow.geometry.geometry_utils import GeometryUtils
from skyshadow.geometry.primitives import Point3D


def test_ring_from_bare_coordinates_keeps_z():
    ring = GeometryUtils.ring_from_footprint([[0, 0, 2], [4, 0], [4, 3, 5]])
    assert ring == [Point3D(0.0, 0.0, 2.0), Point3D(4.0, 0.0, 0.0), Point3D(4.0, 3.0, 5.0)]


def test_ring_from_geojson_multipolygon_uses_first_polygon():
    footprint = {
        "type": "MultiPolygon",
        "coordinates": [
            [[[0, 0], [1, 0], [1, 1], [0, 0]]],
            [[[5, 5], [6, 5], [6, 6], [5, 5]]],
        ],
    }
    ring = GeometryUtils.ring_from_footprint(footprint)
    assert [(p.x, p.y) for p in ring] == [(0, 0), (1, 0), (1, 1), (0, 0)]


def test_ring_from_shapely_polygon():
    ring = GeometryUtils.ring_from_footprint(Polygon([(0, 0), (2, 0), (2, 2), (0, 2)]))

    assert [(p.x, p.y) for p in ring] == [(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)]
    assert all(p.z == 0.0 for p in ring)


def test_ring_from_shapely_multipolygon_and_other_geometries():
    multi = MultiPolygon([
        Polygon([(0, 0), (1, 0), (1, 1)]),
        Polygon([(5, 5), (6, 5), (6, 6)]),
    ])
    ring = GeometryUtils.ring_from_footprint(multi)
    assert (ring[0].x, ring[0].y) == (0, 0)
    assert len(ring) == 4

    assert GeometryUtils.ring_from_footprint(Point(1, 1)) == []
    assert GeometryUtils.ring_from_footprint(Polygon()) == []


@pytest.mark.parametrize("footprint", [None, {"type": "LineString", "coordinates": [[0, 0], [1, 1]]}])
def test_unreadable_footprints_give_empty_ring(footprint):
    assert GeometryUtils.ring_from_footprint(footprint) == []


def test_search_bounds_are_square():
    bounds = GeometryUtils.search_bounds(10.0, -5.0, 100.0)
    assert bounds == {
        "bottom_left": {"x": -90.0, "y": -105.0},
        "top_right": {"x": 110.0, "y": 95.0},
    }
