"""
North meridian handling

Azimuths wrap at due north (-180/+180 seen from the observer). A wall whose
projection straddles that cut would get a bounding box spanning the whole
azimuth range, so such walls are split along the cut line x = observer.x
(north of the observer) and each half is projected on its own.
"""

from dataclasses import replace
from typing import List, Optional, Tuple
from loguru import logger

from ..geometry.primitives import (
    CORNER_KEYS,
    Azimuth,
    MeridianSide,
    Point3D,
    Shadow,
    WallQuad,
)
from .angular_projector import project


def is_on_meridian(observer: Point3D, quad: WallQuad) -> bool:
    """True if a corner lies exactly on the observer's north-south line"""
    return any(corner.x == observer.x for corner in quad.corners())


def _cut_parameter(observer: Point3D, p1: Point3D, p2: Point3D) -> float:
    """Segment parameter where x reaches the observer's x"""
    dx1 = p1.x - observer.x
    dx2 = p2.x - observer.x
    return -dx1 / (dx2 - dx1)


def edge_crosses_meridian(observer: Point3D, p1: Point3D, p2: Point3D) -> bool:
    """
    True if the segment p1-p2 crosses the cut line north of the observer

    Both ends must lie strictly on opposite sides of x = observer.x; touching
    the line does not count.
    """
    dx1 = p1.x - observer.x
    dx2 = p2.x - observer.x
    if not ((dx1 < 0 < dx2) or (dx2 < 0 < dx1)):
        return False

    t = _cut_parameter(observer, p1, p2)
    dy1 = p1.y - observer.y
    dy2 = p2.y - observer.y
    return dy1 + t * (dy2 - dy1) > 0


def crossing_edges(observer: Point3D, quad: WallQuad) -> List[Tuple[Point3D, Point3D]]:
    """Edges of the quad (in corner order, wrapping) that cross the north cut"""
    return [
        (p1, p2) for p1, p2 in quad.edges()
        if edge_crosses_meridian(observer, p1, p2)
    ]


def quad_crosses_meridian(observer: Point3D, quad: WallQuad) -> bool:
    return bool(crossing_edges(observer, quad))


def meridian_intersection(observer: Point3D, p1: Point3D, p2: Point3D) -> Point3D:
    """Point of the segment lying on the cut line, y and z interpolated"""
    t = _cut_parameter(observer, p1, p2)
    return Point3D(
        x=observer.x,
        y=p1.y + t * (p2.y - p1.y),
        z=p1.z + t * (p2.z - p1.z)
    )


def split_at_meridian(
    observer: Point3D,
    quad: WallQuad
) -> Optional[Tuple[WallQuad, WallQuad]]:
    """
    Split a quad crossing the north cut into its east and west halves

    Returns (east_half, west_half), or None when the quad does not cross the
    cut through exactly two edges. Each half keeps its own two original
    corners (lower y as down_left) and shares the two cut points: the second
    crossing as up_right, the first as down_right.
    """
    edges = crossing_edges(observer, quad)
    if len(edges) != 2:
        logger.warning(f"Wall {quad.id}: unexpected number of edges crossing north meridian: {len(edges)}")
        return None

    intersections = [meridian_intersection(observer, p1, p2) for p1, p2 in edges]

    east = sorted((p for p in quad.corners() if p.x - observer.x < 0), key=lambda p: p.y)
    west = sorted((p for p in quad.corners() if p.x - observer.x >= 0), key=lambda p: p.y)
    if len(east) != 2 or len(west) != 2:
        logger.warning(f"Wall {quad.id}: cannot split, {len(east)} corners east and {len(west)} west of the cut")
        return None

    east_half = quad.with_corners(
        down_left=east[0],
        up_left=east[1],
        up_right=intersections[1],
        down_right=intersections[0]
    )
    west_half = quad.with_corners(
        down_left=west[0],
        up_left=west[1],
        up_right=intersections[1],
        down_right=intersections[0]
    )
    return east_half, west_half


def classify_side(observer: Point3D, quad: WallQuad) -> MeridianSide:
    """Side of the cut the quad mostly lies on, from the mean x offset of its corners"""
    corners = quad.corners()
    mean_dx = sum(corner.x - observer.x for corner in corners) / len(corners)
    return MeridianSide.EAST if mean_dx < 0 else MeridianSide.WEST


def correct_sign(shadow: Shadow, side: MeridianSide) -> Shadow:
    """
    Move corners sitting on the wrong extreme of the cut to the side's extreme

    A corner exactly on the cut projects to -180; on the east side it must read
    +180 so the shadow's box does not span the whole azimuth range.
    """
    expected = Azimuth.cut_extreme(side)
    opposite = -expected

    corrected = {}
    for key in CORNER_KEYS:
        point = getattr(shadow, key)
        if point.azimut == opposite:
            corrected[key] = replace(point, azimut=expected)

    return replace(shadow, **corrected) if corrected else shadow


def compute_shadow(observer: Point3D, quad: WallQuad) -> List[Shadow]:
    """
    Shadow(s) of one wall quad

    Quads touching the cut are projected whole and sign-corrected; quads
    crossing it are split and give two shadows; any other quad gives one
    plain projection.
    """
    if is_on_meridian(observer, quad):
        return [correct_sign(project(observer, quad), classify_side(observer, quad))]

    if quad_crosses_meridian(observer, quad):
        halves = split_at_meridian(observer, quad)
        if halves is None:
            # Fallback if splitting failed
            return [project(observer, quad)]
        east_half, west_half = halves
        return [
            correct_sign(project(observer, east_half), MeridianSide.EAST),
            correct_sign(project(observer, west_half), MeridianSide.WEST),
        ]

    return [project(observer, quad)]
