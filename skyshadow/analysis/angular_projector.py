"""
Angular projection of wall corners as seen from an observer

Azimuth convention: 0 = south, positive toward west, -180/+180 = north.
Elevation is the angle above the observer's horizontal plane, clamped to
[0, 90].
"""

import math

from ..geometry.primitives import (
    AngularPoint,
    Azimuth,
    Point3D,
    Shadow,
    WallQuad,
    clamp_elevation,
)


def project_point(observer: Point3D, point: Point3D) -> AngularPoint:
    """Azimuth/elevation of a point seen from the observer"""
    dx = point.x - observer.x
    dy = point.y - observer.y
    dz = point.z - observer.z
    horizontal_distance = math.hypot(dx, dy)

    # atan2(dx, dy) is a bearing from north; shifting by 180 puts 0 at south.
    # A point straight above the observer gives atan2(0, 0) = 0 and reads as north.
    bearing = math.degrees(math.atan2(dx, dy))
    azimuth = Azimuth(bearing + 180.0)

    elevation = clamp_elevation(math.degrees(math.atan2(dz, horizontal_distance)))

    return AngularPoint(azimut=float(azimuth), elevation=elevation)


def project(observer: Point3D, quad: WallQuad) -> Shadow:
    """Shadow cast by a wall quad, corner by corner"""
    return Shadow(
        id=quad.id,
        group_id=quad.group_id,
        cadastral_ref=quad.cadastral_ref,
        down_left=project_point(observer, quad.down_left),
        up_left=project_point(observer, quad.up_left),
        up_right=project_point(observer, quad.up_right),
        down_right=project_point(observer, quad.down_right)
    )
