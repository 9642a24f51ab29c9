"""
Geometry primitives for the shadow analysis

Planar/3D points and wall quadrilaterals on one side, azimuth/elevation
shadows on the other. Everything here is immutable.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple


# Corner order shared by WallQuad and Shadow
CORNER_KEYS = ("down_left", "up_left", "up_right", "down_right")


class MeridianSide(str, Enum):
    """Side of the north cut line a quadrilateral lies on, relative to the observer"""
    EAST = "east"  # x below the observer, azimuths near the cut read +180
    WEST = "west"  # x at or above the observer, azimuths near the cut read -180


class Azimuth(float):
    """
    Azimuth in degrees, normalized into [-180, 180)

    0 = south, positive toward west, the cut at -180/+180 = north.
    """

    def __new__(cls, degrees: float) -> "Azimuth":
        value = (float(degrees) + 180.0) % 360.0 - 180.0
        # float modulo can round a tiny negative up to 360
        if value >= 180.0:
            value -= 360.0
        return super().__new__(cls, value)

    def signed_delta(self, other: float) -> "Azimuth":
        """Shortest signed angle from this azimuth to ``other``, across the cut if needed"""
        return Azimuth(float(other) - float(self))

    @staticmethod
    def cut_extreme(side: MeridianSide) -> float:
        """Value an azimuth lying exactly on the cut must read for the given side"""
        return 180.0 if side == MeridianSide.EAST else -180.0


@dataclass(frozen=True)
class Point3D:
    """Point in the shared planar frame (meters)"""
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class WallQuad:
    """Vertical extrusion of one footprint edge, from base line to roof line"""
    id: str
    group_id: str
    cadastral_ref: str
    down_left: Point3D
    up_left: Point3D
    up_right: Point3D
    down_right: Point3D

    def corners(self) -> Tuple[Point3D, Point3D, Point3D, Point3D]:
        return (self.down_left, self.up_left, self.up_right, self.down_right)

    def edges(self) -> Tuple[Tuple[Point3D, Point3D], ...]:
        """Four consecutive edges, the last one wrapping back to down_left"""
        corners = self.corners()
        return tuple((corners[i], corners[(i + 1) % 4]) for i in range(4))

    def with_corners(
        self,
        down_left: Point3D,
        up_left: Point3D,
        up_right: Point3D,
        down_right: Point3D
    ) -> "WallQuad":
        """Copy keeping provenance but with new corners"""
        return replace(
            self,
            down_left=down_left,
            up_left=up_left,
            up_right=up_right,
            down_right=down_right
        )


@dataclass(frozen=True)
class AngularPoint:
    """Direction seen from the observer (degrees)"""
    azimut: float
    elevation: float


@dataclass(frozen=True)
class ShadowBounds:
    """Axis-aligned box of a shadow in azimuth/elevation space"""
    min_azimut: float
    max_azimut: float
    min_elevation: float
    max_elevation: float

    def contains(self, point: AngularPoint) -> bool:
        """Inclusive point-in-box test"""
        return (
            self.min_azimut <= point.azimut <= self.max_azimut
            and self.min_elevation <= point.elevation <= self.max_elevation
        )


@dataclass(frozen=True)
class Shadow:
    """Angular region blocked by one wall, kept as four corners"""
    id: str
    group_id: str
    cadastral_ref: str
    down_left: AngularPoint
    up_left: AngularPoint
    up_right: AngularPoint
    down_right: AngularPoint

    def corners(self) -> Tuple[AngularPoint, AngularPoint, AngularPoint, AngularPoint]:
        return (self.down_left, self.up_left, self.up_right, self.down_right)

    @property
    def bounds(self) -> ShadowBounds:
        azimuts = [p.azimut for p in self.corners()]
        elevations = [p.elevation for p in self.corners()]
        return ShadowBounds(
            min_azimut=min(azimuts),
            max_azimut=max(azimuts),
            min_elevation=min(elevations),
            max_elevation=max(elevations)
        )


def clamp_elevation(degrees: float) -> float:
    """Elevations below the horizon count as horizon, nothing is above zenith"""
    if math.isnan(degrees):
        return 0.0
    return max(0.0, min(90.0, degrees))
