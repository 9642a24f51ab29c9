"""
Geometry types and helpers for the shadow analysis
"""

from .primitives import (
    CORNER_KEYS,
    AngularPoint,
    Azimuth,
    MeridianSide,
    Point3D,
    Shadow,
    ShadowBounds,
    WallQuad,
    clamp_elevation,
)
from .geometry_utils import GeometryUtils

__all__ = [
    "CORNER_KEYS",
    "AngularPoint",
    "Azimuth",
    "MeridianSide",
    "Point3D",
    "Shadow",
    "ShadowBounds",
    "WallQuad",
    "clamp_elevation",
    "GeometryUtils",
]
