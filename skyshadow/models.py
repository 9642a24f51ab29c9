"""
Pydantic models for shadow analysis inputs and outputs
"""

from typing import List, Optional, Union, Literal
from pydantic import BaseModel, Field

from .geometry.primitives import AngularPoint, Shadow


# ============================================================
# GeoJSON Types
# ============================================================

class GeoJSONPolygon(BaseModel):
    type: Literal["Polygon"] = "Polygon"
    coordinates: List[List[List[float]]]  # [[[x, y(, z)], ...]]


class GeoJSONMultiPolygon(BaseModel):
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: List[List[List[List[float]]]]


# Bare ring [[x, y(, z)], ...] or GeoJSON geometry, planar meters
Footprint = Union[GeoJSONPolygon, GeoJSONMultiPolygon, List[List[float]]]


# ============================================================
# Input Models
# ============================================================

class BuildingRecord(BaseModel):
    id: str
    group_id: str
    cadastral_ref: str = ""
    height_code: str = ""  # Cadastral floor code, e.g. "III+I", "II-I"
    footprint: Footprint


class OverhangRecord(BaseModel):
    id: str = "overhang"
    footprint: Footprint


class ObserverPoint(BaseModel):
    x: float
    y: float
    z: float = 0.0
    cadastral_ref: Optional[str] = None  # Walls of this building are ignored


class ShadowCalculationRequest(BaseModel):
    center_x: float
    center_y: float
    center_z: float = 0.0
    buffer_m: Optional[float] = Field(default=None, gt=0)  # Defaults to config search buffer
    cadastral_ref: Optional[str] = None


# ============================================================
# Output Models
# ============================================================

class ShadowPointRecord(BaseModel):
    azimut: float  # -180 to 180, 0 = south, positive toward west
    elevation: float  # 0 to 90

    @classmethod
    def from_point(cls, point: AngularPoint) -> "ShadowPointRecord":
        return cls(azimut=float(point.azimut), elevation=float(point.elevation))


class ShadowPoints(BaseModel):
    down_left: ShadowPointRecord
    up_left: ShadowPointRecord
    up_right: ShadowPointRecord
    down_right: ShadowPointRecord


class ShadowRecord(BaseModel):
    id: str
    gid: str
    cadastral_number: str
    points: ShadowPoints

    @classmethod
    def from_shadow(cls, shadow: Shadow) -> "ShadowRecord":
        return cls(
            id=shadow.id,
            gid=shadow.group_id,
            cadastral_number=shadow.cadastral_ref,
            points=ShadowPoints(
                down_left=ShadowPointRecord.from_point(shadow.down_left),
                up_left=ShadowPointRecord.from_point(shadow.up_left),
                up_right=ShadowPointRecord.from_point(shadow.up_right),
                down_right=ShadowPointRecord.from_point(shadow.down_right)
            )
        )


class PlanarPoint(BaseModel):
    x: float
    y: float


class CenterPoint(PlanarPoint):
    z: float = 0.0


class QueryBounds(BaseModel):
    bottom_left: PlanarPoint
    top_right: PlanarPoint


class QueryInfo(BaseModel):
    center: CenterPoint
    buffer: float
    bounds: QueryBounds


class ShadowCalculationResponse(BaseModel):
    message: str
    data: List[ShadowRecord] = Field(default_factory=list)
    query: QueryInfo
