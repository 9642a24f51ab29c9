"""
Shadow service

Request-level entry point: selects the buildings inside the search area
around a center point, runs the shadow pipeline there and wraps the result
with the query metadata.
"""

from typing import List, Iterable, Optional, Sequence, Union, Dict, Any
from loguru import logger

from .config import get_config, ShadowConfig
from .exceptions import ShadowCalculationError
from .geometry.geometry_utils import GeometryUtils
from .models import (
    BuildingRecord, OverhangRecord, ObserverPoint,
    ShadowCalculationRequest, ShadowCalculationResponse, ShadowRecord,
    QueryInfo, QueryBounds, PlanarPoint, CenterPoint
)
from .pipeline import ShadowPipeline


class ShadowService:
    """
    Calculates shadows for a point from a set of candidate buildings

    Usage:
        service = ShadowService()
        response = service.calculate_shadows(
            ShadowCalculationRequest(center_x=..., center_y=...),
            buildings
        )
    """

    def __init__(self, config: Optional[ShadowConfig] = None):
        self.config = config or get_config()
        self.pipeline = ShadowPipeline(self.config)

    def select_buildings(
        self,
        buildings: Iterable[Union[BuildingRecord, Dict[str, Any]]],
        bounds: Dict[str, Dict[str, float]]
    ) -> List[BuildingRecord]:
        """Buildings whose footprint intersects the search bounds"""
        area = GeometryUtils.bounds_to_box(bounds)
        selected = []
        for building in buildings:
            if isinstance(building, dict):
                building = BuildingRecord.model_validate(building)
            ring = GeometryUtils.ring_from_footprint(building.footprint)
            if ring and GeometryUtils.ring_intersects(ring, area):
                selected.append(building)
        return selected

    def calculate_shadows(
        self,
        request: ShadowCalculationRequest,
        buildings: Iterable[Union[BuildingRecord, Dict[str, Any]]],
        overhangs: Sequence[Union[OverhangRecord, Dict[str, Any]]] = ()
    ) -> ShadowCalculationResponse:
        """
        Calculate shadows for the request's center point

        Returns the reduced shadows with query metadata. Raises
        ShadowCalculationError if the calculation fails.
        """
        buffer_m = request.buffer_m or self.config.search_buffer_m
        bounds = GeometryUtils.search_bounds(request.center_x, request.center_y, buffer_m)
        query = QueryInfo(
            center=CenterPoint(x=request.center_x, y=request.center_y, z=request.center_z),
            buffer=buffer_m,
            bounds=QueryBounds(
                bottom_left=PlanarPoint(**bounds["bottom_left"]),
                top_right=PlanarPoint(**bounds["top_right"])
            )
        )

        try:
            selected = self.select_buildings(buildings, bounds)
            logger.info(
                f"Shadow calculation at ({request.center_x}, {request.center_y}), "
                f"buffer {buffer_m}m: {len(selected)} buildings in area"
            )

            if not selected:
                return ShadowCalculationResponse(
                    message="No buildings found in the specified area",
                    data=[],
                    query=query
                )

            observer = ObserverPoint(
                x=request.center_x,
                y=request.center_y,
                z=request.center_z,
                cadastral_ref=request.cadastral_ref
            )
            shadows = self.pipeline.run(selected, overhangs, observer)

            return ShadowCalculationResponse(
                message="Shadow calculation successful",
                data=[ShadowRecord.from_shadow(shadow) for shadow in shadows],
                query=query
            )
        except Exception as e:
            logger.error(f"Error calculating shadows: {e}")
            raise ShadowCalculationError(f"Failed to calculate shadows: {e}") from e
