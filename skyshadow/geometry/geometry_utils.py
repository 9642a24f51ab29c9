"""
Geometry utilities for footprint rings and search areas
"""

from typing import List, Dict, Any, Optional, Sequence

from loguru import logger
from shapely.geometry import Point, Polygon, box
from shapely.geometry.base import BaseGeometry

from .primitives import Point3D


class GeometryUtils:
    """Utility functions for footprint handling"""

    @staticmethod
    def ring_from_footprint(footprint: Any) -> List[Point3D]:
        """
        Extract the exterior ring of the first polygon of a footprint

        Accepts a bare ring ([[x, y], ...] or [[x, y, z], ...]), a GeoJSON
        Polygon/MultiPolygon mapping (or a model with ``type`` and
        ``coordinates``) or a shapely geometry. Bare rings are returned exactly
        as given; anything unreadable yields an empty ring.
        """
        if footprint is None:
            return []

        if isinstance(footprint, BaseGeometry):
            return GeometryUtils._ring_from_shapely(footprint)

        if hasattr(footprint, "coordinates") and hasattr(footprint, "type"):
            footprint = {"type": footprint.type, "coordinates": footprint.coordinates}

        if isinstance(footprint, dict):
            geom_type = footprint.get("type")
            coordinates = footprint.get("coordinates") or []
            if geom_type == "MultiPolygon":
                if not coordinates or not coordinates[0]:
                    return []
                return GeometryUtils._ring_from_coords(coordinates[0][0])
            if geom_type == "Polygon":
                if not coordinates:
                    return []
                return GeometryUtils._ring_from_coords(coordinates[0])
            logger.debug(f"Unsupported footprint geometry type: {geom_type}")
            return []

        return GeometryUtils._ring_from_coords(footprint)

    @staticmethod
    def _ring_from_shapely(geometry: BaseGeometry) -> List[Point3D]:
        if geometry.is_empty:
            return []
        if geometry.geom_type == "MultiPolygon":
            geometry = geometry.geoms[0]
        if geometry.geom_type != "Polygon":
            logger.debug(f"Unsupported footprint geometry type: {geometry.geom_type}")
            return []
        return GeometryUtils._ring_from_coords(list(geometry.exterior.coords))

    @staticmethod
    def _ring_from_coords(coords: Sequence[Sequence[float]]) -> List[Point3D]:
        ring = []
        for coord in coords or []:
            if coord is None or len(coord) < 2:
                continue
            z = coord[2] if len(coord) > 2 and coord[2] is not None else 0.0
            ring.append(Point3D(float(coord[0]), float(coord[1]), float(z)))
        return ring

    @staticmethod
    def search_bounds(
        center_x: float,
        center_y: float,
        buffer_m: float
    ) -> Dict[str, Dict[str, float]]:
        """Square search area around a center point"""
        return {
            "bottom_left": {"x": center_x - buffer_m, "y": center_y - buffer_m},
            "top_right": {"x": center_x + buffer_m, "y": center_y + buffer_m},
        }

    @staticmethod
    def bounds_to_box(bounds: Dict[str, Dict[str, float]]) -> Polygon:
        return box(
            bounds["bottom_left"]["x"],
            bounds["bottom_left"]["y"],
            bounds["top_right"]["x"],
            bounds["top_right"]["y"]
        )

    @staticmethod
    def ring_to_polygon(ring: List[Point3D]) -> Optional[Polygon]:
        """Planar shapely polygon for a ring, None if it does not enclose an area"""
        unique = {(p.x, p.y) for p in ring}
        if len(unique) < 3:
            return None
        polygon = Polygon([(p.x, p.y) for p in ring])
        if not polygon.is_valid:
            polygon = polygon.buffer(0)
        return polygon if not polygon.is_empty else None

    @staticmethod
    def ring_intersects(ring: List[Point3D], area: Polygon) -> bool:
        """True if a footprint ring touches or overlaps the area"""
        polygon = GeometryUtils.ring_to_polygon(ring)
        if polygon is not None:
            return polygon.intersects(area)
        return any(area.intersects(Point(p.x, p.y)) for p in ring)
