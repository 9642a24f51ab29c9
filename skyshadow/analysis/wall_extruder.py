"""
Wall extrusion

Turns building footprints into vertical wall quadrilaterals, and overhang
footprints into obstacles reaching "infinitely" high.
"""

import uuid
from typing import List, Iterable, Optional, Union, Dict, Any
from loguru import logger

from ..config import get_config, ShadowConfig
from ..geometry.geometry_utils import GeometryUtils
from ..geometry.primitives import Point3D, WallQuad
from ..models import BuildingRecord, OverhangRecord
from .floor_count import parse_floor_count


class WallExtruder:
    """Extrudes footprint rings into wall quads"""

    def __init__(self, config: Optional[ShadowConfig] = None):
        self.config = config or get_config()

    def building_height(self, height_code: str) -> float:
        """Roof height in meters for a cadastral construction code"""
        return parse_floor_count(height_code) * self.config.geometry.floor_height_m

    def extrude_buildings(
        self,
        buildings: Iterable[Union[BuildingRecord, Dict[str, Any]]]
    ) -> List[WallQuad]:
        """
        Convert building footprints to walls from ground to roof height

        Buildings without any above-ground floor are skipped.
        """
        walls = []
        for building in buildings:
            if isinstance(building, dict):
                building = BuildingRecord.model_validate(building)

            height = self.building_height(building.height_code)
            if height <= 0:
                logger.debug(f"Building {building.id}: skipped, no floors in height code '{building.height_code}'")
                continue

            ring = GeometryUtils.ring_from_footprint(building.footprint)
            building_walls = self._walk_ring(
                ring,
                group_id=building.group_id,
                cadastral_ref=building.cadastral_ref,
                base_z=lambda p: 0.0,
                top_z=height
            )
            if not building_walls:
                logger.debug(f"Building {building.id}: skipped, ring has {len(ring)} points")
            walls.extend(building_walls)

        return walls

    def extrude_overhangs(
        self,
        overhangs: Iterable[Union[OverhangRecord, Dict[str, Any]]]
    ) -> List[WallQuad]:
        """
        Convert overhang footprints to walls that block every elevation above their base

        Each base corner keeps its ring point's own height.
        """
        walls = []
        group_id = self.config.geometry.overhang_group_id
        for overhang in overhangs:
            if isinstance(overhang, dict):
                overhang = OverhangRecord.model_validate(overhang)

            ring = GeometryUtils.ring_from_footprint(overhang.footprint)
            walls.extend(self._walk_ring(
                ring,
                group_id=group_id,
                cadastral_ref=group_id,
                base_z=lambda p: p.z,
                top_z=self.config.geometry.overhang_sentinel_z
            ))

        return walls

    def _walk_ring(
        self,
        ring: List[Point3D],
        group_id: str,
        cadastral_ref: str,
        base_z,
        top_z: float
    ) -> List[WallQuad]:
        if len(ring) < 3:
            return []

        # Consecutive pairs, then the closing edge back to the first point
        pairs = [(ring[i], ring[i + 1]) for i in range(len(ring) - 1)]
        pairs.append((ring[-1], ring[0]))

        return [
            WallQuad(
                id=str(uuid.uuid4()),
                group_id=group_id,
                cadastral_ref=cadastral_ref,
                down_left=Point3D(start.x, start.y, base_z(start)),
                up_left=Point3D(start.x, start.y, top_z),
                up_right=Point3D(end.x, end.y, top_z),
                down_right=Point3D(end.x, end.y, base_z(end))
            )
            for start, end in pairs
        ]
