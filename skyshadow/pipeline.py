"""
Shadow pipeline for one observation point

  1. Extrude building footprints into walls
  2. Project each wall, splitting those crossing the north meridian
  3. Extrude and project overhangs
  4. Reduce the shadow list to a minimal equivalent subset
"""

from typing import List, Iterable, Optional, Union, Dict, Any
from loguru import logger

from .config import get_config, ShadowConfig
from .geometry.primitives import Point3D, Shadow
from .models import BuildingRecord, OverhangRecord, ObserverPoint
from .analysis.wall_extruder import WallExtruder
from .analysis.meridian_splitter import compute_shadow
from .analysis.shadow_reducer import clean_shadows


class ShadowPipeline:
    """
    Computes the reduced shadow list seen from one point

    Usage:
        pipeline = ShadowPipeline()
        shadows = pipeline.run(buildings, overhangs, ObserverPoint(x=..., y=..., z=...))
    """

    def __init__(self, config: Optional[ShadowConfig] = None):
        self.config = config or get_config()
        self.extruder = WallExtruder(self.config)

    def run(
        self,
        buildings: Iterable[Union[BuildingRecord, Dict[str, Any]]],
        overhangs: Iterable[Union[OverhangRecord, Dict[str, Any]]],
        observer: Union[ObserverPoint, Point3D, Dict[str, Any]]
    ) -> List[Shadow]:
        if isinstance(observer, dict):
            observer = ObserverPoint.model_validate(observer)
        own_ref = getattr(observer, "cadastral_ref", None)
        reference_point = Point3D(observer.x, observer.y, observer.z)

        walls = self.extruder.extrude_buildings(buildings)
        logger.debug(f"Extruded {len(walls)} building walls")

        shadows = []
        skipped = 0
        for wall in walls:
            # The observer's own building does not shade it
            if own_ref and wall.cadastral_ref == own_ref:
                skipped += 1
                continue
            shadows.extend(compute_shadow(reference_point, wall))
        if skipped:
            logger.debug(f"Skipped {skipped} walls of the observer's own building {own_ref}")

        overhang_walls = self.extruder.extrude_overhangs(overhangs)
        for wall in overhang_walls:
            shadows.extend(compute_shadow(reference_point, wall))

        logger.info(
            f"Projected {len(shadows)} shadows from {len(walls)} walls "
            f"and {len(overhang_walls)} overhang walls"
        )

        cleaned = clean_shadows(shadows, self.config)
        logger.info(f"Reduced to {len(cleaned)} shadows")
        return cleaned


def get_shadows_for_point(
    buildings: Iterable[Union[BuildingRecord, Dict[str, Any]]],
    overhangs: Iterable[Union[OverhangRecord, Dict[str, Any]]],
    observer: Union[ObserverPoint, Point3D, Dict[str, Any]],
    config: Optional[ShadowConfig] = None
) -> List[Shadow]:
    """Reduced shadows cast by buildings and overhangs onto the observer"""
    return ShadowPipeline(config).run(buildings, overhangs, observer)
