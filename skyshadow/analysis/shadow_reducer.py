"""
Shadow reduction

Removes shadows that add nothing to the blocked part of the sky:

1. shadows whose corners all fall inside another single shadow's box
2. shadows lying entirely in the northern edge bands, which the analysis
   ignores
3. shadows whose removal leaves the rasterized coverage unchanged

Shadows are handled only through their azimuth/elevation bounding boxes.
"""

import time
from typing import List, Optional, Sequence

import numpy as np
from loguru import logger

from ..config import get_config, ShadowConfig, ReducerConfig
from ..geometry.primitives import Shadow, ShadowBounds


def shadow_bounds(shadow: Shadow) -> ShadowBounds:
    return shadow.bounds


def is_fully_contained(shadow_a: Shadow, shadow_b: Shadow) -> bool:
    """True if every corner of A lies inside B's box (borders included)"""
    bounds_b = shadow_b.bounds
    return all(bounds_b.contains(corner) for corner in shadow_a.corners())


def is_in_edge_band(shadow: Shadow, edge_band_deg: float = 123.0) -> bool:
    """True if the shadow lies in [-180, -edge] or [edge, 180], whatever its elevation"""
    bounds = shadow.bounds
    in_left_edge = bounds.min_azimut >= -180 and bounds.max_azimut <= -edge_band_deg
    in_right_edge = bounds.min_azimut >= edge_band_deg and bounds.max_azimut <= 180
    return in_left_edge or in_right_edge


def remove_fully_contained_shadows(shadows: Sequence[Shadow]) -> List[Shadow]:
    """
    Drop shadows contained in a single other shadow

    A shadow already dropped cannot absorb another one, so of two identical
    shadows the later one survives.
    """
    keep = [True] * len(shadows)
    for i, shadow in enumerate(shadows):
        for j, other in enumerate(shadows):
            if i == j or not keep[j]:
                continue
            if is_fully_contained(shadow, other):
                keep[i] = False
                break
    return [shadow for shadow, kept in zip(shadows, keep) if kept]


def remove_edge_shadows(shadows: Sequence[Shadow], edge_band_deg: float = 123.0) -> List[Shadow]:
    return [shadow for shadow in shadows if not is_in_edge_band(shadow, edge_band_deg)]


def _grid_axes(reducer_config: ReducerConfig):
    # Cell (i, j) samples azimuth -180 + i and elevation j
    azimuts = -180.0 + np.arange(reducer_config.grid_azimuth_cells, dtype=float)
    elevations = np.arange(reducer_config.grid_elevation_cells, dtype=float)
    return azimuts[:, np.newaxis], elevations[np.newaxis, :]


def _shadow_mask(shadow: Shadow, azimuts: np.ndarray, elevations: np.ndarray) -> np.ndarray:
    bounds = shadow.bounds
    return (
        (azimuts >= bounds.min_azimut) & (azimuts <= bounds.max_azimut)
        & (elevations >= bounds.min_elevation) & (elevations <= bounds.max_elevation)
    )


def coverage_grid(shadows: Sequence[Shadow], config: Optional[ShadowConfig] = None) -> np.ndarray:
    """Boolean azimuth x elevation raster, True where any shadow box covers the cell"""
    reducer_config = (config or get_config()).reducer
    azimuts, elevations = _grid_axes(reducer_config)
    grid = np.zeros((azimuts.shape[0], elevations.shape[1]), dtype=bool)
    for shadow in shadows:
        grid |= _shadow_mask(shadow, azimuts, elevations)
    return grid


def remove_redundant_shadows(
    shadows: Sequence[Shadow],
    config: Optional[ShadowConfig] = None
) -> List[Shadow]:
    """
    Drop shadows whose removal leaves the coverage raster unchanged

    Full passes are repeated until one removes nothing. The optional time
    budget is checked between passes; stopping early still returns a set
    with the full coverage.
    """
    reducer_config = (config or get_config()).reducer
    if len(shadows) <= 1:
        return list(shadows)

    azimuts, elevations = _grid_axes(reducer_config)
    masks = np.stack([_shadow_mask(shadow, azimuts, elevations) for shadow in shadows])
    full_coverage = masks.any(axis=0)

    keep = np.ones(len(shadows), dtype=bool)
    budget = reducer_config.coverage_time_budget_s
    started = time.monotonic()
    passes = 0

    made_change = True
    while made_change:
        made_change = False
        passes += 1
        for i in range(len(shadows)):
            if not keep[i]:
                continue

            others = keep.copy()
            others[i] = False
            # Never remove the last shadow
            if not others.any():
                continue

            if np.array_equal(masks[others].any(axis=0), full_coverage):
                keep[i] = False
                made_change = True

        if made_change and budget is not None and time.monotonic() - started > budget:
            logger.warning(
                f"Coverage reduction stopped after {passes} passes, "
                f"time budget of {budget}s exceeded"
            )
            break

    logger.debug(f"Coverage reduction: {len(shadows)} -> {int(keep.sum())} shadows in {passes} passes")
    return [shadow for shadow, kept in zip(shadows, keep) if kept]


def clean_shadows(
    shadows: Sequence[Shadow],
    config: Optional[ShadowConfig] = None
) -> List[Shadow]:
    """
    Reduce a shadow list to a minimal subset blocking the same sky

    Order is preserved. Lists of zero or one shadow are returned unchanged.
    """
    config = config or get_config()
    if len(shadows) <= 1:
        return list(shadows)

    cleaned = remove_fully_contained_shadows(shadows)
    after_containment = len(cleaned)

    cleaned = remove_edge_shadows(cleaned, config.reducer.edge_band_deg)
    after_edges = len(cleaned)

    if len(cleaned) > 1:
        cleaned = remove_redundant_shadows(cleaned, config)

    logger.debug(
        f"Cleaned shadows: {len(shadows)} in, {after_containment} after containment, "
        f"{after_edges} after edge bands, {len(cleaned)} out"
    )
    return cleaned
