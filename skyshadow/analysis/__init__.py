"""
Shadow geometry engine

- WallExtruder: building/overhang footprints to 3D wall quads
- angular_projector: wall quads to azimuth/elevation shadows
- meridian_splitter: splitting and sign correction at the north cut
- shadow_reducer: minimal coverage-equivalent shadow subsets
"""

from .floor_count import parse_floor_count
from .wall_extruder import WallExtruder
from .angular_projector import project, project_point
from .meridian_splitter import (
    classify_side,
    compute_shadow,
    correct_sign,
    edge_crosses_meridian,
    is_on_meridian,
    quad_crosses_meridian,
    split_at_meridian,
)
from .shadow_reducer import clean_shadows, coverage_grid

__all__ = [
    "parse_floor_count",
    "WallExtruder",
    "project",
    "project_point",
    "classify_side",
    "compute_shadow",
    "correct_sign",
    "edge_crosses_meridian",
    "is_on_meridian",
    "quad_crosses_meridian",
    "split_at_meridian",
    "clean_shadows",
    "coverage_grid",
]
