"""
Sky obstruction (shadow) analysis

Estimates which azimuth/elevation directions of sky are blocked by the
buildings around an observation point on a facade or roof.
"""

from .config import get_config, validate_config, ShadowConfig
from .exceptions import ShadowCalculationError
from .pipeline import ShadowPipeline, get_shadows_for_point
from .service import ShadowService

__all__ = [
    "get_config",
    "validate_config",
    "ShadowConfig",
    "ShadowCalculationError",
    "ShadowPipeline",
    "get_shadows_for_point",
    "ShadowService",
]
