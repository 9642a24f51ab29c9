"""
Shared fixtures for the shadow analysis tests
"""

import pytest

from skyshadow.config import ShadowConfig
from skyshadow.geometry.primitives import AngularPoint, Point3D, Shadow, WallQuad


def wall(x1, y1, x2, y2, height=6.0, base=0.0, wall_id="w", cadastral_ref="REF"):
    """Vertical wall quad over the segment (x1, y1)-(x2, y2)"""
    return WallQuad(
        id=wall_id,
        group_id="g",
        cadastral_ref=cadastral_ref,
        down_left=Point3D(x1, y1, base),
        up_left=Point3D(x1, y1, height),
        up_right=Point3D(x2, y2, height),
        down_right=Point3D(x2, y2, base)
    )


def box_shadow(min_az, max_az, min_el, max_el, shadow_id="s"):
    """Shadow whose corners are exactly the given box"""
    return Shadow(
        id=shadow_id,
        group_id="g",
        cadastral_ref="REF",
        down_left=AngularPoint(min_az, min_el),
        up_left=AngularPoint(min_az, max_el),
        up_right=AngularPoint(max_az, max_el),
        down_right=AngularPoint(max_az, min_el)
    )


@pytest.fixture
def observer():
    return Point3D(0.0, 0.0, 0.0)


@pytest.fixture
def shadow_config():
    return ShadowConfig()


@pytest.fixture
def make_wall():
    return wall


@pytest.fixture
def make_shadow():
    return box_shadow
