"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from raytracer.accelerators.bounds import BoundingBox  # noqa: E402
from raytracer.core.patterns import Pattern  # noqa: E402
from raytracer.core.tuples import Colour, point, vector  # noqa: E402
from raytracer.scene import default_world  # noqa: E402
from raytracer.shapes import Shape, glass_sphere  # noqa: E402


class SpyShape(Shape):
    """Shape that records the last local ray it was asked to intersect."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.saved_ray = None
        self.calls = 0

    def local_intersect(self, ray):
        self.saved_ray = ray
        self.calls += 1
        return []

    def local_normal_at(self, p):
        return vector(p.x, p.y, p.z)

    def bounds(self):
        return BoundingBox(point(-1, -1, -1), point(1, 1, 1))


class PositionPattern(Pattern):
    """Pattern whose colour is the pattern-space point itself."""

    def local_colour_at(self, p):
        return Colour(p.x, p.y, p.z)


def as_list(value):
    """Components of a tuple or colour, for comparison with pytest.approx."""
    return list(value)


@pytest.fixture
def world():
    """Provide the canonical two-sphere world."""
    return default_world()


@pytest.fixture
def spy_shape():
    """Provide a shape that records the rays it receives."""
    return SpyShape()


@pytest.fixture
def position_pattern():
    """Provide a pattern that echoes its input point as a colour."""
    return PositionPattern()


@pytest.fixture
def glass():
    """Provide a fresh glass sphere."""
    return glass_sphere()


@pytest.fixture
def approx_colour():
    """Compare a colour against expected components with a loose tolerance."""
    def compare(colour, expected, tolerance=1e-4):
        return as_list(colour) == pytest.approx(list(expected), abs=tolerance)
    return compare


@pytest.fixture
def approx_tuple():
    """Compare a tuple against expected x, y, z with a loose tolerance."""
    def compare(value, expected, tolerance=1e-4):
        return as_list(value)[:3] == pytest.approx(list(expected), abs=tolerance)
    return compare
