"""
Axis-aligned cube spanning -1..1 on every axis
"""
import math
from typing import List

from raytracer.accelerators.bounds import BoundingBox, slab_intersect
from raytracer.core.intersection import Intersection
from raytracer.core.ray import Ray
from raytracer.core.tuples import Tuple, point, vector

from .shape import Shape

CUBE_MIN = point(-1, -1, -1)
CUBE_MAX = point(1, 1, 1)


class Cube(Shape):

    def local_intersect(self, ray: Ray) -> List[Intersection]:
        tmin, tmax = slab_intersect(ray, CUBE_MIN, CUBE_MAX)
        if tmin > tmax or math.isinf(tmin) or math.isinf(tmax):
            return []
        return [Intersection(tmin, self), Intersection(tmax, self)]

    def local_normal_at(self, p: Tuple) -> Tuple:
        ax, ay, az = abs(p.x), abs(p.y), abs(p.z)
        maxc = max(ax, ay, az)
        if maxc == ax:
            return vector(p.x, 0, 0)
        if maxc == ay:
            return vector(0, p.y, 0)
        return vector(0, 0, p.z)

    def bounds(self) -> BoundingBox:
        return BoundingBox(CUBE_MIN, CUBE_MAX)
