"""
Infinite x-z plane
"""
from typing import List

from raytracer.accelerators.bounds import INF, BoundingBox
from raytracer.core.intersection import Intersection
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Tuple, point, vector

from .shape import Shape


class Plane(Shape):

    def local_intersect(self, ray: Ray) -> List[Intersection]:
        if abs(ray.direction.y) < EPSILON:
            # Parallel or coplanar: no visible intersection
            return []
        t = -ray.origin.y / ray.direction.y
        return [Intersection(t, self)]

    def local_normal_at(self, p: Tuple) -> Tuple:
        return vector(0, 1, 0)

    def bounds(self) -> BoundingBox:
        return BoundingBox(point(-INF, 0, -INF), point(INF, 0, INF))
