"""
Flat triangle defined by three fixed points
"""
from typing import List

from raytracer.accelerators.bounds import BoundingBox
from raytracer.core.intersection import Intersection
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Tuple

from .shape import Shape


class Triangle(Shape):
    """Triangle with edges and face normal precomputed at construction"""

    def __init__(self, p1: Tuple, p2: Tuple, p3: Tuple, **kwargs):
        super().__init__(**kwargs)
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.e1 = p2 - p1
        self.e2 = p3 - p1
        self.normal = self.e2.cross(self.e1).normalize()

    def __repr__(self):
        return f"Triangle({self.p1}, {self.p2}, {self.p3})"

    def local_intersect(self, ray: Ray) -> List[Intersection]:
        # Möller–Trumbore
        dir_cross_e2 = ray.direction.cross(self.e2)
        det = self.e1.dot(dir_cross_e2)
        if abs(det) < EPSILON:
            return []

        f = 1.0 / det
        p1_to_origin = ray.origin - self.p1
        u = f * p1_to_origin.dot(dir_cross_e2)
        if u < 0 or u > 1:
            return []

        origin_cross_e1 = p1_to_origin.cross(self.e1)
        v = f * ray.direction.dot(origin_cross_e1)
        if v < 0 or u + v > 1:
            return []

        t = f * self.e2.dot(origin_cross_e1)
        return [Intersection(t, self)]

    def local_normal_at(self, p: Tuple) -> Tuple:
        return self.normal

    def bounds(self) -> BoundingBox:
        box = BoundingBox()
        for p in (self.p1, self.p2, self.p3):
            box.add_point(p)
        return box
