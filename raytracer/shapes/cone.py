"""
Double-napped cone around the y axis
"""
import math
from typing import List

from raytracer.accelerators.bounds import BoundingBox
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Tuple, point, vector

from .cylinder import TruncatedShape


class Cone(TruncatedShape):
    """Cone whose radius at height y is |y|"""

    def cap_radius_squared(self, y: float) -> float:
        return y * y

    def body_intersections(self, ray: Ray) -> List[float]:
        d, o = ray.direction, ray.origin
        a = d.x * d.x - d.y * d.y + d.z * d.z
        b = 2 * o.x * d.x - 2 * o.y * d.y + 2 * o.z * d.z
        c = o.x * o.x - o.y * o.y + o.z * o.z

        if abs(a) < EPSILON:
            if abs(b) < EPSILON:
                return []
            # Parallel to one nappe: a single crossing of the other
            return [-c / (2 * b)]

        disc = b * b - 4 * a * c
        if disc < -EPSILON:
            return []

        # grazing rays can round to just below zero
        sqrt_d = math.sqrt(max(disc, 0.0))
        t0 = (-b - sqrt_d) / (2 * a)
        t1 = (-b + sqrt_d) / (2 * a)
        return sorted((t0, t1))

    def local_normal_at(self, p: Tuple) -> Tuple:
        cap = self._cap_normal(p)
        if cap is not None:
            return cap
        y = math.sqrt(p.x * p.x + p.z * p.z)
        if p.y > 0:
            y = -y
        return vector(p.x, y, p.z)

    def bounds(self) -> BoundingBox:
        limit = max(abs(self.minimum), abs(self.maximum))
        return BoundingBox(point(-limit, self.minimum, -limit), point(limit, self.maximum, limit))
