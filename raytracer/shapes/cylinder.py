"""
Cylinders around the y axis, optionally truncated and capped
"""
import math
from typing import List

from raytracer.accelerators.bounds import INF, BoundingBox
from raytracer.core.intersection import Intersection
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Tuple, point, vector

from .shape import Shape


class TruncatedShape(Shape):
    """Surface of revolution about the y axis limited to (minimum, maximum).

    Subclasses supply the body quadric and the cap radius; this class
    handles truncation, caps and root ordering.
    """

    def __init__(self, minimum: float = -INF, maximum: float = INF, closed: bool = False,
                 **kwargs):
        super().__init__(**kwargs)
        self._minimum = min(minimum, maximum)
        self._maximum = max(minimum, maximum)
        self.closed = closed

    @property
    def minimum(self) -> float:
        return self._minimum

    @minimum.setter
    def minimum(self, value: float):
        if value > self._maximum:
            self._minimum, self._maximum = self._maximum, value
        else:
            self._minimum = value
        self._bounds_changed()

    @property
    def maximum(self) -> float:
        return self._maximum

    @maximum.setter
    def maximum(self, value: float):
        if value < self._minimum:
            self._minimum, self._maximum = value, self._minimum
        else:
            self._maximum = value
        self._bounds_changed()

    def cap_radius_squared(self, y: float) -> float:
        raise NotImplementedError

    def body_intersections(self, ray: Ray) -> List[float]:
        raise NotImplementedError

    def _within(self, ray: Ray, t: float) -> bool:
        y = ray.origin.y + t * ray.direction.y
        return self._minimum < y < self._maximum

    def _check_cap(self, ray: Ray, t: float, y: float) -> bool:
        x = ray.origin.x + t * ray.direction.x
        z = ray.origin.z + t * ray.direction.z
        return x * x + z * z <= self.cap_radius_squared(y)

    def _cap_intersections(self, ray: Ray) -> List[float]:
        # Caps only count when closed and when the ray is not parallel to them
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return []
        ts = []
        for y in (self._minimum, self._maximum):
            if math.isinf(y):
                continue
            t = (y - ray.origin.y) / ray.direction.y
            if self._check_cap(ray, t, y):
                ts.append(t)
        return ts

    def local_intersect(self, ray: Ray) -> List[Intersection]:
        ts = [t for t in self.body_intersections(ray) if self._within(ray, t)]
        ts.extend(self._cap_intersections(ray))
        return [Intersection(t, self) for t in sorted(ts)]

    def _cap_normal(self, p: Tuple):
        dist = p.x * p.x + p.z * p.z
        if dist < self.cap_radius_squared(p.y):
            if p.y >= self._maximum - EPSILON:
                return vector(0, 1, 0)
            if p.y <= self._minimum + EPSILON:
                return vector(0, -1, 0)
        return None


class Cylinder(TruncatedShape):
    """Radius one cylinder"""

    def cap_radius_squared(self, y: float) -> float:
        return 1.0

    def body_intersections(self, ray: Ray) -> List[float]:
        d, o = ray.direction, ray.origin
        a = d.x * d.x + d.z * d.z
        if abs(a) < EPSILON:
            # Parallel to the y axis: only the caps can be hit
            return []

        b = 2 * o.x * d.x + 2 * o.z * d.z
        c = o.x * o.x + o.z * o.z - 1
        disc = b * b - 4 * a * c
        if disc < 0:
            return []

        sqrt_d = math.sqrt(disc)
        t0 = (-b - sqrt_d) / (2 * a)
        t1 = (-b + sqrt_d) / (2 * a)
        return sorted((t0, t1))

    def local_normal_at(self, p: Tuple) -> Tuple:
        cap = self._cap_normal(p)
        if cap is not None:
            return cap
        return vector(p.x, 0, p.z)

    def bounds(self) -> BoundingBox:
        return BoundingBox(point(-1, self._minimum, -1), point(1, self._maximum, 1))
