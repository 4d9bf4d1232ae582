"""
Axis-aligned bounding boxes used to cull ray tests against groups
"""
import math
from typing import Tuple as Pair

from raytracer.core.matrix import Matrix
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Tuple, point

INF = float('inf')


def check_axis(origin: float, direction: float, lo: float, hi: float) -> Pair[float, float]:
    """Slab test along one axis: entry and exit t for the planes at lo and hi"""
    if abs(direction) < EPSILON:
        # Parallel to the slab: inside it for all t, or never
        if lo <= origin <= hi:
            return -INF, INF
        return INF, -INF

    t1 = (lo - origin) / direction
    t2 = (hi - origin) / direction
    if t1 > t2:
        t1, t2 = t2, t1
    return t1, t2


def slab_intersect(ray: Ray, bmin: Tuple, bmax: Tuple) -> Pair[float, float]:
    """Overall (tmin, tmax) of a ray against a box; a miss has tmin > tmax"""
    xt = check_axis(ray.origin.x, ray.direction.x, bmin.x, bmax.x)
    yt = check_axis(ray.origin.y, ray.direction.y, bmin.y, bmax.y)
    zt = check_axis(ray.origin.z, ray.direction.z, bmin.z, bmax.z)
    tmin = max(xt[0], yt[0], zt[0])
    tmax = min(xt[1], yt[1], zt[1])
    return tmin, tmax


class BoundingBox:
    """Axis-aligned box in a shape's object space.

    The default box is empty: min is +inf and max is -inf on every axis, so
    adding any point enlarges it, and it neither contains nor is hit by
    anything.
    """
    __slots__ = ['min', 'max']

    def __init__(self, bmin: Tuple = None, bmax: Tuple = None):
        self.min = bmin if bmin is not None else point(INF, INF, INF)
        self.max = bmax if bmax is not None else point(-INF, -INF, -INF)

    def __repr__(self):
        return f"BoundingBox(min={self.min}, max={self.max})"

    @property
    def is_empty(self) -> bool:
        return self.min.x > self.max.x or self.min.y > self.max.y or self.min.z > self.max.z

    def add_point(self, p: Tuple):
        self.min = point(min(self.min.x, p.x), min(self.min.y, p.y), min(self.min.z, p.z))
        self.max = point(max(self.max.x, p.x), max(self.max.y, p.y), max(self.max.z, p.z))

    def add_box(self, other: "BoundingBox"):
        if other.is_empty:
            return
        self.add_point(other.min)
        self.add_point(other.max)

    def contains_point(self, p: Tuple) -> bool:
        return (self.min.x <= p.x <= self.max.x
                and self.min.y <= p.y <= self.max.y
                and self.min.z <= p.z <= self.max.z)

    def contains_box(self, other: "BoundingBox") -> bool:
        if other.is_empty or self.is_empty:
            return False
        return self.contains_point(other.min) and self.contains_point(other.max)

    def corners(self):
        lo, hi = self.min, self.max
        return [
            point(lo.x, lo.y, lo.z),
            point(lo.x, lo.y, hi.z),
            point(lo.x, hi.y, lo.z),
            point(lo.x, hi.y, hi.z),
            point(hi.x, lo.y, lo.z),
            point(hi.x, lo.y, hi.z),
            point(hi.x, hi.y, lo.z),
            point(hi.x, hi.y, hi.z),
        ]

    def transform(self, m: Matrix) -> "BoundingBox":
        """Box around all eight transformed corners"""
        box = BoundingBox()
        if self.is_empty:
            return box
        for corner in self.corners():
            box.add_point(_transform_point(m, corner))
        return box

    def intersects(self, ray: Ray) -> bool:
        if self.is_empty:
            return False
        tmin, tmax = slab_intersect(ray, self.min, self.max)
        return tmin <= tmax


def _transform_point(m: Matrix, p: Tuple) -> Tuple:
    # Corners of unbounded boxes are infinite: zero coefficients are skipped
    # so they cannot produce 0 * inf. A nan only appears when opposite
    # infinities meet, and then other corners already span the whole axis.
    components = (p.x, p.y, p.z, 1.0)
    coords = []
    for row in range(3):
        total = 0.0
        for col in range(4):
            coefficient = m[row, col]
            if coefficient != 0.0:
                total += coefficient * components[col]
        coords.append(-INF if math.isnan(total) else total)
    return point(*coords)
