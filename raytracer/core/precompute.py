"""
Per-hit geometry shared by the shading routines
"""
import math
from typing import List, Optional

from .intersection import Intersection
from .ray import Ray
from .tuples import EPSILON


class Precompute:
    """Snapshot of everything shading needs to know about one intersection.

    ``xs`` is the full intersection list for the ray; it is used to work out
    which transparent objects the hit lies between (n1 and n2).
    """

    def __init__(self, hit: Intersection, ray: Ray, xs: Optional[List[Intersection]] = None):
        self.t = hit.t
        self.shape = hit.shape
        self.point = ray.position(self.t)
        self.eye = -ray.direction
        self.normal = self.shape.normal_at(self.point)

        if self.normal.dot(self.eye) < 0:
            self.inside = True
            self.normal = -self.normal
        else:
            self.inside = False

        self.over_point = self.point + self.normal * EPSILON
        self.under_point = self.point - self.normal * EPSILON
        self.reflectv = ray.direction.reflect(self.normal)

        self.n1, self.n2 = refractive_indices(hit, xs if xs is not None else [hit])
        self.reflectance = self.schlick()

    def __repr__(self):
        return (f"Precompute(t={self.t}, shape={self.shape}, point={self.point}, "
                f"normal={self.normal}, inside={self.inside}, n1={self.n1}, n2={self.n2})")

    def schlick(self) -> float:
        """Schlick's approximation of the Fresnel reflectance"""
        cos = self.eye.dot(self.normal)
        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t > 1.0:
                # Total internal reflection
                return 1.0
            cos = math.sqrt(1.0 - sin2_t)

        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1 - r0) * (1 - cos) ** 5


def refractive_indices(hit: Intersection, xs: List[Intersection]):
    """Indices of the media on either side of ``hit``.

    Walks the intersections in order keeping the stack of objects the ray is
    currently inside.
    """
    containers = []
    n1 = n2 = 1.0
    for i in sorted(xs):
        if i is hit:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        if any(shape is i.shape for shape in containers):
            containers = [shape for shape in containers if shape is not i.shape]
        else:
            containers.append(i.shape)

        if i is hit:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break
    return n1, n2
