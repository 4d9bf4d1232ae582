"""
Unit sphere centred on the origin
"""
import math
from typing import List

from raytracer.accelerators.bounds import BoundingBox
from raytracer.core.intersection import Intersection
from raytracer.core.materials import Material
from raytracer.core.ray import Ray
from raytracer.core.tuples import Tuple, point

from .shape import Shape


class Sphere(Shape):

    def local_intersect(self, ray: Ray) -> List[Intersection]:
        sphere_to_ray = ray.origin - point(0, 0, 0)
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return [Intersection(t1, self), Intersection(t2, self)]

    def local_normal_at(self, p: Tuple) -> Tuple:
        return p - point(0, 0, 0)

    def bounds(self) -> BoundingBox:
        return BoundingBox(point(-1, -1, -1), point(1, 1, 1))


def glass_sphere() -> Sphere:
    """Solid glass sphere, the usual test subject for refraction"""
    return Sphere(material=Material(transparency=1.0, refractive_index=1.5))
