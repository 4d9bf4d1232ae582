"""
Scene container and the recursive shading pipeline
"""
import logging
import math
from typing import List, Optional

from raytracer.config import MAX_DEPTH

from .intersection import Intersection, hit
from .lights import PointLight, lighting
from .precompute import Precompute
from .ray import Ray
from .tuples import BLACK, Colour, Tuple

logger = logging.getLogger(__name__)


class World:
    """Top-level shapes and lights of a scene.

    Shading reads the world without modifying it, so a fully built world can
    be shared by any number of render calls.
    """

    def __init__(self):
        self.objects: List = []
        self.lights: List[PointLight] = []

    def __repr__(self):
        return f"World({len(self.objects)} objects, {len(self.lights)} lights)"

    def add_object(self, shape):
        logger.debug(f"Adding object {shape} to the world")
        self.objects.append(shape)
        return shape

    def add_light(self, light: PointLight) -> PointLight:
        logger.debug(f"Adding light {light} to the world")
        self.lights.append(light)
        return light

    def clear_objects(self):
        self.objects.clear()

    def clear_lights(self):
        self.lights.clear()

    def intersect(self, ray: Ray) -> List[Intersection]:
        xs = []
        for shape in self.objects:
            xs.extend(shape.intersect(ray))
        xs.sort()
        return xs

    def shade_hit(self, comps: Precompute, remaining: int = MAX_DEPTH) -> Colour:
        material = comps.shape.material

        surface = BLACK
        for light in self.lights:
            shadowed = self.is_shadowed(comps.over_point, light)
            surface = surface + lighting(material, comps.shape, light, comps.over_point,
                                         comps.eye, comps.normal, shadowed)

        # Bounced light does not depend on the lights, so it is added once
        reflected = self.reflected_colour(comps, remaining)
        refracted = self.refracted_colour(comps, remaining)

        if material.reflectivity > 0 and material.transparency > 0:
            return (surface + reflected * comps.reflectance
                    + refracted * (1 - comps.reflectance))
        return surface + reflected + refracted

    def colour_at(self, ray: Ray, remaining: int = MAX_DEPTH) -> Colour:
        xs = self.intersect(ray)
        h = hit(xs)
        if h is None:
            return BLACK
        comps = Precompute(h, ray, xs)
        return self.shade_hit(comps, remaining)

    def is_shadowed(self, p: Tuple, light: Optional[PointLight] = None) -> bool:
        """Whether a shadow-casting object lies between the point and the light"""
        if light is None:
            if not self.lights:
                return False
            light = self.lights[0]

        v = light.position - p
        distance = v.magnitude()
        ray = Ray(p, v.normalize())

        for i in self.intersect(ray):
            if i.t < 0 or not i.shape.casts_shadow:
                continue
            return i.t < distance
        return False

    def reflected_colour(self, comps: Precompute, remaining: int = MAX_DEPTH) -> Colour:
        reflectivity = comps.shape.material.reflectivity
        if reflectivity == 0 or remaining <= 0:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.colour_at(reflect_ray, remaining - 1) * reflectivity

    def refracted_colour(self, comps: Precompute, remaining: int = MAX_DEPTH) -> Colour:
        transparency = comps.shape.material.transparency
        if transparency == 0 or remaining <= 0:
            return BLACK

        # Snell's law
        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eye.dot(comps.normal)
        sin2_t = n_ratio * n_ratio * (1 - cos_i * cos_i)
        if sin2_t > 1:
            # Total internal reflection
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normal * (n_ratio * cos_i - cos_t) - comps.eye * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.colour_at(refract_ray, remaining - 1) * transparency
