"""Tests for world shading: shadows, reflection and refraction."""

import math

import pytest

from raytracer.core.intersection import Intersection, intersections
from raytracer.core.lights import PointLight
from raytracer.core.materials import Material
from raytracer.core.matrix import translation
from raytracer.core.precompute import Precompute
from raytracer.core.ray import Ray
from raytracer.core.tuples import BLACK, WHITE, Colour, point, vector
from raytracer.core.world import World
from raytracer.shapes import Plane, Sphere

HALF_ROOT2 = math.sqrt(2) / 2
DEFAULT_HIT = (0.38066, 0.47583, 0.2855)


class TestWorld:
    """Test suite for World contents and intersection."""

    def test_new_world_is_empty(self):
        w = World()
        assert w.objects == []
        assert w.lights == []

    def test_default_world(self, world):
        assert len(world.lights) == 1
        assert world.lights[0].position == point(-10, 10, -10)
        assert world.lights[0].intensity == WHITE
        outer, inner = world.objects
        assert outer.material.colour == Colour(0.8, 1.0, 0.6)
        assert outer.material.diffuse == 0.7
        assert outer.material.specular == 0.2
        assert inner.transform * point(1, 0, 0) == point(0.5, 0, 0)

    def test_add_and_clear(self):
        w = World()
        s = w.add_object(Sphere())
        light = w.add_light(PointLight(point(0, 0, 0)))
        assert w.objects == [s]
        assert w.lights == [light]
        w.clear_objects()
        w.clear_lights()
        assert w.objects == [] and w.lights == []

    def test_intersections_are_sorted(self, world):
        xs = world.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([4, 4.5, 5.5, 6])


class TestShading:
    """Test suite for shade_hit and colour_at."""

    def test_shading_an_intersection(self, world, approx_colour):
        ray = Ray(point(0, 0, -5), vector(0, 0, 1))
        i = Intersection(4, world.objects[0])
        assert approx_colour(world.shade_hit(Precompute(i, ray)), DEFAULT_HIT)

    def test_shading_from_inside(self, world, approx_colour):
        world.clear_lights()
        world.add_light(PointLight(point(0, 0.25, 0), WHITE))
        ray = Ray(point(0, 0, 0), vector(0, 0, 1))
        i = Intersection(0.5, world.objects[1])
        assert approx_colour(world.shade_hit(Precompute(i, ray)), (0.90498, 0.90498, 0.90498))

    def test_shadowed_intersection(self, approx_colour):
        w = World()
        w.add_light(PointLight(point(0, 0, -10), WHITE))
        w.add_object(Sphere())
        s2 = w.add_object(Sphere(transform=translation(0, 0, 10)))
        ray = Ray(point(0, 0, 5), vector(0, 0, 1))
        comps = Precompute(Intersection(4, s2), ray)
        assert approx_colour(w.shade_hit(comps), (0.1, 0.1, 0.1))

    def test_every_light_contributes(self, world, approx_colour):
        world.add_light(PointLight(point(-10, 10, -10), WHITE))
        colour = world.colour_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert approx_colour(colour, [2 * c for c in DEFAULT_HIT])

    def test_no_lights_is_black(self, world):
        world.clear_lights()
        assert world.colour_at(Ray(point(0, 0, -5), vector(0, 0, 1))) == BLACK

    def test_ray_misses(self, world):
        assert world.colour_at(Ray(point(0, 0, -5), vector(0, 1, 0))) == BLACK

    def test_returned_black_cannot_corrupt_later_renders(self, world, approx_colour):
        miss = Ray(point(0, 0, -5), vector(0, 1, 0))
        with pytest.raises(AttributeError):
            world.colour_at(miss).red = 1.0
        assert world.colour_at(miss) == BLACK
        colour = world.colour_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert approx_colour(colour, DEFAULT_HIT)

    def test_ray_hits(self, world, approx_colour):
        colour = world.colour_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert approx_colour(colour, DEFAULT_HIT)

    def test_intersection_behind_ray(self, world):
        outer, inner = world.objects
        outer.material.ambient = 1
        inner.material.ambient = 1
        colour = world.colour_at(Ray(point(0, 0, 0.75), vector(0, 0, -1)))
        assert colour == inner.material.colour


class TestShadows:
    """Test suite for is_shadowed."""

    @pytest.mark.parametrize("p, expected", [
        (point(0, 10, 0), False),
        (point(10, -10, 10), True),
        (point(-20, 20, -20), False),
        (point(-2, 2, -2), False),
    ])
    def test_is_shadowed(self, world, p, expected):
        assert world.is_shadowed(p) is expected
        assert world.is_shadowed(p, world.lights[0]) is expected

    def test_non_shadow_casters_are_ignored(self, world):
        for shape in world.objects:
            shape.casts_shadow = False
        assert not world.is_shadowed(point(10, -10, 10))

    def test_no_lights_means_no_shadow(self, world):
        world.clear_lights()
        assert not world.is_shadowed(point(10, -10, 10))

    def test_shadow_depends_on_light(self, world):
        behind = PointLight(point(20, -20, 20), WHITE)
        assert not world.is_shadowed(point(10, -10, 10), behind)


class TestReflection:
    """Test suite for reflected colour."""

    @pytest.fixture
    def mirror_floor(self, world):
        floor = Plane(transform=translation(0, -1, 0), material=Material(reflectivity=0.5))
        world.add_object(floor)
        ray = Ray(point(0, 0, -3), vector(0, -HALF_ROOT2, HALF_ROOT2))
        return world, Precompute(Intersection(math.sqrt(2), floor), ray)

    def test_non_reflective_material(self, world):
        inner = world.objects[1]
        inner.material.ambient = 1
        ray = Ray(point(0, 0, 0), vector(0, 0, 1))
        comps = Precompute(Intersection(1, inner), ray)
        assert world.reflected_colour(comps) == BLACK

    def test_reflective_material(self, mirror_floor, approx_colour):
        world, comps = mirror_floor
        assert approx_colour(world.reflected_colour(comps), (0.19032, 0.2379, 0.14274), 1e-3)

    def test_shade_hit_adds_reflection(self, mirror_floor, approx_colour):
        world, comps = mirror_floor
        assert approx_colour(world.shade_hit(comps), (0.87677, 0.92436, 0.82918), 1e-3)

    def test_recursion_floor_is_black(self, mirror_floor):
        world, comps = mirror_floor
        assert world.reflected_colour(comps, 0) == BLACK

    def test_mutually_reflective_surfaces_terminate(self):
        w = World()
        w.add_light(PointLight(point(0, 0, 0), WHITE))
        w.add_object(Plane(transform=translation(0, -1, 0), material=Material(reflectivity=1)))
        w.add_object(Plane(transform=translation(0, 1, 0), material=Material(reflectivity=1)))
        colour = w.colour_at(Ray(point(0, 0, 0), vector(0, 1, 0)))
        assert isinstance(colour, Colour)


class TestRefraction:
    """Test suite for refracted colour and the Fresnel blend."""

    def test_opaque_surface(self, world):
        shape = world.objects[0]
        ray = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = intersections(Intersection(4, shape), Intersection(6, shape))
        assert world.refracted_colour(Precompute(xs[0], ray, xs), 5) == BLACK

    def test_recursion_floor_is_black(self, world):
        shape = world.objects[0]
        shape.material.transparency = 1.0
        shape.material.refractive_index = 1.5
        ray = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = intersections(Intersection(4, shape), Intersection(6, shape))
        assert world.refracted_colour(Precompute(xs[0], ray, xs), 0) == BLACK

    def test_total_internal_reflection(self, world):
        shape = world.objects[0]
        shape.material.transparency = 1.0
        shape.material.refractive_index = 1.5
        ray = Ray(point(0, 0, HALF_ROOT2), vector(0, 1, 0))
        xs = intersections(Intersection(-HALF_ROOT2, shape), Intersection(HALF_ROOT2, shape))
        assert world.refracted_colour(Precompute(xs[1], ray, xs), 5) == BLACK

    def test_refracted_ray(self, world, position_pattern, approx_colour):
        a, b = world.objects
        a.material.ambient = 1.0
        a.material.pattern = position_pattern
        b.material.transparency = 1.0
        b.material.refractive_index = 1.5
        ray = Ray(point(0, 0, 0.1), vector(0, 1, 0))
        xs = intersections(Intersection(-0.9899, a), Intersection(-0.4899, b),
                           Intersection(0.4899, b), Intersection(0.9899, a))
        colour = world.refracted_colour(Precompute(xs[2], ray, xs), 5)
        assert approx_colour(colour, (0, 0.99888, 0.04725), 5e-3)

    @pytest.fixture
    def glass_floor(self, world):
        floor = Plane(transform=translation(0, -1, 0),
                      material=Material(transparency=0.5, refractive_index=1.5))
        ball = Sphere(transform=translation(0, -3.5, -0.5),
                      material=Material(colour=Colour(1, 0, 0), ambient=0.5))
        world.add_object(floor)
        world.add_object(ball)
        return world, floor

    def test_shade_hit_with_transparent_material(self, glass_floor, approx_colour):
        world, floor = glass_floor
        ray = Ray(point(0, 0, -3), vector(0, -HALF_ROOT2, HALF_ROOT2))
        xs = [Intersection(math.sqrt(2), floor)]
        colour = world.shade_hit(Precompute(xs[0], ray, xs), 5)
        assert approx_colour(colour, (0.93642, 0.68642, 0.68642), 1e-3)

    def test_shade_hit_blends_with_reflectance(self, glass_floor, approx_colour):
        world, floor = glass_floor
        floor.material.reflectivity = 0.5
        ray = Ray(point(0, 0, -3), vector(0, -HALF_ROOT2, HALF_ROOT2))
        xs = [Intersection(math.sqrt(2), floor)]
        colour = world.shade_hit(Precompute(xs[0], ray, xs), 5)
        assert approx_colour(colour, (0.93391, 0.69643, 0.69243), 1e-3)
