"""
Ready-made scenes
"""
import logging
import math
from typing import Callable, Dict, Tuple as Pair

from raytracer.config import RENDER_SETTINGS, SCENE_SETTINGS
from raytracer.core.camera import Camera
from raytracer.core.lights import PointLight
from raytracer.core.materials import Material, MaterialLibrary, create_material_from_dict
from raytracer.core.matrix import scaling, translation, view_transform
from raytracer.core.patterns import CheckerPattern, RingPattern, StripePattern
from raytracer.core.tuples import Colour, point, vector
from raytracer.core.world import World
from raytracer.shapes import Cone, Cube, Cylinder, Group, Plane, Sphere, Triangle

logger = logging.getLogger(__name__)


def default_world() -> World:
    """Two concentric spheres lit from the upper left"""
    world = World()
    world.add_light(PointLight(point(-10, 10, -10), Colour(1, 1, 1)))
    world.add_object(Sphere(material=Material(colour=Colour(0.8, 1.0, 0.6),
                                              diffuse=0.7, specular=0.2)))
    world.add_object(Sphere(transform=scaling(0.5, 0.5, 0.5)))
    return world


def default_light() -> PointLight:
    return PointLight(point(*SCENE_SETTINGS['light_position']),
                      Colour(*SCENE_SETTINGS['light_colour']))


def default_camera(width: int = RENDER_SETTINGS['width'],
                   height: int = RENDER_SETTINGS['height'],
                   fov: float = RENDER_SETTINGS['fov']) -> Camera:
    camera = Camera(width, height, fov)
    camera.transform = view_transform(point(*SCENE_SETTINGS['camera_from']),
                                      point(*SCENE_SETTINGS['camera_to']),
                                      vector(*SCENE_SETTINGS['camera_up']))
    return camera


def _floor(reflectivity: float = 0.0) -> Plane:
    floor = Plane(material=Material(pattern=CheckerPattern(Colour(0.9, 0.9, 0.9),
                                                           Colour(0.1, 0.1, 0.1)),
                                    specular=0.0, reflectivity=reflectivity))
    return floor


def reflections_scene() -> World:
    """Mirror-like floor under three coloured spheres"""
    world = World()
    world.add_light(default_light())
    world.add_object(_floor(reflectivity=0.3))

    world.add_object(Sphere(transform=translation(-0.5, 1, 0.5),
                            material=Material(colour=Colour(0.1, 1, 0.5), diffuse=0.7,
                                              specular=0.3, reflectivity=0.2)))
    world.add_object(Sphere(transform=translation(1.5, 0.5, -0.5).scale(0.5, 0.5, 0.5),
                            material=MaterialLibrary.mirror()))
    world.add_object(Sphere(transform=translation(-1.5, 0.33, -0.75).scale(0.33, 0.33, 0.33),
                            material=Material(colour=Colour(1, 0.8, 0.1), diffuse=0.7,
                                              specular=0.3)))
    return world


def glass_scene() -> World:
    """Glass sphere with a hollow air bubble in front of a striped wall"""
    world = World()
    world.add_light(default_light())
    world.add_object(_floor())

    wall = Plane(transform=translation(0, 0, 5).rotate_x(math.pi / 2),
                 material=Material(pattern=StripePattern(Colour(0.2, 0.4, 0.8),
                                                         Colour(1, 1, 1),
                                                         transform=scaling(0.5, 0.5, 0.5))))
    world.add_object(wall)

    glass = Sphere(transform=translation(0, 1, 0), material=MaterialLibrary.glass())
    glass.casts_shadow = False
    bubble = Sphere(transform=translation(0, 1, 0).scale(0.5, 0.5, 0.5),
                    material=Material(colour=Colour(0, 0, 0), ambient=0, diffuse=0,
                                      specular=1.0, shininess=300, reflectivity=0.9,
                                      transparency=0.9, refractive_index=1.0000034))
    bubble.casts_shadow = False
    world.add_object(glass)
    world.add_object(bubble)
    return world


def patterns_scene() -> World:
    """One object per pattern kind, built from material dictionaries"""
    world = World()
    world.add_light(default_light())
    world.add_object(Plane(material=create_material_from_dict({
        'specular': 0.0,
        'pattern': {'type': 'blend',
                    'first': {'type': 'stripes', 'a': [0.9, 0.3, 0.3], 'b': [1, 1, 1]},
                    'second': {'type': 'stripes', 'a': [0.3, 0.3, 0.9], 'b': [1, 1, 1],
                               'scale': [1, 1, 1]},
                    'weight': 0.5},
    })))

    world.add_object(Sphere(transform=translation(-1.5, 1, 0), material=create_material_from_dict({
        'pattern': {'type': 'gradient', 'a': [1, 0, 0], 'b': [0, 0, 1], 'scale': [2, 2, 2]},
    })))
    world.add_object(Sphere(transform=translation(0, 1, 0), material=create_material_from_dict({
        'pattern': {'type': 'radial_gradient', 'a': [1, 1, 0], 'b': [0, 1, 0],
                    'scale': [0.25, 0.25, 0.25]},
    })))
    ringed = Sphere(transform=translation(1.5, 1, 0), material=Material(
        pattern=RingPattern(Colour(1, 1, 1), Colour(0.2, 0.6, 0.2),
                            transform=scaling(0.2, 0.2, 0.2).rotate_x(math.pi / 2))))
    world.add_object(ringed)
    return world


def primitives_scene() -> World:
    """Every primitive kind, nested inside transformed groups"""
    world = World()
    world.add_light(default_light())
    world.add_object(_floor())

    cylinder = Cylinder(minimum=0, maximum=1, closed=True,
                        material=create_material_from_dict({'colour': [0.2, 0.5, 0.9],
                                                            'reflectivity': 0.1}))
    cone = Cone(minimum=-1, maximum=0, closed=True,
                transform=translation(0, 2, 0).scale(0.5, 1, 0.5),
                material=Material(colour=Colour(0.9, 0.4, 0.1)))
    tower = Group([cylinder, cone], transform=translation(-2, 0, 1))
    world.add_object(tower)

    cube = Cube(transform=translation(0, 0.5, 0).rotate_y(math.pi / 4).scale(0.5, 0.5, 0.5),
                material=Material(colour=Colour(0.8, 0.2, 0.2)))
    pyramid = Group(transform=translation(2, 0, 0.5))
    apex = point(0, 1.5, 0)
    base = [point(-0.7, 0, -0.7), point(0.7, 0, -0.7), point(0.7, 0, 0.7), point(-0.7, 0, 0.7)]
    for i, corner in enumerate(base):
        pyramid.add_child(Triangle(corner, base[(i + 1) % 4], apex,
                                   material=Material(colour=Colour(0.9, 0.9, 0.3))))
    world.add_object(Group([cube, pyramid]))

    pipe = Cylinder(minimum=-1, maximum=1,
                    transform=translation(0, 2.2, 2).rotate_z(math.pi / 2).scale(0.2, 1, 0.2),
                    material=MaterialLibrary.plastic(Colour(0.5, 0.5, 0.5)))
    world.add_object(pipe)
    return world


def default_scene() -> World:
    return default_world()


SCENES: Dict[str, Callable[[], World]] = {
    'default': default_scene,
    'reflections': reflections_scene,
    'glass': glass_scene,
    'patterns': patterns_scene,
    'primitives': primitives_scene,
}


def build_scene(name: str, width: int = RENDER_SETTINGS['width'],
                height: int = RENDER_SETTINGS['height'],
                fov: float = RENDER_SETTINGS['fov']) -> Pair[World, Camera]:
    """World and camera for a named scene"""
    if name not in SCENES:
        raise ValueError(f"Unknown scene '{name}'. Choose from: {', '.join(sorted(SCENES))}")
    camera = default_camera(width, height, fov)
    if name == 'default':
        camera.transform = view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0))
    world = SCENES[name]()
    logger.info(f"Built scene '{name}' with {len(world.objects)} objects")
    return world, camera


def model_scene(model: Group, width: int = RENDER_SETTINGS['width'],
                height: int = RENDER_SETTINGS['height'],
                fov: float = RENDER_SETTINGS['fov']) -> Pair[World, Camera]:
    """Scene framing an imported model above a checkered floor"""
    world = World()
    world.add_light(default_light())
    world.add_object(_floor())

    box = model.bounds()
    if not box.is_empty:
        extent = max(box.max.x - box.min.x, box.max.y - box.min.y, box.max.z - box.min.z)
        size = 2.0 / extent if extent > 0 else 1.0
        centre_x = (box.min.x + box.max.x) / 2
        centre_z = (box.min.z + box.max.z) / 2
        model.transform = scaling(size, size, size).translate(-centre_x, -box.min.y, -centre_z)
    world.add_object(model)
    return world, default_camera(width, height, fov)
