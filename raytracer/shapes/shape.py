"""
Base class for everything that can be placed in a scene
"""
import weakref
from typing import List, Optional

from raytracer.accelerators.bounds import BoundingBox
from raytracer.core.intersection import Intersection
from raytracer.core.materials import Material
from raytracer.core.matrix import Matrix
from raytracer.core.ray import Ray
from raytracer.core.tuples import Tuple


class Shape:
    """Transformable, shadable scene object.

    Subclasses implement the three local operations in their own object
    space: ``local_intersect``, ``local_normal_at`` and ``bounds``. Everything
    here handles the conversion between world, parent and object space.
    """

    def __init__(self, transform: Matrix = None, material: Material = None,
                 casts_shadow: bool = True):
        self._transform = Matrix.identity(4)
        self.material = material if material is not None else Material()
        self.casts_shadow = casts_shadow
        self._parent_ref = None
        if transform is not None:
            self.transform = transform

    def __repr__(self):
        return f"{type(self).__name__}(material={self.material})"

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix):
        # Fail here rather than on the first ray
        m.inverse()
        self._transform = m
        self._bounds_changed()

    @property
    def parent(self) -> Optional["Shape"]:
        return self._parent_ref() if self._parent_ref is not None else None

    def _set_parent(self, group: Optional["Shape"]):
        self._parent_ref = weakref.ref(group) if group is not None else None

    def _bounds_changed(self):
        parent = self.parent
        if parent is not None:
            parent._bounds_changed()

    def intersect(self, ray: Ray) -> List[Intersection]:
        local_ray = ray.transform(self._transform.inverse())
        return self.local_intersect(local_ray)

    def local_intersect(self, ray: Ray) -> List[Intersection]:
        raise NotImplementedError

    def world_to_object(self, p: Tuple) -> Tuple:
        parent = self.parent
        if parent is not None:
            p = parent.world_to_object(p)
        return self._transform.inverse() * p

    def normal_to_world(self, normal: Tuple) -> Tuple:
        normal = (self._transform.inverse().transpose() * normal).as_vector().normalize()
        parent = self.parent
        if parent is not None:
            normal = parent.normal_to_world(normal)
        return normal

    def normal_at(self, world_point: Tuple) -> Tuple:
        local_point = self.world_to_object(world_point)
        local_normal = self.local_normal_at(local_point)
        return self.normal_to_world(local_normal)

    def local_normal_at(self, p: Tuple) -> Tuple:
        raise NotImplementedError

    def bounds(self) -> BoundingBox:
        raise NotImplementedError

    def parent_space_bounds(self) -> BoundingBox:
        return self.bounds().transform(self._transform)
