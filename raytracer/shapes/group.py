"""
Groups of shapes sharing a transform
"""
from typing import Iterable, List, Optional

from raytracer.accelerators.bounds import BoundingBox
from raytracer.core.intersection import Intersection
from raytracer.core.ray import Ray
from raytracer.core.tuples import Tuple

from .shape import Shape


class Group(Shape):
    """Composite shape owning an ordered list of children.

    A group has no surface of its own. Its bounding box is the union of the
    children's parent-space boxes and is cached until a child is added,
    removed, re-transformed or resized. Rays that miss the box never reach
    the children.
    """

    def __init__(self, children: Iterable[Shape] = (), **kwargs):
        super().__init__(**kwargs)
        self._children: List[Shape] = []
        self._bounds: Optional[BoundingBox] = None
        for child in children:
            self.add_child(child)

    def __repr__(self):
        return f"Group({len(self._children)} children)"

    @property
    def children(self) -> List[Shape]:
        return list(self._children)

    def __len__(self):
        return len(self._children)

    def __iter__(self):
        return iter(self._children)

    def __contains__(self, shape):
        return any(child is shape for child in self._children)

    def add_child(self, shape: Shape) -> Shape:
        ancestor = self
        while ancestor is not None:
            if ancestor is shape:
                raise ValueError("A group cannot contain itself or one of its ancestors")
            ancestor = ancestor.parent
        if shape in self:
            return shape

        previous = shape.parent
        if previous is not None:
            previous.remove_child(shape)

        self._children.append(shape)
        shape._set_parent(self)
        self._bounds_changed()
        return shape

    def remove_child(self, shape: Shape) -> Shape:
        if shape not in self:
            raise ValueError(f"{shape} is not a child of this group")
        self._children = [child for child in self._children if child is not shape]
        shape._set_parent(None)
        self._bounds_changed()
        return shape

    def _bounds_changed(self):
        self._bounds = None
        super()._bounds_changed()

    def bounds(self) -> BoundingBox:
        if self._bounds is None:
            box = BoundingBox()
            for child in self._children:
                box.add_box(child.parent_space_bounds())
            self._bounds = box
        return self._bounds

    def local_intersect(self, ray: Ray) -> List[Intersection]:
        if not self.bounds().intersects(ray):
            return []
        xs = []
        for child in self._children:
            xs.extend(child.intersect(ray))
        xs.sort()
        return xs

    def local_normal_at(self, p: Tuple) -> Tuple:
        raise RuntimeError("Groups have no surface: normal_at is only defined for primitives")
