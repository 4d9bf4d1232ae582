from .cone import Cone
from .cube import Cube
from .cylinder import Cylinder, TruncatedShape
from .group import Group
from .plane import Plane
from .shape import Shape
from .sphere import Sphere, glass_sphere
from .triangle import Triangle

__all__ = [
    "Shape", "Sphere", "Plane", "Cube", "Cylinder", "Cone", "Triangle", "Group",
    "TruncatedShape", "glass_sphere",
]
