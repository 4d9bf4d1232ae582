"""
Rays cast into the scene
"""
from .matrix import Matrix
from .tuples import Tuple


class Ray:
    __slots__ = ['origin', 'direction']

    def __init__(self, origin: Tuple, direction: Tuple):
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", direction)

    def __setattr__(self, name, value):
        raise AttributeError("Ray is immutable")

    def __delattr__(self, name):
        raise AttributeError("Ray is immutable")

    def position(self, t: float) -> Tuple:
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> "Ray":
        return Ray(m * self.origin, m * self.direction)

    def __repr__(self):
        return f"Ray(origin={self.origin}, direction={self.direction})"
