"""
Procedural colour patterns.

A pattern maps a point in its own space to a colour. Patterns carry their
own transform, applied after the owning shape's transform.
"""
import math

from .matrix import Matrix, scaling
from .tuples import Colour, Tuple


class Pattern:
    """Base class for all patterns"""

    def __init__(self, transform: Matrix = None):
        self._transform = Matrix.identity(4)
        if transform is not None:
            self.transform = transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix):
        m.inverse()
        self._transform = m

    def local_colour_at(self, p: Tuple) -> Colour:
        raise NotImplementedError

    def colour_at(self, object_point: Tuple) -> Colour:
        """Colour at a point given in the owning object's space"""
        return self.local_colour_at(self._transform.inverse() * object_point)

    def colour_at_shape(self, shape, world_point: Tuple) -> Colour:
        return self.colour_at(shape.world_to_object(world_point))


class TwoColourPattern(Pattern):
    def __init__(self, a: Colour = None, b: Colour = None, transform: Matrix = None):
        super().__init__(transform)
        self.a = a if a is not None else Colour(1, 1, 1)
        self.b = b if b is not None else Colour(0, 0, 0)

    def __repr__(self):
        return f"{type(self).__name__}(a={self.a}, b={self.b})"


class SolidPattern(Pattern):
    def __init__(self, colour: Colour = None, transform: Matrix = None):
        super().__init__(transform)
        self.colour = colour if colour is not None else Colour(1, 1, 1)

    def local_colour_at(self, p: Tuple) -> Colour:
        return self.colour

    def __repr__(self):
        return f"SolidPattern({self.colour})"


class StripePattern(TwoColourPattern):
    """Alternates a and b along x"""

    def local_colour_at(self, p: Tuple) -> Colour:
        return self.a if math.floor(p.x) % 2 == 0 else self.b


class RingPattern(TwoColourPattern):
    """Concentric rings in the x-z plane"""

    def local_colour_at(self, p: Tuple) -> Colour:
        return self.a if math.floor(math.hypot(p.x, p.z)) % 2 == 0 else self.b


class GradientPattern(TwoColourPattern):
    """Linear blend from a to b over each unit of x"""

    def local_colour_at(self, p: Tuple) -> Colour:
        fraction = p.x - math.floor(p.x)
        return self.a + (self.b - self.a) * fraction


class RadialGradientPattern(TwoColourPattern):
    """Linear blend from a to b over each unit of distance from the y axis"""

    def local_colour_at(self, p: Tuple) -> Colour:
        distance = math.hypot(p.x, p.z)
        fraction = distance - math.floor(distance)
        return self.a + (self.b - self.a) * fraction


class CheckerPattern(TwoColourPattern):
    """3D checkerboard of unit cubes"""

    def local_colour_at(self, p: Tuple) -> Colour:
        total = math.floor(p.x) + math.floor(p.y) + math.floor(p.z)
        return self.a if total % 2 == 0 else self.b


class BlendPattern(Pattern):
    """Weighted mix of two patterns; weight 0 is all first, 1 is all second"""

    def __init__(self, first: Pattern = None, second: Pattern = None, weight: float = 0.5,
                 transform: Matrix = None):
        super().__init__(transform)
        self.first = first if first is not None else SolidPattern(Colour(1, 1, 1))
        self.second = second if second is not None else SolidPattern(Colour(0, 0, 0))
        self.weight = weight

    def local_colour_at(self, p: Tuple) -> Colour:
        return self.first.colour_at(p) * (1 - self.weight) + self.second.colour_at(p) * self.weight

    def __repr__(self):
        return f"BlendPattern(first={self.first}, second={self.second}, weight={self.weight})"


PATTERNS = {
    'stripes': StripePattern,
    'rings': RingPattern,
    'gradient': GradientPattern,
    'radial_gradient': RadialGradientPattern,
    'checkers': CheckerPattern,
}


def pattern_from_dict(params: dict) -> Pattern:
    """Create a pattern from dictionary parameters"""
    pattern_type = params.get('type', 'solid')
    if pattern_type == 'solid':
        pattern = SolidPattern(Colour(*params.get('colour', [1.0, 1.0, 1.0])))
    elif pattern_type == 'blend':
        pattern = BlendPattern(pattern_from_dict(params['first']),
                               pattern_from_dict(params['second']),
                               params.get('weight', 0.5))
    elif pattern_type in PATTERNS:
        pattern = PATTERNS[pattern_type](Colour(*params.get('a', [1.0, 1.0, 1.0])),
                                         Colour(*params.get('b', [0.0, 0.0, 0.0])))
    else:
        raise ValueError(f"Unknown pattern type: {pattern_type}")

    if 'scale' in params:
        pattern.transform = scaling(*params['scale'])
    return pattern
