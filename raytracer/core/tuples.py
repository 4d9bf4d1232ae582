"""
Points, vectors and colours
"""
import math

EPSILON = 1e-5


def equal(a: float, b: float) -> bool:
    """Compare two floats within EPSILON"""
    return abs(a - b) < EPSILON


class Tuple:
    """Four component tuple. w=1 marks a point, w=0 a vector"""
    __slots__ = ['x', 'y', 'z', 'w']

    def __init__(self, x=0.0, y=0.0, z=0.0, w=0.0):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))
        object.__setattr__(self, "w", float(w))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return (equal(self.x, other.x) and equal(self.y, other.y)
                and equal(self.z, other.z) and equal(self.w, other.w))

    __hash__ = None

    def __add__(self, other):
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self):
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar):
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __repr__(self):
        kind = "Point" if self.is_point() else "Vector" if self.is_vector() else "Tuple"
        return f"{kind}({self.x:.5f}, {self.y:.5f}, {self.z:.5f})"

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self):
        length = self.magnitude()
        if length == 0.0:
            return Tuple(self.x, self.y, self.z, self.w)
        return self / length

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other):
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def reflect(self, normal):
        """Reflect this vector around a surface normal"""
        return self - normal * (2 * self.dot(normal))

    def as_vector(self):
        return Tuple(self.x, self.y, self.z, 0.0)

    def as_point(self):
        return Tuple(self.x, self.y, self.z, 1.0)


def point(x, y, z) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x, y, z) -> Tuple:
    return Tuple(x, y, z, 0.0)


class Colour:
    """RGB colour with unclamped components"""
    __slots__ = ['red', 'green', 'blue']

    def __init__(self, red=0.0, green=0.0, blue=0.0):
        object.__setattr__(self, "red", float(red))
        object.__setattr__(self, "green", float(green))
        object.__setattr__(self, "blue", float(blue))

    def __setattr__(self, name, value):
        raise AttributeError("Colour is immutable")

    def __delattr__(self, name):
        raise AttributeError("Colour is immutable")

    def __eq__(self, other):
        if not isinstance(other, Colour):
            return NotImplemented
        return (equal(self.red, other.red) and equal(self.green, other.green)
                and equal(self.blue, other.blue))

    __hash__ = None

    def __add__(self, other):
        return Colour(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other):
        return Colour(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        if isinstance(other, Colour):
            return Colour(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Colour(self.red * other, self.green * other, self.blue * other)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def __repr__(self):
        return f"Colour({self.red:.5f}, {self.green:.5f}, {self.blue:.5f})"

    def to_array(self):
        return [self.red, self.green, self.blue]


BLACK = Colour(0, 0, 0)
WHITE = Colour(1, 1, 1)
