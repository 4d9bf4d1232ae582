"""
Square matrices and the affine transform builders
"""
import math
from typing import Optional

import numpy as np

from .tuples import EPSILON, Tuple


class NotInvertibleError(ArithmeticError):
    """Raised when inverting a matrix whose determinant is zero"""


class Matrix:
    """Square matrix of degree 2 or more, backed by a numpy array.

    Matrices are treated as values: every operation returns a new matrix,
    which lets the inverse be cached on first use.
    """
    __slots__ = ['_data', '_inverse']

    def __init__(self, values):
        data = np.array(values, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix values must be square, got shape {data.shape}")
        if data.shape[0] < 2:
            raise ValueError("A matrix should have a minimum degree of 2")
        self._data = data
        self._inverse: Optional["Matrix"] = None

    @classmethod
    def identity(cls, degree: int = 4) -> "Matrix":
        return cls(np.eye(degree))

    @property
    def degree(self) -> int:
        return self._data.shape[0]

    def _check_index(self, row: int, col: int):
        if not (0 <= row < self.degree and 0 <= col < self.degree):
            raise IndexError(
                f"Index ({row}, {col}) is out of bounds for a matrix of degree {self.degree}")

    def __getitem__(self, index) -> float:
        row, col = index
        self._check_index(row, col)
        return float(self._data[row, col])

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.degree == other.degree
                and bool(np.all(np.abs(self._data - other._data) < EPSILON)))

    __hash__ = None

    def __repr__(self):
        rows = ["| " + " | ".join(f"{value:.4f}" for value in row) + " |" for row in self._data]
        return "\n".join(rows)

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Tuple):
            return self.multiply_tuple(other)
        return NotImplemented

    def multiply(self, other: "Matrix") -> "Matrix":
        """Matrix product. Applied to a tuple, ``a.multiply(b)`` applies b first"""
        if self.degree != other.degree:
            raise ValueError("Cannot multiply matrices of different degree")
        return Matrix(self._data @ other._data)

    def multiply_tuple(self, t: Tuple) -> Tuple:
        if self.degree != 4:
            raise ValueError("Matrix/tuple multiplication needs a matrix of degree 4")
        m = self._data
        x, y, z, w = t.x, t.y, t.z, t.w
        return Tuple(
            m[0, 0] * x + m[0, 1] * y + m[0, 2] * z + m[0, 3] * w,
            m[1, 0] * x + m[1, 1] * y + m[1, 2] * z + m[1, 3] * w,
            m[2, 0] * x + m[2, 1] * y + m[2, 2] * z + m[2, 3] * w,
            m[3, 0] * x + m[3, 1] * y + m[3, 2] * z + m[3, 3] * w,
        )

    def transpose(self) -> "Matrix":
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> "Matrix":
        self._check_index(row, col)
        if self.degree == 2:
            raise ValueError("Cannot take a submatrix of a 2x2 matrix")
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        sign = 1 if (row + col) % 2 == 0 else -1
        return self.minor(row, col) * sign

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row"""
        m = self._data
        if self.degree == 2:
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        return sum(float(m[0, col]) * self.cofactor(0, col) for col in range(self.degree))

    def is_invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self) -> "Matrix":
        if self._inverse is not None:
            return self._inverse

        det = self.determinant()
        if det == 0:
            raise NotInvertibleError(f"Matrix is not invertible:\n{self}")

        result = np.empty_like(self._data)
        for row in range(self.degree):
            for col in range(self.degree):
                # transposed on the way in
                result[col, row] = self.cofactor(row, col) / det

        self._inverse = Matrix(result)
        self._inverse._inverse = self
        return self._inverse

    # Chainable builders: m.translate(...) == m * translation(...)
    def translate(self, x: float, y: float, z: float) -> "Matrix":
        return self.multiply(translation(x, y, z))

    def scale(self, x: float, y: float, z: float) -> "Matrix":
        return self.multiply(scaling(x, y, z))

    def rotate_x(self, radians: float) -> "Matrix":
        return self.multiply(rotation_x(radians))

    def rotate_y(self, radians: float) -> "Matrix":
        return self.multiply(rotation_y(radians))

    def rotate_z(self, radians: float) -> "Matrix":
        return self.multiply(rotation_z(radians))

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> "Matrix":
        return self.multiply(shearing(xy, xz, yx, yz, zx, zy))


def identity() -> Matrix:
    return Matrix.identity(4)


def translation(x: float, y: float, z: float) -> Matrix:
    m = np.eye(4)
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return Matrix(m)


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(np.diag([x, y, z, 1.0]))


def rotation_x(r: float) -> Matrix:
    c, s = math.cos(r), math.sin(r)
    return Matrix([
        [1, 0, 0, 0],
        [0, c, -s, 0],
        [0, s, c, 0],
        [0, 0, 0, 1],
    ])


def rotation_y(r: float) -> Matrix:
    c, s = math.cos(r), math.sin(r)
    return Matrix([
        [c, 0, s, 0],
        [0, 1, 0, 0],
        [-s, 0, c, 0],
        [0, 0, 0, 1],
    ])


def rotation_z(r: float) -> Matrix:
    c, s = math.cos(r), math.sin(r)
    return Matrix([
        [c, -s, 0, 0],
        [s, c, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 1],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    return Matrix([
        [1, xy, xz, 0],
        [yx, 1, yz, 0],
        [zx, zy, 1, 0],
        [0, 0, 0, 1],
    ])


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Orient the world relative to an eye at from_point looking at to_point"""
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix([
        [left.x, left.y, left.z, 0],
        [true_up.x, true_up.y, true_up.z, 0],
        [-forward.x, -forward.y, -forward.z, 0],
        [0, 0, 0, 1],
    ])
    return orientation.translate(-from_point.x, -from_point.y, -from_point.z)
