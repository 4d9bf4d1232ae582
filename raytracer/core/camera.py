"""
Pinhole camera mapping canvas pixels to world-space rays
"""
import math

from .matrix import Matrix
from .ray import Ray
from .tuples import point


class Camera:
    """Camera with its image plane one unit in front of the eye.

    ``transform`` maps world space to camera space (see ``view_transform``).
    """

    def __init__(self, hsize: int, vsize: int, fov: float, transform: Matrix = None):
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera needs a positive size, got {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.fov = fov
        self._transform = Matrix.identity(4)
        if transform is not None:
            self.transform = transform

        half_view = math.tan(fov / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    def __repr__(self):
        return f"Camera({self.hsize}x{self.vsize}, fov={self.fov:.4f})"

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix):
        m.inverse()
        self._transform = m

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        # Offset from the canvas edge to the pixel's centre
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        # Camera looks toward -z, so +x is to the left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        inverse = self._transform.inverse()
        pixel = inverse * point(world_x, world_y, -1)
        origin = inverse * point(0, 0, 0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)
