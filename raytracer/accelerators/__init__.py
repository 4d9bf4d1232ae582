from .bounds import BoundingBox, check_axis

__all__ = ["BoundingBox", "check_axis"]
