from .matrix import (Matrix, NotInvertibleError, identity, rotation_x, rotation_y,
                     rotation_z, scaling, shearing, translation, view_transform)
from .ray import Ray
from .tuples import BLACK, EPSILON, WHITE, Colour, Tuple, point, vector
