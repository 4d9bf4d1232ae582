"""
Surface materials for Phong shading with reflection and refraction
"""
from typing import Optional

from .patterns import Pattern, pattern_from_dict
from .tuples import EPSILON, Colour, Tuple


class Material:
    """Optical properties of a surface"""

    def __init__(self,
                 colour: Colour = None,
                 ambient: float = 0.1,
                 diffuse: float = 0.9,
                 specular: float = 0.9,
                 shininess: float = 200.0,
                 reflectivity: float = 0.0,
                 transparency: float = 0.0,
                 refractive_index: float = 1.0,
                 pattern: Optional[Pattern] = None):

        self.colour = colour if colour is not None else Colour(1, 1, 1)
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.reflectivity = reflectivity
        self.transparency = transparency
        self.refractive_index = refractive_index
        self.pattern = pattern

    def __eq__(self, other):
        if not isinstance(other, Material):
            return NotImplemented
        return (self.colour == other.colour
                and all(abs(getattr(self, name) - getattr(other, name)) < EPSILON
                        for name in ('ambient', 'diffuse', 'specular', 'shininess',
                                     'reflectivity', 'transparency', 'refractive_index'))
                and self.pattern is other.pattern)

    __hash__ = None

    def __repr__(self):
        return (f"Material(colour={self.colour}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess}, "
                f"reflectivity={self.reflectivity}, transparency={self.transparency}, "
                f"refractive_index={self.refractive_index}, pattern={self.pattern})")

    def colour_at(self, shape, world_point: Tuple) -> Colour:
        """Surface colour at a world point, honouring the pattern if there is one"""
        if self.pattern is None:
            return self.colour
        return self.pattern.colour_at_shape(shape, world_point)


class MaterialLibrary:
    """Predefined materials for common surfaces"""

    @staticmethod
    def matte(colour: Colour) -> Material:
        return Material(colour=colour, diffuse=0.9, specular=0.1, shininess=10.0)

    @staticmethod
    def plastic(colour: Colour) -> Material:
        return Material(colour=colour, diffuse=0.7, specular=0.3, shininess=200.0)

    @staticmethod
    def mirror() -> Material:
        return Material(colour=Colour(0.1, 0.1, 0.1), ambient=0.0, diffuse=0.1,
                        specular=1.0, shininess=300.0, reflectivity=1.0)

    @staticmethod
    def glass(refractive_index: float = 1.5) -> Material:
        return Material(colour=Colour(0.1, 0.1, 0.1), ambient=0.0, diffuse=0.1,
                        specular=1.0, shininess=300.0, reflectivity=0.9,
                        transparency=0.9, refractive_index=refractive_index)

    @staticmethod
    def water() -> Material:
        return MaterialLibrary.glass(refractive_index=1.333)

    @staticmethod
    def diamond() -> Material:
        return MaterialLibrary.glass(refractive_index=2.417)


def create_material_from_dict(params: dict) -> Material:
    """Create material from dictionary parameters"""
    material_type = params.get('type', 'standard')

    if material_type == 'glass':
        material = MaterialLibrary.glass(params.get('refractive_index', 1.5))
    elif material_type == 'mirror':
        material = MaterialLibrary.mirror()
    else:  # standard
        material = Material(
            colour=Colour(*params.get('colour', [1.0, 1.0, 1.0])),
            ambient=params.get('ambient', 0.1),
            diffuse=params.get('diffuse', 0.9),
            specular=params.get('specular', 0.9),
            shininess=params.get('shininess', 200.0),
            reflectivity=params.get('reflectivity', 0.0),
            transparency=params.get('transparency', 0.0),
            refractive_index=params.get('refractive_index', 1.0),
        )

    if 'pattern' in params:
        material.pattern = pattern_from_dict(params['pattern'])
    return material
