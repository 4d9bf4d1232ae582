"""
Light sources and Phong local illumination
"""
from dataclasses import dataclass, field

from .tuples import BLACK, Colour, Tuple


@dataclass
class PointLight:
    position: Tuple
    intensity: Colour = field(default_factory=lambda: Colour(1, 1, 1))


def lighting(material, shape, light: PointLight, position: Tuple, eyev: Tuple,
             normalv: Tuple, in_shadow: bool = False) -> Colour:
    """Phong illumination of one point by one light.

    The surface colour comes from the material's pattern (if any) evaluated
    in the shape's object space. A shadowed point keeps its ambient term.
    """
    effective_colour = material.colour_at(shape, position) * light.intensity
    ambient = effective_colour * material.ambient
    if in_shadow:
        return ambient

    lightv = (light.position - position).normalize()
    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal < 0:
        # Light is on the other side of the surface
        return ambient

    diffuse = effective_colour * (material.diffuse * light_dot_normal)

    reflectv = (-lightv).reflect(normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0:
        specular = BLACK
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
