"""Phong surface material and local illumination.

The Phong model approximates the light leaving a surface point as the sum
of three terms:

    ambient  = effective_color * ambient
    diffuse  = effective_color * diffuse * (light . normal)
    specular = intensity * specular * (reflect . eye) ** shininess

where effective_color is the surface color multiplied component-wise by the
light intensity. Diffuse and specular are black when the light is behind
the surface (light . normal <= 0); specular alone is black when the
reflection points away from the eye (reflect . eye <= 0). The result is not
clamped; clamping happens only when an image is encoded.

Example:
    >>> from raykernel.core.color import Color
    >>> from raykernel.core.tuples import Point, Vector
    >>> from raykernel.materials.phong import Material, lighting
    >>> from raykernel.scene.light import PointLight
    >>> light = PointLight(Point(0, 0, -10))
    >>> eye = normal = Vector(0, 0, -1)
    >>> lighting(Material(), light, Point(0, 0, 0), eye, normal) == Color(1.9, 1.9, 1.9)
    True
"""

from dataclasses import dataclass, field

from raykernel.core.color import BLACK, WHITE, Color
from raykernel.core.tuples import Point, Vector
from raykernel.scene.light import PointLight


@dataclass(frozen=True)
class Material:
    """Phong material properties.

    No ranges are enforced. Typical values keep the coefficients in [0, 1];
    shininess works best between 10 (very large highlight) and 200 (small
    highlight).

    Attributes:
        color: Surface color.
        ambient: Fraction of light reflected regardless of geometry.
        diffuse: Fraction of light reflected by a matte surface.
        specular: Strength of the highlight.
        shininess: Tightness of the highlight.
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0


def lighting(
    material: Material,
    light: PointLight,
    point: Point,
    eye: Vector,
    normal: Vector,
) -> Color:
    """Compute the color at a surface point lit by a single point light.

    Args:
        material: Surface material at the point.
        light: The light source.
        point: The point being shaded, in world space.
        eye: Unit vector from the point toward the eye.
        normal: Unit surface normal at the point.

    Returns:
        The unclamped sum of the ambient, diffuse and specular terms.

    Raises:
        NumericDegenerate: If the light sits exactly at the point.
    """
    effective_color = material.color * light.intensity
    light_vec = (light.position - point).normalize()
    ambient = effective_color * material.ambient

    light_dot_normal = light_vec.dot(normal)
    if light_dot_normal <= 0.0:
        # Light is on the other side of the surface
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflect_vec = (-light_vec).reflect(normal)
    reflect_dot_eye = reflect_vec.dot(eye)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
