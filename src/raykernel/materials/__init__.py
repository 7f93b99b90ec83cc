"""Materials module for surface shading.

Components:
    phong: Phong material (ambient/diffuse/specular/shininess) and the
        lighting function that evaluates it against a point light

Example:
    >>> from raykernel.core import Color
    >>> from raykernel.materials import Material, lighting
    >>> shiny_red = Material(color=Color(1, 0, 0), shininess=300.0)
"""

from .phong import Material, lighting

__all__ = [
    "Material",
    "lighting",
]
