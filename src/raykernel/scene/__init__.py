"""Scene module for objects that illuminate the geometry.

Components:
    light: Point light source (position + intensity)
"""

from .light import PointLight

__all__ = [
    "PointLight",
]
