"""Light sources."""

from dataclasses import dataclass, field

from raykernel.core.color import WHITE, Color
from raykernel.core.tuples import Point
from raykernel.errors import WrongKind


@dataclass(frozen=True)
class PointLight:
    """A light with no size, emitting from a single point.

    Attributes:
        position: Where the light sits in world space.
        intensity: Color and brightness of the light (default white).
    """

    position: Point
    intensity: Color = field(default_factory=lambda: WHITE)

    def __post_init__(self) -> None:
        if not self.position.is_point():
            raise WrongKind(f"Light position must be a point, got {self.position!r}")
