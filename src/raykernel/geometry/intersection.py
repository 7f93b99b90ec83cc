"""Intersection records and the sorted intersection list.

An Intersection pairs a ray parameter t with the object the ray struck.
Intersections keeps its entries sorted ascending by t at all times: the list
is sorted whenever it is built, and combining two lists builds a new, sorted
one. That keeps hit() a simple forward scan. The lists are expected to stay
small (two entries per sphere), so re-sorting on every build is cheap.

Example:
    >>> from raykernel.geometry.intersection import Intersection, Intersections
    >>> from raykernel.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> xs = Intersections([Intersection(5, s), Intersection(-3, s), Intersection(2, s)])
    >>> xs.ts
    (-3.0, 2.0, 5.0)
    >>> xs.hit().t
    2.0
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from raykernel.geometry.sphere import Sphere


@dataclass(frozen=True)
class Intersection:
    """A single ray/object intersection.

    Attributes:
        t: Ray parameter at the intersection. Negative values lie behind
            the ray origin.
        object: The object that was hit. This is an ordinary reference, so
            the intersection keeps the object alive for as long as needed.
    """

    t: float
    object: Sphere

    # Spheres are mutable, so records that refer to them cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "t", float(self.t))


class Intersections(Sequence[Intersection]):
    """An immutable list of intersections, always sorted ascending by t."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Intersection] = ()) -> None:
        self._items: tuple[Intersection, ...] = tuple(sorted(items, key=attrgetter("t")))

    @overload
    def __getitem__(self, index: int) -> Intersection: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Intersection]: ...

    def __getitem__(self, index: int | slice) -> Intersection | Sequence[Intersection]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __add__(self, other: object) -> Intersections:
        if not isinstance(other, Intersections):
            return NotImplemented
        return Intersections(self._items + other._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersections):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Intersections({list(self._items)!r})"

    @property
    def ts(self) -> tuple[float, ...]:
        """The t values in ascending order."""
        return tuple(item.t for item in self._items)

    def hit(self) -> Intersection | None:
        """Return the nearest intersection with t >= 0, or None."""
        for item in self._items:
            if item.t >= 0.0:
                return item
        return None


def intersections(*items: Intersection) -> Intersections:
    """Build a sorted Intersections from loose intersection records."""
    return Intersections(items)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Return the visible intersection (smallest non-negative t), or None.

    Accepts any iterable; unsorted input is sorted first.
    """
    if not isinstance(xs, Intersections):
        xs = Intersections(xs)
    return xs.hit()
