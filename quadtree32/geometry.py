"""Points and axis-aligned rectangles used as quadtree items."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


def _fmt(value: float) -> str:
    """Format a coordinate the short way: whole numbers without a trailing '.0'."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D point."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"{_fmt(self.x)} {_fmt(self.y)}"

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def bbox(self) -> Rect:
        """The degenerate rectangle covering just this point."""
        return Rect(min_x=self.x, min_y=self.y, max_x=self.x, max_y=self.y)

    def center(self) -> Point:
        """A point is its own center."""
        return self


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __str__(self) -> str:
        return (
            f"[x: {_fmt(self.max_x)} - {_fmt(self.min_x)}, "
            f"y: {_fmt(self.max_y)} - {_fmt(self.min_y)}]"
        )

    @staticmethod
    def zero() -> Rect:
        """A rectangle with every coordinate at 0.0."""
        return Rect(min_x=0.0, min_y=0.0, max_x=0.0, max_y=0.0)

    def width(self) -> float:
        return self.max_x - self.min_x

    def height(self) -> float:
        return self.max_y - self.min_y

    def center(self) -> Point:
        return Point((self.max_x + self.min_x) / 2.0, (self.max_y + self.min_y) / 2.0)

    def bbox(self) -> Rect:
        """A rectangle is its own bounding box."""
        return self

    def contains_point(self, p: Point) -> bool:
        """Whether the point lies inside the rectangle, edges included."""
        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y

    def contains_rect(self, r: Rect) -> bool:
        """Whether this rectangle completely contains another.

        The upper x edge of ``r`` is compared with both ``max_x`` and ``max_y``;
        the tree relies on this rule when deciding whether to grow its bounds.
        """
        return (
            r.min_x >= self.min_x
            and r.max_x <= self.max_x
            and r.min_y >= self.min_y
            and r.max_x <= self.max_y
        )

    def overlaps_rect(self, r: Rect) -> bool:
        """Whether the two rectangles touch or overlap."""
        return not (
            r.min_x > self.max_x
            or r.max_x < self.min_x
            or r.min_y > self.max_y
            or r.max_y < self.min_y
        )

    def union(self, r: Rect) -> Rect:
        """The smallest rectangle covering both rectangles."""
        return Rect(
            min_x=min(r.min_x, self.min_x),
            min_y=min(r.min_y, self.min_y),
            max_x=max(r.max_x, self.max_x),
            max_y=max(r.max_y, self.max_y),
        )

    def quarter(self) -> tuple[Rect, Rect, Rect, Rect]:
        """Split into quadrants: top left, top right, bottom left, bottom right."""
        mid_x = (self.max_x + self.min_x) / 2.0
        mid_y = (self.max_y + self.min_y) / 2.0
        return (
            Rect(min_x=self.min_x, min_y=mid_y, max_x=mid_x, max_y=self.max_y),
            Rect(min_x=mid_x, min_y=mid_y, max_x=self.max_x, max_y=self.max_y),
            Rect(min_x=self.min_x, min_y=self.min_y, max_x=mid_x, max_y=mid_y),
            Rect(min_x=mid_x, min_y=self.min_y, max_x=self.max_x, max_y=mid_y),
        )


Item = Union[Point, Rect]
"""Anything that can be stored in a quadtree."""