"""Parametric shapes and their rasterization.

Shapes are stateless descriptors. ``rasterize()`` yields the cells a shape
covers relative to its origin, in row-major order, and can be called any
number of times. ``bounds()`` and ``covers()`` answer the same question
without enumerating, so a grid can visit only the cells it owns.

Magnitudes are validated by the parser; shapes assume positive values.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from charwin.domain.geometry import Point


class ShapeKind(StrEnum):
    """Shape type keywords accepted by ``new shape``."""

    CIRCLE = "circle"
    SQUARE = "square"


@dataclass(frozen=True, slots=True)
class Circle:
    """Filled disk centred on its origin."""

    radius: int

    kind = ShapeKind.CIRCLE

    def bounds(self) -> tuple[Point, Point]:
        """Inclusive ``(top_left, bottom_right)`` offsets of the covered cells."""
        r = self.radius
        return Point(-r, -r), Point(r, r)

    def covers(self, offset: Point) -> bool:
        return offset.x * offset.x + offset.y * offset.y <= self.radius * self.radius

    def rasterize(self) -> Iterator[Point]:
        r = self.radius
        for dy in range(-r, r + 1):
            for dx in range(-r, r + 1):
                offset = Point(dx, dy)
                if self.covers(offset):
                    yield offset

    def describe(self) -> str:
        return f"circle radius {self.radius}"


@dataclass(frozen=True, slots=True)
class Square:
    """Filled axis-aligned rectangle anchored at its top-left corner.

    Width and height are independent despite the name.
    """

    width: int
    height: int

    kind = ShapeKind.SQUARE

    def bounds(self) -> tuple[Point, Point]:
        return Point(0, 0), Point(self.width - 1, self.height - 1)

    def covers(self, offset: Point) -> bool:
        return 0 <= offset.x < self.width and 0 <= offset.y < self.height

    def rasterize(self) -> Iterator[Point]:
        for dy in range(self.height):
            for dx in range(self.width):
                yield Point(dx, dy)

    def describe(self) -> str:
        return f"square {self.width}x{self.height}"


Shape = Circle | Square
