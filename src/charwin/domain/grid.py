"""The window: a mutable rectangular buffer of characters.

INVARIANT: ``len(cells) == width * height`` and every cell holds exactly
one character. Cells are stored row-major.

Grid operations are total. Drawing off-grid clips silently, replacing a
character that does not occur is a no-op. Dimensions are the one thing a
grid rejects: they must be positive and hold at most ``MAX_CELLS`` cells.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from charwin.domain.geometry import Point

if TYPE_CHECKING:
    from charwin.domain.shapes import Shape

DEFAULT_FILL = "."
MAX_CELLS = 1_000_000


def check_size(width: int, height: int) -> None:
    """Raise ValueError unless a *width* x *height* grid is allowed."""
    if width < 1 or height < 1:
        msg = f"Grid dimensions must be positive, got {width}x{height}"
        raise ValueError(msg)
    if width * height > MAX_CELLS:
        msg = f"A {width}x{height} window exceeds the {MAX_CELLS:,} cell limit"
        raise ValueError(msg)


class Grid:
    """Row-major character grid with fill, replace, draw and resize.

    Usage::

        grid = Grid(10, 5)
        grid.draw(Point(4, 2), Circle(2), "#")
        print(grid.render())
    """

    def __init__(self, width: int, height: int, fill: str = DEFAULT_FILL) -> None:
        check_size(width, height)
        if len(fill) != 1:
            msg = f"Fill must be a single character, got {fill!r}"
            raise ValueError(msg)
        self._width = width
        self._height = height
        self._default = fill
        self._cells: list[str] = [fill] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def default_fill(self) -> str:
        """Character used for new cells on creation and resize."""
        return self._default

    @property
    def cells(self) -> tuple[str, ...]:
        """Snapshot of the row-major cell buffer."""
        return tuple(self._cells)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._cells == other._cells
        )

    def __getitem__(self, pos: tuple[int, int]) -> str:
        x, y = pos
        if not self.contains(Point(x, y)):
            msg = f"({x}, {y}) is outside a {self._width}x{self._height} grid"
            raise IndexError(msg)
        return self._cells[y * self._width + x]

    def contains(self, point: Point) -> bool:
        """Return True when *point* lies within ``[0, width) x [0, height)``."""
        return 0 <= point.x < self._width and 0 <= point.y < self._height

    # --- Mutation ---

    def fill(self, char: str) -> None:
        """Set every cell to *char*."""
        self._cells = [char] * (self._width * self._height)

    def replace(self, old: str, new: str) -> int:
        """Set every cell equal to *old* to *new*. Returns the number of cells changed."""
        changed = 0
        for i, cell in enumerate(self._cells):
            if cell == old:
                self._cells[i] = new
                changed += 1
        return changed

    def draw(self, origin: Point, shape: Shape, glyph: str) -> tuple[int, bool]:
        """Stamp *shape* at *origin* using *glyph*.

        Only the part of the shape's bounding box that overlaps the grid is
        visited.
        Cells outside the grid are dropped.

        Returns:
            ``(drawn, clipped)``: cells written, and whether any covered
            cell fell outside the grid.
        """
        low, high = shape.bounds()
        left, top = origin.x + low.x, origin.y + low.y
        right, bottom = origin.x + high.x, origin.y + high.y
        # Every edge of a shape's bounding box holds at least one covered cell.
        clipped = left < 0 or top < 0 or right >= self._width or bottom >= self._height
        drawn = 0
        for y in range(max(top, 0), min(bottom + 1, self._height)):
            for x in range(max(left, 0), min(right + 1, self._width)):
                if shape.covers(Point(x - origin.x, y - origin.y)):
                    self._cells[y * self._width + x] = glyph
                    drawn += 1
        return drawn, clipped

    def resize(self, width: int, height: int) -> None:
        """Change dimensions keeping the top-left overlap of the old content.

        Old and new buffers have different strides, so cells are copied by
        ``(x, y)`` rather than by raw offset.
        """
        check_size(width, height)
        cells = [self._default] * (width * height)
        for y in range(min(self._height, height)):
            for x in range(min(self._width, width)):
                cells[y * width + x] = self._cells[y * self._width + x]
        self._width, self._height, self._cells = width, height, cells

    # --- Output ---

    def rows(self) -> list[str]:
        """Return each row as a string, top to bottom."""
        w = self._width
        return ["".join(self._cells[y * w : (y + 1) * w]) for y in range(self._height)]

    def render(self) -> str:
        """Render the grid as ``height`` lines of ``width`` characters."""
        return "\n".join(self.rows())
