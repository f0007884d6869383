"""Tests for the Grid (window) model."""

import pytest

from charwin.domain.geometry import Point
from charwin.domain.grid import DEFAULT_FILL, MAX_CELLS, Grid
from charwin.domain.shapes import Circle, Square


class TestConstruction:
    @pytest.mark.parametrize(("w", "h"), [(1, 1), (6, 4), (3, 9), (40, 2)])
    def test_render_dimensions(self, w: int, h: int) -> None:
        lines = Grid(w, h).render().split("\n")
        assert len(lines) == h
        assert all(len(line) == w for line in lines)

    def test_default_fill(self, grid: Grid) -> None:
        assert set(grid.cells) == {DEFAULT_FILL}
        assert len(grid.cells) == grid.width * grid.height

    def test_custom_fill(self) -> None:
        assert Grid(2, 2, " ").render() == "  \n  "

    @pytest.mark.parametrize(("w", "h"), [(0, 3), (3, 0), (-1, 2)])
    def test_rejects_non_positive(self, w: int, h: int) -> None:
        with pytest.raises(ValueError):
            Grid(w, h)

    @pytest.mark.parametrize(("w", "h"), [(MAX_CELLS + 1, 1), (1001, 1000), (2**62, 2**62)])
    def test_rejects_over_cell_limit(self, w: int, h: int) -> None:
        with pytest.raises(ValueError, match="cell limit"):
            Grid(w, h)

    def test_accepts_cell_limit(self) -> None:
        assert len(Grid(MAX_CELLS, 1).cells) == MAX_CELLS

    def test_rejects_multi_char_fill(self) -> None:
        with pytest.raises(ValueError):
            Grid(2, 2, "ab")

    def test_index_out_of_range(self, grid: Grid) -> None:
        with pytest.raises(IndexError):
            grid[6, 0]


class TestFill:
    def test_sets_every_cell(self, grid: Grid) -> None:
        grid.fill("#")
        assert set(grid.cells) == {"#"}

    def test_idempotent(self, grid: Grid) -> None:
        grid.fill("#")
        once = grid.cells
        grid.fill("#")
        assert grid.cells == once


class TestReplace:
    def test_replaces_matching_cells_only(self, patterned: Grid) -> None:
        changed = patterned.replace("f", "#")
        assert changed == 1
        assert patterned[1, 1] == "#"
        assert patterned[0, 0] == "a"

    def test_missing_char_is_noop(self, patterned: Grid) -> None:
        before = patterned.cells
        assert patterned.replace("z", "#") == 0
        assert patterned.cells == before

    def test_replaces_all_occurrences(self, grid: Grid) -> None:
        assert grid.replace(DEFAULT_FILL, "x") == 24
        assert set(grid.cells) == {"x"}


class TestDraw:
    def test_square_at_origin(self, grid: Grid) -> None:
        drawn, clipped = grid.draw(Point(1, 1), Square(2, 2), "#")
        assert (drawn, clipped) == (4, False)
        assert grid.render() == "......\n.##...\n.##...\n......"

    def test_circle_centred_on_origin(self) -> None:
        g = Grid(5, 5)
        g.draw(Point(2, 2), Circle(1), "o")
        assert g.render() == ".....\n..o..\n.ooo.\n..o..\n....."

    def test_partial_off_grid_clips(self, grid: Grid) -> None:
        drawn, clipped = grid.draw(Point(5, 3), Square(3, 3), "#")
        assert drawn == 1
        assert clipped is True
        assert grid[5, 3] == "#"
        assert grid.cells.count("#") == 1

    def test_negative_origin_clips(self, grid: Grid) -> None:
        grid.draw(Point(-1, -1), Square(2, 2), "#")
        assert grid[0, 0] == "#"
        assert grid.cells.count("#") == 1

    def test_fully_off_grid_changes_nothing(self, grid: Grid) -> None:
        before = grid.cells
        drawn, clipped = grid.draw(Point(100, 100), Circle(3), "#")
        assert drawn == 0
        assert clipped is True
        assert grid.cells == before

    def test_overwrites_existing_content(self, patterned: Grid) -> None:
        patterned.draw(Point(0, 0), Square(1, 3), "|")
        assert patterned.render() == "|bcd\n|fgh\n|jkl"

    def test_shape_touching_every_edge_is_not_clipped(self) -> None:
        g = Grid(5, 5)
        drawn, clipped = g.draw(Point(2, 2), Circle(2), "o")
        assert drawn == len(list(Circle(2).rasterize()))
        assert clipped is False

    def test_huge_circle_covers_whole_grid(self, grid: Grid) -> None:
        drawn, clipped = grid.draw(Point(3, 2), Circle(100_000), "#")
        assert drawn == 24
        assert clipped is True
        assert set(grid.cells) == {"#"}

    def test_huge_square_clips_to_grid(self, grid: Grid) -> None:
        drawn, clipped = grid.draw(Point(3, 2), Square(10**12, 10**12), "#")
        assert drawn == 6
        assert clipped is True
        assert grid.render() == "......\n......\n...###\n...###"

    def test_huge_circle_far_away_still_reaches_grid(self) -> None:
        g = Grid(3, 3)
        drawn, _ = g.draw(Point(-100_000, 1), Circle(100_001), "#")
        assert g.render() == "#..\n##.\n#.."
        assert drawn == 4

    def test_matches_rasterize(self) -> None:
        g = Grid(7, 5)
        origin = Point(1, 3)
        g.draw(origin, Circle(2), "o")
        expected = {origin + p for p in Circle(2).rasterize() if g.contains(origin + p)}
        actual = {Point(x, y) for y in range(5) for x in range(7) if g[x, y] == "o"}
        assert actual == expected


class TestResize:
    def test_shrink_keeps_top_left(self, patterned: Grid) -> None:
        patterned.resize(2, 2)
        assert patterned.render() == "ab\nef"

    def test_grow_pads_with_default(self, patterned: Grid) -> None:
        patterned.resize(6, 4)
        assert patterned.render() == "abcd..\nefgh..\nijkl..\n......"

    def test_mixed_grow_and_shrink(self, patterned: Grid) -> None:
        patterned.resize(5, 2)
        assert patterned.render() == "abcd.\nefgh."

    @pytest.mark.parametrize(("w2", "h2"), [(1, 1), (2, 5), (7, 1), (4, 3), (9, 9)])
    def test_preserves_overlap(self, patterned: Grid, w2: int, h2: int) -> None:
        before = {(x, y): patterned[x, y] for x in range(4) for y in range(3)}
        patterned.resize(w2, h2)
        assert (patterned.width, patterned.height) == (w2, h2)
        assert len(patterned.cells) == w2 * h2
        for y in range(h2):
            for x in range(w2):
                if x < 4 and y < 3:
                    assert patterned[x, y] == before[x, y]
                else:
                    assert patterned[x, y] == DEFAULT_FILL

    def test_uses_grid_default_not_current_content(self) -> None:
        g = Grid(2, 2, " ")
        g.fill("#")
        g.resize(3, 2)
        assert g.render() == "## \n## "

    def test_rejects_non_positive(self, grid: Grid) -> None:
        with pytest.raises(ValueError):
            grid.resize(0, 4)
        assert (grid.width, grid.height) == (6, 4)

    def test_rejects_over_cell_limit(self, grid: Grid) -> None:
        with pytest.raises(ValueError, match="cell limit"):
            grid.resize(10**19, 1)
        assert (grid.width, grid.height) == (6, 4)


class TestRender:
    def test_rows_top_to_bottom(self, patterned: Grid) -> None:
        assert patterned.rows() == ["abcd", "efgh", "ijkl"]
        assert patterned.render() == "abcd\nefgh\nijkl"

    def test_render_is_pure(self, patterned: Grid) -> None:
        before = patterned.cells
        patterned.render()
        assert patterned.cells == before


class TestEquality:
    def test_equal_when_same_content(self) -> None:
        a, b = Grid(3, 2), Grid(3, 2)
        assert a == b
        b.fill("#")
        assert a != b
