"""Tests for domain models to verify they work correctly."""

import math

import pytest

from asciigram.core.geometry import corner_curve
from asciigram.domain import (
    ASPECT,
    SCALE,
    Decoration,
    DecorationKind,
    DecorationSet,
    Orientation,
    Path,
    PathSet,
    PathStyle,
    Point,
    diagonal_angle,
    format_coord,
)
from asciigram.domain.path import DOUBLE, SQUIGGLE


class TestFormatCoord:
    """Tests for SVG number formatting."""

    def test_integer_value(self) -> None:
        """Whole numbers drop the decimal point."""
        assert format_coord(8.0) == "8"
        assert format_coord(100) == "100"

    def test_fraction(self) -> None:
        """Trailing zeros are stripped."""
        assert format_coord(8.5) == "8.5"
        assert format_coord(12.25) == "12.25"

    def test_five_decimals(self) -> None:
        """At most five decimals are kept."""
        assert format_coord(1 / 3) == "0.33333"

    def test_negative_zero(self) -> None:
        """Values that round to zero never print a sign."""
        assert format_coord(-0.000001) == "0"
        assert format_coord(0.0) == "0"


class TestPoint:
    """Tests for Point class."""

    def test_from_grid_origin(self) -> None:
        """Cell (0, 0) sits half a cell in from the corner."""
        p = Point.from_grid(0, 0)
        assert p.x == SCALE
        assert p.y == SCALE * ASPECT

    def test_from_grid_fractional(self) -> None:
        """Fractional grid coordinates address mid-cell anchors."""
        p = Point.from_grid(1.5, 0.5)
        assert p.to_tuple() == (20.0, 24.0)

    def test_to_grid_inverse(self) -> None:
        """to_grid undoes from_grid."""
        assert Point.from_grid(3, 2).to_grid() == (3.0, 2.0)

    def test_offset_in_cells(self) -> None:
        """offset moves by whole cells."""
        p = Point.from_grid(0, 0).offset(1, 1)
        assert p == Point.from_grid(1, 1)

    def test_translate_in_pixels(self) -> None:
        """translate moves by pixels."""
        p = Point(8, 16).translate(2, -2)
        assert p.to_tuple() == (10, 14)

    def test_is_close(self) -> None:
        """Points within tolerance compare close."""
        assert Point(8, 16).is_close(Point(8.001, 16.001))
        assert not Point(8, 16).is_close(Point(8.5, 16))

    def test_coords(self) -> None:
        """coords formats an SVG coordinate pair."""
        assert Point(8.0, 24.5).coords() == "8,24.5"

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore


class TestDiagonalAngle:
    """Tests for the on-screen diagonal angle."""

    def test_value(self) -> None:
        """A one-cell diagonal step is atan(ASPECT) degrees."""
        assert math.isclose(diagonal_angle(), 63.43494882292201)


class TestPath:
    """Tests for Path class."""

    def test_horizontal(self) -> None:
        """A path along a row is horizontal."""
        path = Path.from_grid(0, 0, 2, 0)
        assert path.is_horizontal()
        assert not path.is_vertical()
        assert path.orientation is Orientation.HORIZONTAL

    def test_vertical(self) -> None:
        """A path along a column is vertical."""
        path = Path.from_grid(1, 0, 1, 3)
        assert path.is_vertical()
        assert path.orientation is Orientation.VERTICAL

    def test_diagonal_orientations(self) -> None:
        """Slopes are judged in grid units, not pixels."""
        assert Path.from_grid(0, 2, 2, 0).orientation is Orientation.DIAGONAL
        assert Path.from_grid(0, 0, 2, 2).orientation is Orientation.BACK_DIAGONAL

    def test_irregular_slope_has_no_orientation(self) -> None:
        """Paths that fit no direction report None."""
        assert Path.from_grid(0, 0, 2, 1).orientation is None

    def test_curve_orientation(self) -> None:
        """Curves are never straight."""
        curve = corner_curve(0, 0, 2, 1)
        assert curve.is_curve()
        assert curve.orientation is Orientation.CURVED
        assert not curve.is_horizontal()
        assert not curve.is_vertical()

    def test_extremes(self) -> None:
        """upper/lower/leftmost/rightmost ignore endpoint order."""
        path = Path.from_grid(0, 3, 0, 1)
        assert path.upper == Point.from_grid(0, 1)
        assert path.lower == Point.from_grid(0, 3)
        path = Path.from_grid(4, 0, 1, 0)
        assert path.leftmost == Point.from_grid(1, 0)
        assert path.rightmost == Point.from_grid(4, 0)

    def test_degenerate(self) -> None:
        """A path whose ends coincide is degenerate."""
        assert Path.from_grid(1, 1, 1, 1).is_degenerate()
        assert not Path.from_grid(1, 1, 1, 1.5).is_degenerate()

    def test_straight_path_data(self) -> None:
        """Straight paths serialize as a move and a line."""
        assert Path.from_grid(0, 0, 2, 0).to_path_data() == ["M 8,16 L 24,16"]

    def test_curve_path_data(self) -> None:
        """Curves serialize as a cubic command."""
        data = corner_curve(0, 0, 2, 1).to_path_data()
        assert len(data) == 1
        assert data[0].startswith("M 8,16 C ")
        assert data[0].endswith(" 24,32")

    def test_double_horizontal_path_data(self) -> None:
        """Double lines are two strokes 2px either side of the centre."""
        data = Path.from_grid(0, 0, 2, 0, DOUBLE).to_path_data()
        assert data == ["M 8,14 L 24,14", "M 8,18 L 24,18"]

    def test_double_vertical_path_data(self) -> None:
        """Vertical double lines are offset sideways."""
        data = Path.from_grid(0, 0, 0, 2, DOUBLE).to_path_data()
        assert data == ["M 10,16 L 10,48", "M 6,16 L 6,48"]

    def test_squiggle_path_data(self) -> None:
        """Squiggles are quadratic waves with a trailing space."""
        data = Path.from_grid(0, 0, 2, 0, SQUIGGLE).to_path_data()
        assert len(data) == 1
        assert data[0].startswith("M 8,16 Q 10,12.8 12,16")
        assert data[0].endswith(" ")
        assert data[0].count(" Q ") == 4

    def test_style_flags(self) -> None:
        """PathStyle defaults to a plain solid stroke."""
        style = PathStyle()
        assert not style.dashed
        assert not style.double
        assert not style.squiggle


class TestPathSet:
    """Tests for PathSet queries."""

    def test_drops_degenerate(self) -> None:
        """Degenerate paths are never stored."""
        paths = PathSet()
        assert paths.add(Path.from_grid(2, 2, 2, 2)) is False
        assert len(paths) == 0

    def test_keeps_order(self) -> None:
        """Paths iterate in insertion order."""
        paths = PathSet()
        first = Path.from_grid(0, 0, 0, 2)
        second = Path.from_grid(0, 0, 3, 0)
        paths.add(first)
        paths.add(second)
        assert list(paths) == [first, second]
        assert paths[1] == second

    def test_vertical_queries(self) -> None:
        """Vertical end and pass-through queries."""
        paths = PathSet()
        paths.add(Path.from_grid(0, 0, 0, 2))
        assert paths.up_ends_at(0, 0)
        assert paths.down_ends_at(0, 2)
        assert not paths.down_ends_at(0, 0)
        assert paths.vertical_passes_through(0, 1)
        assert not paths.vertical_passes_through(0, 3)
        assert not paths.right_ends_at(0, 0)

    def test_horizontal_queries(self) -> None:
        """Horizontal end and pass-through queries."""
        paths = PathSet()
        paths.add(Path.from_grid(3, 1, 0, 1))
        assert paths.left_ends_at(0, 1)
        assert paths.right_ends_at(3, 1)
        assert paths.horizontal_passes_through(1.5, 1)
        assert not paths.horizontal_passes_through(1.5, 0)

    def test_diagonal_queries(self) -> None:
        """Diagonal queries distinguish upper and lower ends."""
        paths = PathSet()
        paths.add(Path.from_grid(0, 2, 2, 0))
        paths.add(Path.from_grid(4, 0, 6, 2))
        assert paths.diagonal_up_ends_at(2, 0)
        assert paths.diagonal_down_ends_at(0, 2)
        assert paths.back_diagonal_up_ends_at(4, 0)
        assert paths.back_diagonal_down_ends_at(6, 2)
        assert not paths.diagonal_up_ends_at(4, 0)

    def test_ends_at_fractional(self) -> None:
        """Queries accept half-cell anchors."""
        paths = PathSet()
        paths.add(Path.from_grid(0, 0.5, 0, 1.5))
        assert paths.ends_at(0, 0.5)
        assert paths.up_ends_at(0, 0.5)
        assert not paths.up_ends_at(0, 0)


class TestDecoration:
    """Tests for Decoration serialization."""

    def test_arrow_svg(self) -> None:
        """Arrows are filled polygons rotated about their centre."""
        arrow = Decoration(Point.from_grid(2, 0), DecorationKind.ARROW, angle=90.0)
        svg = arrow.to_svg()
        assert svg.startswith("<polygon points=")
        assert 'transform="rotate(90,24,16)"' in svg
        assert 'fill="var(--aasvg-fill)"' in svg

    def test_point_kinds(self) -> None:
        """Point kinds differ in fill."""
        center = Point.from_grid(0, 0)
        closed = Decoration(center, DecorationKind.CLOSED_POINT).to_svg()
        opened = Decoration(center, DecorationKind.OPEN_POINT).to_svg()
        dotted = Decoration(center, DecorationKind.DOTTED_POINT).to_svg()
        xor = Decoration(center, DecorationKind.XOR_POINT).to_svg()
        assert 'cx="8" cy="16"' in closed
        assert 'fill="var(--aasvg-fill)"' in closed
        assert 'fill="var(--aasvg-bg)"' in opened
        assert "stroke-dasharray" in dotted
        assert "<path" in xor

    def test_jump_svg(self) -> None:
        """Jumps draw a thick background stroke under the bridge."""
        jump = Decoration(
            Point.from_grid(0, 1),
            DecorationKind.JUMP,
            glyph=")",
            jump_from=Point.from_grid(0, 0.5),
            jump_to=Point.from_grid(0, 1.5),
        )
        svg = jump.to_svg()
        assert svg.count("<path") == 2
        assert 'stroke="var(--aasvg-bg)" stroke-width="3"' in svg
        # Bridge bulges right for ")"
        assert "C 14," in svg

    def test_gray_svg(self) -> None:
        """Gray fills cover the whole cell."""
        gray = Decoration(Point.from_grid(0, 0), DecorationKind.GRAY, level=128)
        svg = gray.to_svg()
        assert 'x="4" y="8" width="8" height="16"' in svg
        assert "rgb(128,128,128)" in svg

    def test_triangle_svg(self) -> None:
        """Unrotated triangles fill the lower-right half of the cell."""
        tri = Decoration(Point.from_grid(0, 0), DecorationKind.TRIANGLE, angle=0.0)
        assert tri.to_svg().startswith('<polygon points="12,8 12,24 4,24"')

    def test_is_point(self) -> None:
        """Only circle kinds are points."""
        assert DecorationKind.SHADED_POINT.is_point()
        assert not DecorationKind.ARROW.is_point()
        assert not DecorationKind.JUMP.is_point()


class TestDecorationSet:
    """Tests for DecorationSet."""

    def test_of_kind(self) -> None:
        """of_kind filters while keeping order."""
        decorations = DecorationSet()
        decorations.add(Decoration(Point(0, 0), DecorationKind.ARROW))
        decorations.add(Decoration(Point(8, 0), DecorationKind.GRAY))
        decorations.add(Decoration(Point(16, 0), DecorationKind.ARROW))
        arrows = decorations.of_kind(DecorationKind.ARROW)
        assert [d.position.x for d in arrows] == [0, 16]
        assert len(decorations) == 3
