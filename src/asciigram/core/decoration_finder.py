"""Decoration recognition: arrow heads, points, jumps, shading, triangles.

Runs after line recognition, because arrow heads, points and jumps are only
accepted where a recognized line actually meets them. Each kind is its own
row-major pass; accepted cells are marked used so they are not emitted as
text.
"""

import logging

from asciigram.core.chars import (
    Direction,
    gray_level,
    is_any_line,
    is_down_arrow,
    is_empty_or_non_alnum,
    is_gray,
    is_jump,
    is_line,
    is_point,
    is_triangle,
    is_vertex,
    triangle_angle,
)
from asciigram.core.grid import Grid
from asciigram.domain.decoration import (
    ANGLE_DOWN,
    ANGLE_LEFT,
    ANGLE_RIGHT,
    ANGLE_UP,
    Decoration,
    DecorationKind,
    DecorationSet,
)
from asciigram.domain.path import PathSet
from asciigram.domain.point import Point, diagonal_angle

logger = logging.getLogger(__name__)

H = Direction.HORIZONTAL
V = Direction.VERTICAL
D = Direction.DIAGONAL
B = Direction.BACK_DIAGONAL

_POINT_KINDS = {
    "*": DecorationKind.CLOSED_POINT,
    "●": DecorationKind.CLOSED_POINT,
    "o": DecorationKind.OPEN_POINT,
    "○": DecorationKind.OPEN_POINT,
    "◌": DecorationKind.DOTTED_POINT,
    "◍": DecorationKind.SHADED_POINT,
    "⊕": DecorationKind.XOR_POINT,
}

# Points that are drawn wherever they appear
_UNCONDITIONAL_POINTS = "◌○◍●⊕"


class DecorationFinder:
    """Recognizes decorations against an already-built PathSet.

    Example:
        grid = Grid.from_text("-->")
        paths = LineFinder(grid).find()
        decorations = DecorationFinder(grid, paths).find()
        decorations[0].angle  # 0.0
    """

    def __init__(self, grid: Grid, paths: PathSet) -> None:
        self._grid = grid
        self._paths = paths
        self._decorations = DecorationSet()
        self._diagonal = diagonal_angle()

    def find(self) -> DecorationSet:
        """Run all decoration passes in order.

        Returns:
            DecorationSet in recognition order
        """
        passes = (
            ("arrows", self._find_arrow_heads),
            ("points", self._find_points),
            ("jumps", self._find_jumps),
            ("gray", self._find_gray),
            ("triangles", self._find_triangles),
        )
        for name, scan in passes:
            before = len(self._decorations)
            scan()
            logger.debug(
                "Decoration pass %s added %d decorations", name, len(self._decorations) - before
            )
        return self._decorations

    def _cells(self):
        for y in range(self._grid.height):
            for x in range(self._grid.width):
                yield x, y, self._grid.get(x, y)

    def _place(
        self,
        x: float,
        y: float,
        kind: DecorationKind,
        glyph: str,
        angle: float = 0.0,
        level: int = 0,
        jump_from: Point | None = None,
        jump_to: Point | None = None,
    ) -> None:
        self._decorations.add(
            Decoration(
                position=Point.from_grid(x, y),
                kind=kind,
                angle=angle,
                glyph=glyph,
                level=level,
                jump_from=jump_from,
                jump_to=jump_to,
            )
        )

    # Arrow heads

    def arrow_placement(self, x: int, y: int) -> tuple[float, float, float] | None:
        """Decide where and at what angle an arrow head at (x, y) is drawn.

        Returns:
            (grid x, grid y, angle) or None if no line meets the glyph
        """
        c = self._grid.get(x, y)
        paths = self._paths
        d = self._diagonal

        if c == ">":
            if (
                paths.right_ends_at(x, y)
                or paths.horizontal_passes_through(x, y)
                or paths.right_ends_at(x - 1, y)
            ):
                dx = -0.5 if is_point(self._grid.get(x + 1, y)) else 0.0
                return (x + dx, y, ANGLE_RIGHT)
            if paths.diagonal_up_ends_at(x, y) or paths.diagonal_up_ends_at(x - 1, y + 1):
                return (x, y, 360 - d)
            if paths.back_diagonal_down_ends_at(x, y) or paths.back_diagonal_down_ends_at(x - 1, y - 1):
                return (x, y, d)

        elif c == "<":
            if (
                paths.left_ends_at(x, y)
                or paths.horizontal_passes_through(x, y)
                or paths.left_ends_at(x + 1, y)
            ):
                dx = 0.5 if is_point(self._grid.get(x - 1, y)) else 0.0
                return (x + dx, y, ANGLE_LEFT)
            if paths.diagonal_down_ends_at(x, y) or paths.diagonal_down_ends_at(x + 1, y - 1):
                return (x, y, 180 - d)
            if paths.back_diagonal_up_ends_at(x, y) or paths.back_diagonal_up_ends_at(x + 1, y + 1):
                return (x, y, 180 + d)

        elif c == "^":
            if paths.up_ends_at(x, y - 0.5):
                return (x, y - 0.5, ANGLE_UP)
            if paths.up_ends_at(x, y) or paths.up_ends_at(x, y + 1):
                return (x, y, ANGLE_UP)
            if (
                paths.diagonal_up_ends_at(x + 0.5, y - 0.5)
                or paths.diagonal_up_ends_at(x + 0.25, y - 0.25)
                or paths.diagonal_up_ends_at(x, y)
                or paths.diagonal_up_ends_at(x - 1, y + 1)
            ):
                return (x, y, 360 - d)
            if (
                paths.back_diagonal_up_ends_at(x, y)
                or paths.back_diagonal_up_ends_at(x - 0.5, y - 0.5)
                or paths.back_diagonal_up_ends_at(x - 0.25, y - 0.25)
                or paths.back_diagonal_up_ends_at(x + 1, y + 1)
            ):
                return (x, y, 180 + d)
            if paths.vertical_passes_through(x, y):
                return (x, y - 0.5, ANGLE_UP)

        elif is_down_arrow(c):
            if paths.down_ends_at(x, y + 0.5):
                return (x, y + 0.5, ANGLE_DOWN)
            if paths.down_ends_at(x, y) or paths.down_ends_at(x, y - 1):
                return (x, y, ANGLE_DOWN)
            if (
                paths.diagonal_down_ends_at(x - 0.5, y + 0.5)
                or paths.diagonal_down_ends_at(x - 0.25, y + 0.25)
                or paths.diagonal_down_ends_at(x, y)
                or paths.diagonal_down_ends_at(x + 1, y - 1)
            ):
                return (x, y, 180 - d)
            if (
                paths.back_diagonal_down_ends_at(x, y)
                or paths.back_diagonal_down_ends_at(x + 0.5, y + 0.5)
                or paths.back_diagonal_down_ends_at(x + 0.25, y + 0.25)
                or paths.back_diagonal_down_ends_at(x - 1, y - 1)
            ):
                return (x, y, d)
            if paths.vertical_passes_through(x, y):
                return (x, y + 0.5, ANGLE_DOWN)

        return None

    def _find_arrow_heads(self) -> None:
        for x, y, c in self._cells():
            if c not in "<>^" and not is_down_arrow(c):
                continue
            placement = self.arrow_placement(x, y)
            if placement is None:
                continue
            ax, ay, angle = placement
            self._place(ax, ay, DecorationKind.ARROW, c, angle=angle)
            self._grid.set_used(x, y)

    # Points

    def is_point_decoration(self, x: int, y: int) -> bool:
        """Check whether the glyph at (x, y) is drawn as a point."""
        g = self._grid.get
        c = g(x, y)
        if not is_point(c):
            return False
        if c in _UNCONDITIONAL_POINTS:
            return True

        up, dn, lt, rt = g(x, y - 1), g(x, y + 1), g(x - 1, y), g(x + 1, y)
        paths = self._paths
        touches_line_glyph = (
            is_line(lt, H)
            or is_line(rt, H)
            or is_line(up, V)
            or is_line(dn, V)
            or is_line(g(x - 1, y + 1), D)
            or is_line(g(x + 1, y - 1), D)
            or is_line(g(x - 1, y - 1), B)
            or is_line(g(x + 1, y + 1), B)
        )
        touches_path = (
            paths.right_ends_at(x - 1, y)
            or paths.left_ends_at(x + 1, y)
            or paths.down_ends_at(x, y - 1)
            or paths.up_ends_at(x, y + 1)
            or paths.up_ends_at(x, y)
            or paths.down_ends_at(x, y)
            or paths.ends_at(x, y)
        )
        on_line = all(is_empty_or_non_alnum(n) or is_vertex(n) for n in (up, dn, lt, rt))
        return touches_line_glyph or touches_path or on_line

    def _find_points(self) -> None:
        for x, y, c in self._cells():
            if self.is_point_decoration(x, y):
                self._place(x, y, _POINT_KINDS[c], c)
                self._grid.set_used(x, y)

    # Jumps

    def is_jump_decoration(self, x: int, y: int) -> bool:
        """Check whether a parenthesis at (x, y) bridges a vertical line."""
        g = self._grid.get
        if not is_jump(g(x, y)):
            return False
        paths = self._paths
        ends_above = paths.down_ends_at(x, y - 0.5) or is_any_line(g(x, y - 1), V)
        resumes_below = paths.up_ends_at(x, y + 0.5) or is_any_line(g(x, y + 1), V)
        return ends_above and resumes_below

    def _find_jumps(self) -> None:
        for x, y, c in self._cells():
            if not self.is_jump_decoration(x, y):
                continue
            self._place(
                x,
                y,
                DecorationKind.JUMP,
                c,
                jump_from=Point.from_grid(x, y - 0.5),
                jump_to=Point.from_grid(x, y + 0.5),
            )
            self._grid.set_used(x, y)

    # Fills

    def _find_gray(self) -> None:
        for x, y, c in self._cells():
            if is_gray(c):
                self._place(x, y, DecorationKind.GRAY, c, level=gray_level(c))
                self._grid.set_used(x, y)

    def _find_triangles(self) -> None:
        for x, y, c in self._cells():
            if is_triangle(c):
                self._place(x, y, DecorationKind.TRIANGLE, c, angle=triangle_angle(c))
                self._grid.set_used(x, y)


def find_decorations(grid: Grid, paths: PathSet) -> DecorationSet:
    """Recognize all decorations on a grid.

    Args:
        grid: Grid already scanned by the line finder
        paths: Lines recognized on that grid

    Returns:
        DecorationSet in recognition order
    """
    return DecorationFinder(grid, paths).find()
