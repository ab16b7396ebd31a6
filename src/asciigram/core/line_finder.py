"""Line recognition: turn runs of line glyphs into Paths.

The finder walks the grid in a fixed sequence of passes. Order matters:
each pass marks the cells it consumes as used, and later passes skip or
defer to those cells.

1. Vertical runs (solid, then double)
2. Short stubs joining ticks to underscores and zig-zags
3. Horizontal runs (solid, squiggle, double)
4. Back-diagonal runs (``\\``)
5. Forward-diagonal runs (``/``)
6. Rounded corners and bracket arcs
7. Underscore runs

Where a run ends, a first-match-wins list of StretchRules decides how far
the endpoint extends to meet whatever the run runs into.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from asciigram.core.chars import (
    Direction,
    LineStyle,
    is_bottom_vertex,
    is_box_junction,
    is_down_arrow,
    is_h_line_glyph,
    is_jump,
    is_letter,
    is_line,
    is_point,
    is_top_vertex,
    is_v_line_glyph,
    is_v_line_or_jump_or_point,
    is_vertex,
    is_vertex_or_left_decoration,
    is_vertex_or_right_decoration,
    line_glyphs,
)
from asciigram.core.geometry import BRACKET_BULGE, bracket_curve, corner_curve
from asciigram.core.grid import Grid
from asciigram.domain.path import DOUBLE, SOLID, SQUIGGLE, Path, PathSet, PathStyle

logger = logging.getLogger(__name__)

H = Direction.HORIZONTAL
V = Direction.VERTICAL
D = Direction.DIAGONAL
B = Direction.BACK_DIAGONAL

VERTICAL_STYLES = (LineStyle.SOLID, LineStyle.DOUBLE)
HORIZONTAL_STYLES = (LineStyle.SOLID, LineStyle.SQUIGGLE, LineStyle.DOUBLE)

PATH_STYLES: dict[LineStyle, PathStyle] = {
    LineStyle.SOLID: SOLID,
    LineStyle.DOUBLE: DOUBLE,
    LineStyle.SQUIGGLE: SQUIGGLE,
}

SLASHES = line_glyphs(D)
BACKSLASHES = line_glyphs(B)


@dataclass(frozen=True)
class StretchRule:
    """One endpoint extension rule.

    Attributes:
        name: Short label for debugging and tests
        applies: Predicate called as ``applies(grid, x, y, dx, dy)`` with the
            run's end cell and the outward step from it
        amount: Cells to extend by (negative values pull the end back)
    """

    name: str
    applies: Callable[[Grid, int, int, int, int], bool]
    amount: float


def apply_stretch(
    rules: tuple[StretchRule, ...], grid: Grid, x: int, y: int, dx: int, dy: int
) -> float:
    """Return the amount of the first rule that applies, or zero."""
    for rule in rules:
        if rule.applies(grid, x, y, dx, dy):
            return rule.amount
    return 0.0


# Vertical run ends. dy is -1 at the top end and +1 at the bottom end.


def _v_onto_claimed_vertex(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    # A vertex stacked against the run and already owned by a run of the
    # other weight: reach all the way to its centre
    beyond = grid.get(x, y + dy)
    facing = is_top_vertex if dy < 0 else is_bottom_vertex
    return not is_vertex(grid.get(x, y)) and facing(beyond) and grid.is_used(x, y + dy)


def _v_onto_stacked_vertex(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    # Two identical vertices stacked between runs: bridge the gap between them
    end = grid.get(x, y)
    return is_vertex(end) and grid.get(x, y + dy) == end


def _v_toward_jump(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    return is_jump(grid.get(x, y + dy))


def _v_toward_junction(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    return is_box_junction(grid.get(x, y + dy))


def _v_toward_crossing(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    if is_vertex(grid.get(x, y)):
        return False
    beyond = grid.get(x, y + dy)
    if is_h_line_glyph(beyond):
        return True
    # Underscores sit on the bottom edge of their cell
    if dy < 0:
        return (
            beyond == "_"
            or grid.get(x - 1, y - 1) == "_"
            or grid.get(x + 1, y - 1) == "_"
            or is_bottom_vertex(beyond)
        )
    return is_top_vertex(beyond) or grid.get(x - 1, y) == "_" or grid.get(x + 1, y) == "_"


VERTICAL_STRETCH_RULES: tuple[StretchRule, ...] = (
    StretchRule("claimed-vertex", _v_onto_claimed_vertex, 1.0),
    StretchRule("stacked-vertex", _v_onto_stacked_vertex, 1.0),
    StretchRule("jump", _v_toward_jump, 0.5),
    StretchRule("box-junction", _v_toward_junction, 0.5),
    StretchRule("crossing", _v_toward_crossing, 0.5),
)


# Horizontal run ends. dx is -1 at the left end and +1 at the right end.


def _h_toward_junction(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    return is_box_junction(grid.get(x + dx, y))


def _h_away_from_curve(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    # The end vertex turns into a rounded corner; leave that cell to the curve
    end = grid.get(x, y)
    if is_vertex(grid.get(x + dx, y)):
        return False
    return (is_top_vertex(end) and is_v_line_or_jump_or_point(grid.get(x + dx, y + 1))) or (
        is_bottom_vertex(end) and is_v_line_or_jump_or_point(grid.get(x + dx, y - 1))
    )


def _h_onto_claimed_vertex(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    return (
        not is_vertex(grid.get(x, y))
        and is_vertex(grid.get(x + dx, y))
        and grid.is_used(x + dx, y)
    )


def _h_toward_point(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    return is_point(grid.get(x + dx, y))


HORIZONTAL_STRETCH_RULES: tuple[StretchRule, ...] = (
    StretchRule("box-junction", _h_toward_junction, 0.5),
    StretchRule("curve-corner", _h_away_from_curve, -1.0),
    StretchRule("claimed-vertex", _h_onto_claimed_vertex, 1.0),
    StretchRule("point", _h_toward_point, 0.5),
)


# Diagonal run ends. (dx, dy) is the outward diagonal step.


def _diag_sharp_cap(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    # Two diagonals stacked into a sharp vertex, like / over \ or \ over /
    other = SLASHES if dx == dy else BACKSLASHES
    return grid.get(x, y + dy) in other


def _diag_toward_underscore(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    if dy < 0:
        return grid.get(x + dx, y - 1) == "_" or grid.get(x, y - 1) == "_"
    return grid.get(x - 1, y) == "_" or grid.get(x + 1, y) == "_"


def _diag_toward_line(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    if is_vertex(grid.get(x, y)):
        return False
    beyond = grid.get(x + dx, y + dy)
    return is_line(beyond, H) or is_line(beyond, V)


def _diag_toward_point(grid: Grid, x: int, y: int, dx: int, dy: int) -> bool:
    return is_point(grid.get(x + dx, y + dy))


DIAGONAL_STRETCH_RULES: tuple[StretchRule, ...] = (
    StretchRule("sharp-cap", _diag_sharp_cap, 0.5),
    StretchRule("underscore", _diag_toward_underscore, 0.5),
    StretchRule("line", _diag_toward_line, 0.5),
    StretchRule("point", _diag_toward_point, 0.25),
)


class LineFinder:
    """Recognizes every line-like primitive on a grid.

    The finder owns the PathSet it builds and marks consumed cells on the
    grid it was given. Call ``find`` once per grid.

    Example:
        grid = Grid.from_text("+--+\\n|  |\\n+--+")
        paths = LineFinder(grid).find()
        len(paths)  # 4
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._paths = PathSet()

    def find(self) -> PathSet:
        """Run all line passes in order.

        Returns:
            PathSet in recognition order
        """
        passes = (
            ("vertical", self._find_vertical_lines),
            ("stubs", self._find_stubs),
            ("horizontal", self._find_horizontal_lines),
            ("back-diagonal", self._find_back_diagonal_lines),
            ("diagonal", self._find_diagonal_lines),
            ("curves", self._find_curves),
            ("underscore", self._find_underscore_lines),
        )
        for name, scan in passes:
            before = len(self._paths)
            scan()
            logger.debug("Line pass %s added %d paths", name, len(self._paths) - before)
        return self._paths

    def _add(self, path: Path) -> None:
        self._paths.add(path)

    # Predicates

    def is_vertical_line_at(self, x: int, y: int, style: LineStyle = LineStyle.SOLID) -> bool:
        """Check whether cell (x, y) continues a vertical line of a style."""
        g = self._grid.get
        c = g(x, y)
        up = g(x, y - 1)
        dn = g(x, y + 1)

        if is_line(c, V, style):
            uplt = g(x - 1, y - 1)
            uprt = g(x + 1, y - 1)
            dnlt = g(x - 1, y + 1)
            dnrt = g(x + 1, y + 1)
            return (
                is_top_vertex(up)
                or up == "^"
                or is_line(up, V, style)
                or is_jump(up)
                or is_bottom_vertex(dn)
                or is_down_arrow(dn)
                or is_line(dn, V, style)
                or is_jump(dn)
                or is_point(up)
                or is_point(dn)
                or is_box_junction(up)
                or is_box_junction(dn)
                or "_" in (up, uplt, uprt)
                # One-cell span between two curve corners
                or (
                    (is_top_vertex(uplt) or is_top_vertex(uprt))
                    and (is_bottom_vertex(dnlt) or is_bottom_vertex(dnrt))
                )
            )

        if (is_top_vertex(c) or c == "^") and (
            is_line(dn, V, style) or (is_jump(dn) and c != ".")
        ):
            return True
        if (is_bottom_vertex(c) or is_down_arrow(c)) and (
            is_line(up, V, style) or (is_jump(up) and c != "'")
        ):
            return True
        if is_point(c):
            return is_line(up, V, style) or is_line(dn, V, style)
        return False

    def is_horizontal_line_at(self, x: int, y: int, style: LineStyle = LineStyle.SOLID) -> bool:
        """Check whether cell (x, y) continues a horizontal line of a style.

        A line needs three glyphs in a row, or two glyphs ending in a vertex,
        arrow head or point.
        """
        g = self._grid.get
        c = g(x, y)
        lt = g(x - 1, y)
        ltlt = g(x - 2, y)
        rt = g(x + 1, y)
        rtrt = g(x + 2, y)

        if is_line(c, H, style):
            if is_line(lt, H, style):
                return (
                    is_line(rt, H, style)
                    or is_vertex_or_right_decoration(rt)
                    or is_line(ltlt, H, style)
                    or is_vertex_or_left_decoration(ltlt)
                )
            if is_vertex_or_left_decoration(lt):
                return is_line(rt, H, style)
            return is_line(rt, H, style) and (
                is_line(rtrt, H, style) or is_vertex_or_right_decoration(rtrt)
            )

        if c == "<":
            return is_line(rt, H, style) and is_line(rtrt, H, style)
        if c == ">":
            return is_line(lt, H, style) and is_line(ltlt, H, style)
        if is_vertex(c):
            return (is_line(lt, H, style) and is_line(ltlt, H, style)) or (
                is_line(rt, H, style) and is_line(rtrt, H, style)
            )
        return False

    def is_back_diagonal_at(self, x: int, y: int) -> bool:
        """Check whether cell (x, y) continues a ``\\`` line."""
        g = self._grid.get
        c = g(x, y)
        lt = g(x - 1, y - 1)
        rt = g(x + 1, y + 1)

        if c in BACKSLASHES:
            return (
                is_line(rt, B)
                or is_bottom_vertex(rt)
                or is_point(rt)
                or is_down_arrow(rt)
                or is_line(lt, B)
                or is_top_vertex(lt)
                or is_point(lt)
                or lt == "^"
                or g(x, y - 1) in SLASHES
                or g(x, y + 1) in SLASHES
                or rt == "_"
                or lt == "_"
            )
        if c in (".", "^"):
            return rt in BACKSLASHES
        if c == "'" or is_down_arrow(c):
            return lt in BACKSLASHES
        if is_vertex(c) or is_point(c) or c == "|":
            return is_line(lt, B) or is_line(rt, B)
        return False

    def is_diagonal_at(self, x: int, y: int) -> bool:
        """Check whether cell (x, y) continues a ``/`` line."""
        g = self._grid.get
        c = g(x, y)
        lt = g(x - 1, y + 1)
        rt = g(x + 1, y - 1)

        if c in SLASHES:
            # Corner of a hexagon or diamond
            if g(x, y - 1) in BACKSLASHES or g(x, y + 1) in BACKSLASHES:
                return True
            return (
                is_line(rt, D)
                or is_top_vertex(rt)
                or is_point(rt)
                or rt == "^"
                or is_line(lt, D)
                or is_bottom_vertex(lt)
                or is_point(lt)
                or is_down_arrow(lt)
                or rt == "_"
                or lt == "_"
            )
        if c in (".", "^"):
            return lt in SLASHES
        if c == "'" or is_down_arrow(c):
            return rt in SLASHES
        if is_vertex(c) or is_point(c) or c == "|":
            return is_line(lt, D) or is_line(rt, D)
        return False

    # Passes

    def _find_vertical_lines(self) -> None:
        grid = self._grid
        for x in range(grid.width):
            y = 0
            while y < grid.height:
                style = None
                if not grid.is_used(x, y):
                    style = next(
                        (s for s in VERTICAL_STYLES if self.is_vertical_line_at(x, y, s)),
                        None,
                    )
                if style is None:
                    y += 1
                    continue

                start = y
                while self.is_vertical_line_at(x, y, style):
                    grid.set_used(x, y)
                    y += 1
                end = y - 1

                top = start - apply_stretch(VERTICAL_STRETCH_RULES, grid, x, start, 0, -1)
                bottom = end + apply_stretch(VERTICAL_STRETCH_RULES, grid, x, end, 0, 1)
                self._add(Path.from_grid(x, top, x, bottom, PATH_STYLES[style]))

    def _find_stubs(self) -> None:
        grid = self._grid
        g = grid.get
        for y in range(grid.height):
            for x in range(grid.width):
                if grid.is_used(x, y):
                    continue
                c = g(x, y)
                lt = g(x - 1, y)
                rt = g(x + 1, y)
                uplt = g(x - 1, y - 1)
                uprt = g(x + 1, y - 1)

                if c == "'" and (
                    (lt == "-" and uprt == "_" and not is_v_line_or_jump_or_point(uplt))
                    or (uplt == "_" and rt == "-" and not is_v_line_or_jump_or_point(uprt))
                ):
                    # -'    '-
                    self._add(Path.from_grid(x, y - 0.5, x, y))
                elif c == "." and ((lt == "_" and rt == "-") or (lt == "-" and rt == "_")):
                    # _.-   -._
                    self._add(Path.from_grid(x, y, x, y + 0.5))
                elif c == "." and lt == "-" and g(x, y + 1) in SLASHES:
                    # -.
                    #  /
                    self._add(Path.from_grid(x, y, x + 0.5, y + 0.5))
                elif c == "'" and rt == "-" and g(x, y - 1) in SLASHES:
                    #  /
                    #  '-
                    self._add(Path.from_grid(x, y, x - 0.5, y - 0.5))

    def _find_horizontal_lines(self) -> None:
        grid = self._grid
        for y in range(grid.height):
            x = 0
            while x < grid.width:
                style = None
                if not grid.is_used(x, y):
                    style = next(
                        (s for s in HORIZONTAL_STYLES if self.is_horizontal_line_at(x, y, s)),
                        None,
                    )
                if style is None:
                    x += 1
                    continue

                start = x
                while self.is_horizontal_line_at(x, y, style):
                    grid.set_used(x, y)
                    x += 1
                end = x - 1

                left = start - apply_stretch(HORIZONTAL_STRETCH_RULES, grid, start, y, -1, 0)
                right = end + apply_stretch(HORIZONTAL_STRETCH_RULES, grid, end, y, 1, 0)
                self._add(Path.from_grid(left, y, right, y, PATH_STYLES[style]))

    def _run_contains(self, cells: list[tuple[int, int]], glyphs: str) -> bool:
        return any(self._grid.get(cx, cy) in glyphs for cx, cy in cells)

    def _find_back_diagonal_lines(self) -> None:
        # Walk every anti-diagonal from its top/left edge cell downwards
        grid = self._grid
        for i in range(grid.width + grid.height - 1):
            x, y = (i, 0) if i < grid.width else (0, i - grid.width + 1)
            while x < grid.width and y < grid.height:
                if not self.is_back_diagonal_at(x, y):
                    x += 1
                    y += 1
                    continue

                cells: list[tuple[int, int]] = []
                while self.is_back_diagonal_at(x, y):
                    cells.append((x, y))
                    x += 1
                    y += 1

                # Vertices and points alone never make a line
                if not self._run_contains(cells, BACKSLASHES):
                    continue
                for cx, cy in cells:
                    grid.set_used(cx, cy)

                (ax, ay), (bx, by) = cells[0], cells[-1]
                s = apply_stretch(DIAGONAL_STRETCH_RULES, grid, ax, ay, -1, -1)
                t = apply_stretch(DIAGONAL_STRETCH_RULES, grid, bx, by, 1, 1)
                self._add(Path.from_grid(ax - s, ay - s, bx + t, by + t))

    def _find_diagonal_lines(self) -> None:
        # Walk every diagonal from its bottom/left edge cell upwards
        grid = self._grid
        for i in range(grid.width + grid.height - 1):
            x = max(0, i - (grid.height - 1))
            y = i - x
            while x < grid.width and y >= 0:
                if not self.is_diagonal_at(x, y):
                    x += 1
                    y -= 1
                    continue

                cells: list[tuple[int, int]] = []
                while self.is_diagonal_at(x, y):
                    cells.append((x, y))
                    x += 1
                    y -= 1

                if not self._run_contains(cells, SLASHES):
                    continue
                for cx, cy in cells:
                    grid.set_used(cx, cy)

                (ax, ay), (bx, by) = cells[0], cells[-1]
                s = apply_stretch(DIAGONAL_STRETCH_RULES, grid, ax, ay, -1, 1)
                t = apply_stretch(DIAGONAL_STRETCH_RULES, grid, bx, by, 1, -1)
                self._add(Path.from_grid(ax - s, ay + s, bx + t, by - t))

    def _find_curves(self) -> None:
        grid = self._grid
        g = grid.get
        for y in range(grid.height):
            for x in range(grid.width):
                c = g(x, y)

                if is_top_vertex(c):
                    # -.
                    #   |
                    if is_line(g(x - 1, y), H) and is_line(g(x + 1, y + 1), V):
                        self._add(corner_curve(x - 1, y, x + 1, y + 1))
                        self._consume((x, y), (x - 1, y), (x + 1, y + 1))
                    #  .-
                    # |
                    if is_line(g(x + 1, y), H) and is_line(g(x - 1, y + 1), V):
                        self._add(corner_curve(x + 1, y, x - 1, y + 1))
                        self._consume((x, y), (x + 1, y), (x - 1, y + 1))

                if is_bottom_vertex(c):
                    #   |
                    # -'
                    if is_line(g(x - 1, y), H) and is_line(g(x + 1, y - 1), V):
                        self._add(corner_curve(x - 1, y, x + 1, y - 1))
                        self._consume((x, y), (x - 1, y), (x + 1, y - 1))
                    # |
                    #  '-
                    if is_line(g(x + 1, y), H) and is_line(g(x - 1, y - 1), V):
                        self._add(corner_curve(x + 1, y, x - 1, y - 1))
                        self._consume((x, y), (x + 1, y), (x - 1, y - 1))

                # .
                #  )
                # '
                if (c == ")" or is_point(c)) and g(x - 1, y - 1) == "." and g(x - 1, y + 1) == "'":
                    self._add(bracket_curve(x - 2, y - 1, y + 1, x + BRACKET_BULGE))
                    self._consume((x, y), (x - 1, y - 1), (x - 1, y + 1))

                #  .
                # (
                #  '
                if (c == "(" or is_point(c)) and g(x + 1, y - 1) == "." and g(x + 1, y + 1) == "'":
                    self._add(bracket_curve(x + 2, y - 1, y + 1, x - BRACKET_BULGE))
                    self._consume((x, y), (x + 1, y - 1), (x + 1, y + 1))

    def _consume(self, *cells: tuple[int, int]) -> None:
        for x, y in cells:
            self._grid.set_used(x, y)

    def _find_underscore_lines(self) -> None:
        grid = self._grid
        g = grid.get
        for y in range(grid.height):
            x = 0
            while x < grid.width - 1:
                if not self._underscore_run_starts(x, y):
                    x += 1
                    continue

                lt = g(x - 1, y)
                dnlt = g(x - 1, y + 1)
                ax = x - 0.5
                if is_v_line_glyph(lt) or is_v_line_glyph(dnlt) or lt == "." or dnlt == "'":
                    ax -= 0.5
                    # Logic-gate input curving in from the left
                    if lt == "." and g(x - 2, y) in ("-", ".") and g(x - 2, y + 1) == "(":
                        ax -= 0.5
                elif lt in SLASHES:
                    ax -= 1.0
                # Tight double curve ((
                if lt == "(" and g(x - 2, y) == "(" and g(x, y + 1) == "'" and g(x, y - 1) == ".":
                    ax += 0.5

                while g(x, y) == "_":
                    grid.set_used(x, y)
                    x += 1

                c = g(x, y)
                dn = g(x, y + 1)
                bx = x - 0.5
                if is_v_line_glyph(c) or is_v_line_glyph(dn) or c == "." or dn == "'":
                    bx += 0.5
                    if c == "." and g(x + 1, y) in ("-", ".") and g(x + 1, y + 1) == ")":
                        bx += 0.5
                elif c in BACKSLASHES:
                    bx += 1.0
                # Tight double curve ))
                if c == ")" and g(x + 1, y) == ")" and g(x - 1, y + 1) == "'" and g(x - 1, y - 1) == ".":
                    bx -= 0.5

                self._add(Path.from_grid(ax, y + 0.5, bx, y + 0.5))

    def _underscore_run_starts(self, x: int, y: int) -> bool:
        g = self._grid.get
        after = g(x + 2, y)
        before = g(x - 1, y)
        return (
            not self._grid.is_used(x, y)
            and g(x, y) == "_"
            and g(x + 1, y) == "_"
            and (not is_letter(before) or after == "_")
            and (not is_letter(after) or before == "_")
        )


def find_lines(grid: Grid) -> PathSet:
    """Recognize all line primitives on a grid.

    Args:
        grid: Grid to scan; consumed cells are marked used

    Returns:
        PathSet in recognition order
    """
    return LineFinder(grid).find()
