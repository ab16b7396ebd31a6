"""Character classification for diagram recognition.

Every predicate takes a single character and answers what role it can play in
a drawing. Line glyphs are kept in one table keyed by orientation and line
style so that the line finder can run one rule set for solid, double and
squiggle lines alike.
"""

from enum import Enum, auto


class LineStyle(Enum):
    """Stroke weight of a run of line glyphs."""

    SOLID = auto()
    DOUBLE = auto()
    SQUIGGLE = auto()


class Direction(Enum):
    """Direction of a run of line glyphs on the grid."""

    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL = auto()
    BACK_DIAGONAL = auto()


VERTEX_CHARS = "+.',`"
UNDIRECTED_VERTEX_CHARS = "+"
TOP_VERTEX_CHARS = "+.,"
BOTTOM_VERTEX_CHARS = "+'`"
ARROW_HEAD_CHARS = "><^vV"
DOWN_ARROW_CHARS = "vV"
POINT_CHARS = "o*◌○◍●⊕"
JUMP_CHARS = "()"
GRAY_CHARS = "░▒▓█"
TRIANGLE_CHARS = "◢◣◤◥"
BOX_JUNCTION_CHARS = "┌┐└┘├┤┬┴┼╭╮╯╰╔╗╚╝╠╣╦╩╬┏┓┗┛┣┫┳┻╋"

# Letters inside words that would otherwise read as points or arrow heads
HIDEABLE_MARKERS = "ovV"

_LINE_GLYPHS: dict[tuple[Direction, LineStyle], str] = {
    (Direction.HORIZONTAL, LineStyle.SOLID): "-─",
    (Direction.HORIZONTAL, LineStyle.DOUBLE): "=═",
    (Direction.HORIZONTAL, LineStyle.SQUIGGLE): "~",
    (Direction.VERTICAL, LineStyle.SOLID): "|│",
    (Direction.VERTICAL, LineStyle.DOUBLE): "║",
    (Direction.DIAGONAL, LineStyle.SOLID): "/╱",
    (Direction.BACK_DIAGONAL, LineStyle.SOLID): "\\╲",
}

_TRIANGLE_ANGLES = {"◢": 0.0, "◣": 90.0, "◤": 180.0, "◥": 270.0}


def line_glyphs(direction: Direction, style: LineStyle = LineStyle.SOLID) -> str:
    """Return the literal line glyphs of one direction and style."""
    return _LINE_GLYPHS.get((direction, style), "")


def is_line(c: str, direction: Direction, style: LineStyle = LineStyle.SOLID) -> bool:
    """Check whether a character continues a line of this direction and style.

    The undirected vertex ``+`` continues every solid line, and jumps continue
    solid horizontal lines, which run straight underneath them.

    Args:
        c: Character to test
        direction: Run direction
        style: Line style

    Returns:
        True if the character belongs to the line family
    """
    if not c:
        return False
    if c in line_glyphs(direction, style):
        return True
    if style is not LineStyle.SOLID:
        return False
    if c in UNDIRECTED_VERTEX_CHARS:
        return True
    return direction is Direction.HORIZONTAL and is_jump(c)


def is_any_line(c: str, direction: Direction) -> bool:
    """Check for a line glyph of the direction in any style."""
    return any(is_line(c, direction, style) for style in LineStyle)


def is_h_line_glyph(c: str) -> bool:
    """Check for a literal horizontal line glyph, excluding vertices and jumps."""
    if not c:
        return False
    return any(c in line_glyphs(Direction.HORIZONTAL, style) for style in LineStyle)


def is_v_line_glyph(c: str) -> bool:
    """Check for a literal vertical line glyph, excluding vertices."""
    if not c:
        return False
    return any(c in line_glyphs(Direction.VERTICAL, style) for style in LineStyle)


def is_vertex(c: str) -> bool:
    return c != "" and c in VERTEX_CHARS


def is_top_vertex(c: str) -> bool:
    return c != "" and c in TOP_VERTEX_CHARS


def is_bottom_vertex(c: str) -> bool:
    return c != "" and c in BOTTOM_VERTEX_CHARS


def is_arrow_head(c: str) -> bool:
    return c != "" and c in ARROW_HEAD_CHARS


def is_down_arrow(c: str) -> bool:
    return c != "" and c in DOWN_ARROW_CHARS


def is_point(c: str) -> bool:
    return c != "" and c in POINT_CHARS


def is_jump(c: str) -> bool:
    return c != "" and c in JUMP_CHARS


def is_gray(c: str) -> bool:
    return c != "" and c in GRAY_CHARS


def is_triangle(c: str) -> bool:
    return c != "" and c in TRIANGLE_CHARS


def is_box_junction(c: str) -> bool:
    return c != "" and c in BOX_JUNCTION_CHARS


def is_letter(c: str) -> bool:
    """Check for an ASCII letter."""
    return len(c) == 1 and c.isascii() and c.isalpha()


def is_empty_or_non_alnum(c: str) -> bool:
    """Check for a blank cell or punctuation."""
    return c == " " or not (c.isascii() and c.isalnum())


def is_v_line_or_jump_or_point(c: str) -> bool:
    """Check for anything a vertical line can run into."""
    return is_v_line_glyph(c) or is_jump(c) or is_point(c)


def is_vertex_or_left_decoration(c: str) -> bool:
    """Check for a glyph that can sit at the left end of a horizontal run."""
    return is_vertex(c) or c == "<" or is_point(c) or is_box_junction(c)


def is_vertex_or_right_decoration(c: str) -> bool:
    """Check for a glyph that can sit at the right end of a horizontal run."""
    return is_vertex(c) or c == ">" or is_point(c) or is_box_junction(c)


def gray_level(c: str) -> int:
    """Map a shade glyph to an 8-bit gray intensity.

    Lighter shades give higher intensities: ``░`` is 191 and ``█`` is 0.
    """
    index = GRAY_CHARS.index(c)
    return round((3 - index) * 63.75)


def triangle_angle(c: str) -> float:
    """Map a triangle glyph to its rotation in degrees.

    ``◢`` (lower-right half filled) is the unrotated shape.
    """
    return _TRIANGLE_ANGLES[c]
