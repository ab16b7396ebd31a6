"""Curve construction for rounded corners and bracket arcs.

All functions take grid coordinates and return Paths in output space.
"""

from asciigram.domain.path import Path
from asciigram.domain.point import CURVE, Point

# Horizontal reach of a bracket arc past its glyph column, in cells
BRACKET_BULGE = 0.6


def corner_curve(hx: float, hy: float, vx: float, vy: float) -> Path:
    """Build a rounded corner between a horizontal and a vertical line end.

    The curve leaves the horizontal end along the row and arrives at the
    vertical end along the column, approximating an elliptical quarter arc.

    Args:
        hx: Column of the end joining a horizontal line
        hy: Row of the end joining a horizontal line
        vx: Column of the end joining a vertical line
        vy: Row of the end joining a vertical line

    Returns:
        Cubic curve from the horizontal end to the vertical end

    Examples:
        >>> curve = corner_curve(0, 0, 2, 1)
        >>> curve.control1.y == curve.start.y
        True
    """
    start = Point.from_grid(hx, hy)
    end = Point.from_grid(vx, vy)
    control1 = Point(start.x + CURVE * (end.x - start.x), start.y)
    control2 = Point(end.x, end.y + CURVE * (start.y - end.y))
    return Path(start, end, control1, control2)


def bracket_curve(x: float, top_y: float, bottom_y: float, bulge_x: float) -> Path:
    """Build an arc joining two vertically stacked ends around a bracket.

    Args:
        x: Column of both ends
        top_y: Row of the upper end
        bottom_y: Row of the lower end
        bulge_x: Column both control points sit on

    Returns:
        Cubic curve from the upper end to the lower end
    """
    return Path(
        Point.from_grid(x, top_y),
        Point.from_grid(x, bottom_y),
        Point.from_grid(bulge_x, top_y),
        Point.from_grid(bulge_x, bottom_y),
    )
