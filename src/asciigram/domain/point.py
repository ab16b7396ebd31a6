"""Output-space coordinates and the constants of the grid-to-SVG mapping.

Grid cells are addressed by (x, y) with y growing downwards. Every cell maps
to a SCALE x SCALE*ASPECT pixel box; the centre of cell (gx, gy) lands at
((gx + 1) * SCALE, (gy + 1) * SCALE * ASPECT), leaving a half-cell margin on
all sides of the drawing.
"""

import math
from dataclasses import dataclass

# Pixels per cell column
SCALE = 8

# Cell height as a multiple of cell width
ASPECT = 2

# Cubic Bezier handle length for a quarter circle
CURVE = 0.551915

# Stroke width of every line, in pixels
STROKE_WIDTH = 2

# Two output coordinates closer than this are the same point
PATH_TOLERANCE = 0.01


def diagonal_angle() -> float:
    """Angle in degrees of a one-cell diagonal step on screen.

    A diagonal moves one column across and one row down, which is ASPECT
    times steeper than 45 degrees.
    """
    return math.degrees(math.atan(ASPECT))


def format_coord(value: float) -> str:
    """Format a coordinate for SVG output.

    Uses at most five decimals, strips trailing zeros and a trailing decimal
    point, and never emits a negative zero.

    Examples:
        >>> format_coord(8.0)
        '8'
        >>> format_coord(8.5)
        '8.5'
        >>> format_coord(-0.000001)
        '0'
    """
    text = f"{value:.5f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


@dataclass(frozen=True, slots=True)
class Point:
    """A point in output (pixel) space.

    Immutable and hashable. Build points from grid coordinates with
    ``from_grid``; fractional grid coordinates address mid-cell anchors.

    Attributes:
        x: Horizontal position in pixels
        y: Vertical position in pixels
    """

    x: float
    y: float

    @classmethod
    def from_grid(cls, gx: float, gy: float) -> "Point":
        """Map a (possibly fractional) grid coordinate to output space."""
        return cls((gx + 1) * SCALE, (gy + 1) * SCALE * ASPECT)

    def to_grid(self) -> tuple[float, float]:
        """Map back to grid coordinates."""
        return (self.x / SCALE - 1, self.y / (SCALE * ASPECT) - 1)

    def offset(self, dx: float, dy: float) -> "Point":
        """Move by a distance measured in grid cells."""
        return Point(self.x + dx * SCALE, self.y + dy * SCALE * ASPECT)

    def translate(self, dx: float, dy: float) -> "Point":
        """Move by a distance measured in pixels."""
        return Point(self.x + dx, self.y + dy)

    def is_close(self, other: "Point", tolerance: float = PATH_TOLERANCE) -> bool:
        """Check whether two points coincide within tolerance."""
        return abs(self.x - other.x) < tolerance and abs(self.y - other.y) < tolerance

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def coords(self) -> str:
        """Format as an SVG ``x,y`` coordinate pair."""
        return f"{format_coord(self.x)},{format_coord(self.y)}"
