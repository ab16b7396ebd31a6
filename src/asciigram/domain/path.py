"""Recognized line primitives and the ordered collection that holds them.

A Path is a straight segment or a cubic curve between two output-space
points, tagged with a drawing style. PathSet keeps paths in recognition order
and answers the endpoint queries the decoration finder asks ("does a vertical
line end just above this cell?").

All query methods take grid coordinates, possibly fractional, and compare in
output space with a small tolerance.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from asciigram.domain.point import (
    ASPECT,
    PATH_TOLERANCE,
    SCALE,
    Point,
    format_coord,
)

# Wave amplitude of a squiggle, in pixels
SQUIGGLE_AMPLITUDE = SCALE * ASPECT * 0.2


class Orientation(Enum):
    """Direction of a recognized path.

    DIAGONAL runs like ``/`` and BACK_DIAGONAL like ``\\``. Directions are
    measured in grid units, so a one-cell diagonal step counts as diagonal even
    though cells are taller than they are wide.
    """

    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL = auto()
    BACK_DIAGONAL = auto()
    CURVED = auto()


@dataclass(frozen=True, slots=True)
class PathStyle:
    """Drawing style flags for a path.

    Attributes:
        dashed: Draw with a dash pattern
        double: Draw as two parallel strokes
        squiggle: Draw as a wave (horizontal paths only)
    """

    dashed: bool = False
    double: bool = False
    squiggle: bool = False


SOLID = PathStyle()
DOUBLE = PathStyle(double=True)
SQUIGGLE = PathStyle(squiggle=True)


@dataclass(frozen=True, slots=True)
class Path:
    """A straight segment or cubic Bezier curve.

    A path with control points is a curve; orientation queries on curves all
    report False.

    Attributes:
        start: First endpoint
        end: Second endpoint
        control1: First Bezier control point (curves only)
        control2: Second Bezier control point (curves only)
        style: Drawing style flags
    """

    start: Point
    end: Point
    control1: Point | None = None
    control2: Point | None = None
    style: PathStyle = SOLID

    @classmethod
    def from_grid(
        cls,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        style: PathStyle = SOLID,
    ) -> "Path":
        """Build a straight path between two grid coordinates."""
        return cls(Point.from_grid(x1, y1), Point.from_grid(x2, y2), style=style)

    def is_curve(self) -> bool:
        """Check whether the path carries Bezier control points."""
        return self.control1 is not None

    def is_degenerate(self) -> bool:
        """Check whether both endpoints coincide."""
        return self.start.is_close(self.end)

    def _grid_delta(self) -> tuple[float, float]:
        return (
            (self.end.x - self.start.x) / SCALE,
            (self.end.y - self.start.y) / (SCALE * ASPECT),
        )

    def is_vertical(self) -> bool:
        """Check for a straight path with no horizontal extent."""
        return not self.is_curve() and abs(self.end.x - self.start.x) < PATH_TOLERANCE

    def is_horizontal(self) -> bool:
        """Check for a straight path with no vertical extent."""
        return not self.is_curve() and abs(self.end.y - self.start.y) < PATH_TOLERANCE

    def is_diagonal(self) -> bool:
        """Check for a straight path running like ``/``."""
        dx, dy = self._grid_delta()
        return not self.is_curve() and abs(dx + dy) < PATH_TOLERANCE and not self.is_degenerate()

    def is_back_diagonal(self) -> bool:
        """Check for a straight path running like ``\\``."""
        dx, dy = self._grid_delta()
        return not self.is_curve() and abs(dx - dy) < PATH_TOLERANCE and not self.is_degenerate()

    @property
    def orientation(self) -> Orientation | None:
        """Classify the path, or None for a straight path at an odd slope."""
        if self.is_curve():
            return Orientation.CURVED
        if self.is_vertical():
            return Orientation.VERTICAL
        if self.is_horizontal():
            return Orientation.HORIZONTAL
        if self.is_diagonal():
            return Orientation.DIAGONAL
        if self.is_back_diagonal():
            return Orientation.BACK_DIAGONAL
        return None

    @property
    def upper(self) -> Point:
        """Endpoint nearer the top of the drawing."""
        return self.start if self.start.y <= self.end.y else self.end

    @property
    def lower(self) -> Point:
        """Endpoint nearer the bottom of the drawing."""
        return self.end if self.start.y <= self.end.y else self.start

    @property
    def leftmost(self) -> Point:
        """Endpoint nearer the left edge of the drawing."""
        return self.start if self.start.x <= self.end.x else self.end

    @property
    def rightmost(self) -> Point:
        """Endpoint nearer the right edge of the drawing."""
        return self.end if self.start.x <= self.end.x else self.start

    # Endpoint queries (grid coordinates)

    def ends_at(self, x: float, y: float) -> bool:
        """Check whether either endpoint lies at the grid coordinate."""
        p = Point.from_grid(x, y)
        return self.start.is_close(p) or self.end.is_close(p)

    def up_ends_at(self, x: float, y: float) -> bool:
        """Check for a vertical path whose top end lies at the coordinate."""
        return self.is_vertical() and self.upper.is_close(Point.from_grid(x, y))

    def down_ends_at(self, x: float, y: float) -> bool:
        """Check for a vertical path whose bottom end lies at the coordinate."""
        return self.is_vertical() and self.lower.is_close(Point.from_grid(x, y))

    def left_ends_at(self, x: float, y: float) -> bool:
        """Check for a horizontal path whose left end lies at the coordinate."""
        return self.is_horizontal() and self.leftmost.is_close(Point.from_grid(x, y))

    def right_ends_at(self, x: float, y: float) -> bool:
        """Check for a horizontal path whose right end lies at the coordinate."""
        return self.is_horizontal() and self.rightmost.is_close(Point.from_grid(x, y))

    def diagonal_up_ends_at(self, x: float, y: float) -> bool:
        """Check for a ``/`` path whose upper (right) end lies at the coordinate."""
        return self.is_diagonal() and self.upper.is_close(Point.from_grid(x, y))

    def diagonal_down_ends_at(self, x: float, y: float) -> bool:
        """Check for a ``/`` path whose lower (left) end lies at the coordinate."""
        return self.is_diagonal() and self.lower.is_close(Point.from_grid(x, y))

    def back_diagonal_up_ends_at(self, x: float, y: float) -> bool:
        """Check for a ``\\`` path whose upper (left) end lies at the coordinate."""
        return self.is_back_diagonal() and self.upper.is_close(Point.from_grid(x, y))

    def back_diagonal_down_ends_at(self, x: float, y: float) -> bool:
        """Check for a ``\\`` path whose lower (right) end lies at the coordinate."""
        return self.is_back_diagonal() and self.lower.is_close(Point.from_grid(x, y))

    def vertical_passes_through(self, x: float, y: float) -> bool:
        """Check for a vertical path covering the coordinate, ends included."""
        if not self.is_vertical():
            return False
        p = Point.from_grid(x, y)
        return (
            abs(self.start.x - p.x) < PATH_TOLERANCE
            and self.upper.y - PATH_TOLERANCE <= p.y <= self.lower.y + PATH_TOLERANCE
        )

    def horizontal_passes_through(self, x: float, y: float) -> bool:
        """Check for a horizontal path covering the coordinate, ends included."""
        if not self.is_horizontal():
            return False
        p = Point.from_grid(x, y)
        return (
            abs(self.start.y - p.y) < PATH_TOLERANCE
            and self.leftmost.x - PATH_TOLERANCE <= p.x <= self.rightmost.x + PATH_TOLERANCE
        )

    # Serialization

    def to_path_data(self) -> list[str]:
        """Serialize to SVG path ``d`` strings.

        A double path yields two strings offset either side of the centre line;
        every other style yields one.

        Returns:
            List of path-data strings
        """
        if self.style.squiggle and self.is_horizontal():
            return [self._squiggle_data()]
        if self.style.double:
            nx, ny = self._double_offset()
            return [self._segment_data(nx, ny), self._segment_data(-nx, -ny)]
        return [self._segment_data(0.0, 0.0)]

    def _segment_data(self, dx: float, dy: float) -> str:
        a = self.start.translate(dx, dy)
        b = self.end.translate(dx, dy)
        if self.control1 is not None and self.control2 is not None:
            c = self.control1.translate(dx, dy)
            d = self.control2.translate(dx, dy)
            return f"M {a.coords()} C {c.coords()} {d.coords()} {b.coords()}"
        return f"M {a.coords()} L {b.coords()}"

    def _double_offset(self) -> tuple[float, float]:
        # Unit normal of the chord, scaled to ASPECT pixels
        vx = self.end.x - self.start.x
        vy = self.end.y - self.start.y
        length = math.hypot(vx, vy)
        return (vy * ASPECT / length, -vx * ASPECT / length)

    def _squiggle_data(self) -> str:
        x0 = self.leftmost.x
        x1 = self.rightmost.x
        y = self.start.y
        waves = max(1, round((x1 - x0) / SCALE))
        step = (x1 - x0) / (4 * waves)
        amp = SQUIGGLE_AMPLITUDE

        parts = [f"M {format_coord(x0)},{format_coord(y)}"]
        for i in range(waves):
            x = x0 + i * 4 * step
            parts.append(
                f" Q {format_coord(x + step)},{format_coord(y - amp)}"
                f" {format_coord(x + 2 * step)},{format_coord(y)}"
            )
            parts.append(
                f" Q {format_coord(x + 3 * step)},{format_coord(y + amp)}"
                f" {format_coord(x + 4 * step)},{format_coord(y)}"
            )
        parts.append(" ")
        return "".join(parts)


class PathSet:
    """Insertion-ordered collection of non-degenerate paths.

    Example:
        paths = PathSet()
        paths.add(Path.from_grid(0, 0, 2, 0))
        paths.right_ends_at(2, 0)  # True
    """

    def __init__(self) -> None:
        self._paths: list[Path] = []

    def add(self, path: Path) -> bool:
        """Append a path, silently dropping it if degenerate.

        Returns:
            True if the path was stored
        """
        if path.is_degenerate():
            return False
        self._paths.append(path)
        return True

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __getitem__(self, index: int) -> Path:
        return self._paths[index]

    def ends_at(self, x: float, y: float) -> bool:
        return any(p.ends_at(x, y) for p in self._paths)

    def up_ends_at(self, x: float, y: float) -> bool:
        return any(p.up_ends_at(x, y) for p in self._paths)

    def down_ends_at(self, x: float, y: float) -> bool:
        return any(p.down_ends_at(x, y) for p in self._paths)

    def left_ends_at(self, x: float, y: float) -> bool:
        return any(p.left_ends_at(x, y) for p in self._paths)

    def right_ends_at(self, x: float, y: float) -> bool:
        return any(p.right_ends_at(x, y) for p in self._paths)

    def diagonal_up_ends_at(self, x: float, y: float) -> bool:
        return any(p.diagonal_up_ends_at(x, y) for p in self._paths)

    def diagonal_down_ends_at(self, x: float, y: float) -> bool:
        return any(p.diagonal_down_ends_at(x, y) for p in self._paths)

    def back_diagonal_up_ends_at(self, x: float, y: float) -> bool:
        return any(p.back_diagonal_up_ends_at(x, y) for p in self._paths)

    def back_diagonal_down_ends_at(self, x: float, y: float) -> bool:
        return any(p.back_diagonal_down_ends_at(x, y) for p in self._paths)

    def vertical_passes_through(self, x: float, y: float) -> bool:
        return any(p.vertical_passes_through(x, y) for p in self._paths)

    def horizontal_passes_through(self, x: float, y: float) -> bool:
        return any(p.horizontal_passes_through(x, y) for p in self._paths)
