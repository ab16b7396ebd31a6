"""Decorations: arrow heads, points, jumps, shading and triangles.

Decorations are small shapes placed on a single cell after all lines have
been recognized. Each one serializes itself to SVG markup.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from asciigram.domain.point import ASPECT, SCALE, STROKE_WIDTH, Point, format_coord

# Arrow rotations in degrees, clockwise on screen
ANGLE_RIGHT = 0.0
ANGLE_DOWN = 90.0
ANGLE_LEFT = 180.0
ANGLE_UP = 270.0

# Horizontal bulge of a jump bridge, in cells
JUMP_BULGE = 0.75

POINT_RADIUS = SCALE - STROKE_WIDTH


class DecorationKind(Enum):
    """Kind of decoration placed on a cell."""

    ARROW = auto()
    CLOSED_POINT = auto()
    OPEN_POINT = auto()
    DOTTED_POINT = auto()
    SHADED_POINT = auto()
    XOR_POINT = auto()
    JUMP = auto()
    GRAY = auto()
    TRIANGLE = auto()

    def is_point(self) -> bool:
        """Check whether this kind is drawn as a circle."""
        return self in _POINT_KINDS


_POINT_KINDS = frozenset(
    {
        DecorationKind.CLOSED_POINT,
        DecorationKind.OPEN_POINT,
        DecorationKind.DOTTED_POINT,
        DecorationKind.SHADED_POINT,
        DecorationKind.XOR_POINT,
    }
)


@dataclass(frozen=True, slots=True)
class Decoration:
    """A shape drawn at one cell.

    Attributes:
        position: Centre of the decoration in output space
        kind: What to draw
        angle: Rotation in degrees (arrows and triangles)
        glyph: Source character the decoration was recognized from
        level: Gray intensity 0-255 (gray fills only)
        jump_from: Upper anchor of a jump bridge
        jump_to: Lower anchor of a jump bridge
    """

    position: Point
    kind: DecorationKind
    angle: float = 0.0
    glyph: str = ""
    level: int = 0
    jump_from: Point | None = None
    jump_to: Point | None = None

    def to_svg(self) -> str:
        """Serialize to SVG markup.

        Returns:
            One or more SVG elements as a single string
        """
        if self.kind is DecorationKind.ARROW:
            return self._arrow_svg()
        if self.kind.is_point():
            return self._point_svg()
        if self.kind is DecorationKind.JUMP:
            return self._jump_svg()
        if self.kind is DecorationKind.GRAY:
            return self._gray_svg()
        return self._triangle_svg()

    def _arrow_svg(self) -> str:
        c = self.position
        tip = c.offset(1.0, 0.0)
        up = c.offset(-0.5, -0.35)
        dn = c.offset(-0.5, 0.35)
        return (
            f'<polygon points="{tip.coords()} {up.coords()} {dn.coords()}" '
            f'fill="var(--aasvg-fill)" stroke="none" '
            f'transform="rotate({format_coord(self.angle)},{c.coords()})"/>'
        )

    def _point_svg(self) -> str:
        c = self.position
        r = POINT_RADIUS
        circle = f'<circle cx="{format_coord(c.x)}" cy="{format_coord(c.y)}" r="{r}"'

        if self.kind is DecorationKind.CLOSED_POINT:
            return f'{circle} fill="var(--aasvg-fill)" stroke="var(--aasvg-stroke)"/>'
        if self.kind is DecorationKind.OPEN_POINT:
            return f'{circle} fill="var(--aasvg-bg)" stroke="var(--aasvg-stroke)"/>'
        if self.kind is DecorationKind.DOTTED_POINT:
            return (
                f'{circle} fill="var(--aasvg-bg)" stroke="var(--aasvg-stroke)" '
                f'stroke-dasharray="2,2"/>'
            )
        if self.kind is DecorationKind.SHADED_POINT:
            return f'{circle} fill="#888" stroke="var(--aasvg-stroke)"/>'

        # XOR: open circle with a cross
        cross = (
            f"M {c.translate(-r, 0).coords()} L {c.translate(r, 0).coords()} "
            f"M {c.translate(0, -r).coords()} L {c.translate(0, r).coords()}"
        )
        return (
            f'{circle} fill="var(--aasvg-bg)" stroke="var(--aasvg-stroke)"/>'
            f'<path d="{cross}" fill="none" stroke="var(--aasvg-stroke)"/>'
        )

    def _jump_svg(self) -> str:
        up = self.jump_from if self.jump_from is not None else self.position.offset(0, -0.5)
        dn = self.jump_to if self.jump_to is not None else self.position.offset(0, 0.5)
        dx = JUMP_BULGE if self.glyph == ")" else -JUMP_BULGE
        cup = up.offset(dx, 0)
        cdn = dn.offset(dx, 0)
        d = f"M {dn.coords()} C {cdn.coords()} {cup.coords()} {up.coords()}"
        return (
            f'<path d="{d}" fill="none" stroke="var(--aasvg-bg)" stroke-width="3"/>'
            f'<path d="{d}" fill="none" stroke="var(--aasvg-stroke)"/>'
        )

    def _gray_svg(self) -> str:
        c = self.position
        corner = c.translate(-SCALE / 2, -SCALE * ASPECT / 2)
        return (
            f'<rect x="{format_coord(corner.x)}" y="{format_coord(corner.y)}" '
            f'width="{SCALE}" height="{SCALE * ASPECT}" '
            f'fill="rgb({self.level},{self.level},{self.level})" stroke="none"/>'
        )

    def _triangle_svg(self) -> str:
        # Right triangle filling the lower-right half of the cell, then rotated
        theta = math.radians(self.angle)
        cos_t = round(math.cos(theta), 9)
        sin_t = round(math.sin(theta), 9)
        points = []
        for u, v in ((0.5, -0.5), (0.5, 0.5), (-0.5, 0.5)):
            ru = u * cos_t - v * sin_t
            rv = u * sin_t + v * cos_t
            points.append(self.position.offset(ru, rv).coords())
        return f'<polygon points="{" ".join(points)}" fill="var(--aasvg-fill)" stroke="none"/>'


class DecorationSet:
    """Insertion-ordered collection of decorations."""

    def __init__(self) -> None:
        self._decorations: list[Decoration] = []

    def add(self, decoration: Decoration) -> None:
        """Append a decoration."""
        self._decorations.append(decoration)

    def __iter__(self) -> Iterator[Decoration]:
        return iter(self._decorations)

    def __len__(self) -> int:
        return len(self._decorations)

    def __getitem__(self, index: int) -> Decoration:
        return self._decorations[index]

    def of_kind(self, kind: DecorationKind) -> list[Decoration]:
        """Return decorations of one kind, in insertion order."""
        return [d for d in self._decorations if d.kind is kind]
