"""Domain models for asciigram.

This module contains the geometric primitives a diagram is recognized into.
All models are designed to be:

- Immutable (frozen dataclasses), collected in insertion-ordered sets
- Expressed in output (pixel) space, built from grid coordinates
- Independent of the character grid and the scanning rules

Key classes:
- Point: A 2D point in output space
- Path: A straight segment or cubic curve with a drawing style
- PathSet: Ordered paths with endpoint queries
- Decoration: An arrow head, point, jump, gray fill or triangle
- DecorationSet: Ordered decorations
"""

from asciigram.domain.decoration import Decoration, DecorationKind, DecorationSet
from asciigram.domain.path import Orientation, Path, PathSet, PathStyle
from asciigram.domain.point import (
    ASPECT,
    CURVE,
    SCALE,
    Point,
    diagonal_angle,
    format_coord,
)

__all__: list[str] = [
    # Constants
    "ASPECT",
    "CURVE",
    "SCALE",
    # Enums
    "DecorationKind",
    "Orientation",
    # Core types
    "Point",
    "PathStyle",
    "Path",
    "PathSet",
    "Decoration",
    "DecorationSet",
    # Functions
    "diagonal_angle",
    "format_coord",
]
