"""Core recognition algorithms for asciigram.

This module contains the algorithms for:

- Character classification (line families, vertices, decorations)
- Grid normalization (tabs, indentation, hidden word markers)
- Line recognition (straight runs, stubs, curves, underscores)
- Decoration recognition (arrow heads, points, jumps, fills)
- Render orchestration (recognition plus SVG assembly)

Recognition is total: any text is a valid diagram, and nothing in this
package raises for unusual input.

Key functions:
- find_lines: Recognize all lines on a grid
- find_decorations: Recognize all decorations against recognized lines
- corner_curve: Rounded corner between a horizontal and a vertical end
- bracket_curve: Arc around a bracket between two vertical ends
- render: Convert text to an SVG document in one call

Key classes:
- Grid: Character grid with a used-cell mask
- LineFinder: Runs the line recognition passes
- DecorationFinder: Runs the decoration recognition passes
- DiagramRenderer: Orchestrates a full render with logging and statistics
"""

from asciigram.core.chars import Direction, LineStyle
from asciigram.core.decoration_finder import DecorationFinder, find_decorations
from asciigram.core.geometry import bracket_curve, corner_curve
from asciigram.core.grid import Grid, unhide_markers
from asciigram.core.line_finder import LineFinder, StretchRule, find_lines
from asciigram.core.renderer import DiagramRenderer, RenderResult, render

__all__ = [
    # Decoration recognition
    "DecorationFinder",
    # Renderer classes
    "DiagramRenderer",
    # Classification
    "Direction",
    # Grid
    "Grid",
    # Line recognition
    "LineFinder",
    "LineStyle",
    "RenderResult",
    "StretchRule",
    # Geometry functions
    "bracket_curve",
    "corner_curve",
    "find_decorations",
    "find_lines",
    "render",
    "unhide_markers",
]
