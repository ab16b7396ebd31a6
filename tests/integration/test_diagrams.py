"""End-to-end tests rendering whole diagrams to SVG."""

import re

import pytest

from asciigram import render
from asciigram.config import AsciigramSettings
from asciigram.core import DiagramRenderer
from asciigram.domain import DecorationKind, Orientation


def _texts(svg: str) -> list[tuple[str, str, str]]:
    """Extract (x, y, content) for every text element."""
    return re.findall(r'<text x="([^"]+)" y="([^"]+)"[^>]*>([^<]*)</text>', svg)


@pytest.fixture
def renderer() -> DiagramRenderer:
    return DiagramRenderer(AsciigramSettings())


class TestLabelledBoxes:
    """Boxes with labels inside and between them."""

    def test_box_with_label(self, renderer):
        result = renderer.render("+-----+\n| abc |\n+-----+")
        assert len(result.paths) == 4
        assert _texts(result.svg) == [("32", "36", "abc")]

    def test_labelled_arrow(self, renderer):
        result = renderer.render("A --> B")
        assert [p.orientation for p in result.paths] == [Orientation.HORIZONTAL]
        assert [d.kind for d in result.decorations] == [DecorationKind.ARROW]
        assert _texts(result.svg) == [("8", "20", "A"), ("56", "20", "B")]

    def test_underscore_box(self, renderer):
        result = renderer.render(" ___\n|___|")
        assert len(result.paths) == 4
        assert _texts(result.svg) == []


class TestFlowchart:
    """A small flowchart using most primitives."""

    DIAGRAM = "\n".join(
        [
            "+-------+     +-------+",
            "| start |---->|  end  |",
            "+-------+     +-------+",
            "    |",
            "    v",
        ]
    )

    def test_counts(self, renderer):
        result = renderer.render(self.DIAGRAM)
        orientations = [p.orientation for p in result.paths]
        assert orientations.count(Orientation.VERTICAL) == 5
        assert orientations.count(Orientation.HORIZONTAL) == 5
        arrows = result.decorations.of_kind(DecorationKind.ARROW)
        assert [a.angle for a in arrows] == [0.0, 90.0]

    def test_labels(self, renderer):
        result = renderer.render(self.DIAGRAM)
        assert [t[2] for t in _texts(result.svg)] == ["start", "end"]


class TestCrossings:
    """Lines crossing and jumping over each other."""

    def test_jump_over_line(self):
        svg = render("  |\n--)--\n  |")
        assert svg.count('stroke-width="3"') == 1
        assert "<text" not in svg

    def test_diagonal_cross(self, renderer):
        result = renderer.render("\\ /\n +\n/ \\")
        assert [p.orientation for p in result.paths] == [
            Orientation.BACK_DIAGONAL,
            Orientation.DIAGONAL,
        ]
        assert _texts(result.svg) == []


class TestStyles:
    """Double lines, squiggles and fills."""

    def test_double_box(self):
        svg = render("╔══╗\n║  ║\n╚══╝")
        # Four double lines, two strokes each
        assert svg.count("<path ") == 8
        assert [t[2] for t in _texts(svg)] == ["╔", "╗", "╚", "╝"]

    def test_squiggle(self):
        svg = render("~~~")
        assert " Q " in svg

    def test_shading(self):
        svg = render("░▒▓█")
        assert svg.count("<rect ") == 4
        assert "<text" not in svg

    def test_rounded_corner(self, renderer):
        result = renderer.render("--.\n   |\n   |")
        assert sum(1 for p in result.paths if p.is_curve()) == 1
        assert " C " in result.svg
        assert _texts(result.svg) == []


class TestTextPreservation:
    """Plain prose passes through as text."""

    def test_words_with_markers(self):
        svg = render("hello world over value")
        assert _texts(svg) == [("92", "20", "hello world over value")]
        assert "<circle" not in svg
        assert "<polygon" not in svg

    def test_escaping(self):
        assert "Tom &amp; Jerry" in render("Tom & Jerry")

    def test_indentation_removed(self):
        assert render("    ---\n") == render("---\n")
