"""Unit tests for the diagram I/O layer.

Tests for DiagramReader, SvgWriter and XML escaping.
"""

import io
from pathlib import Path
from unittest.mock import patch

import pytest

from asciigram.config import RenderConfig
from asciigram.core.decoration_finder import find_decorations
from asciigram.core.grid import Grid
from asciigram.core.line_finder import find_lines
from asciigram.exceptions import DiagramLoadError, DiagramNotLoadedError, SvgWriteError
from asciigram.io.reader import DiagramReader
from asciigram.io.writer import CSS_VARIABLES, SvgWriter, escape_xml


def _build(text: str, config: RenderConfig | None = None) -> tuple[SvgWriter, str]:
    grid = Grid.from_text(text)
    paths = find_lines(grid)
    decorations = find_decorations(grid, paths)
    writer = SvgWriter(config)
    return writer, writer.build(grid, paths, decorations)


class TestDiagramReader:
    """Tests for DiagramReader class."""

    def test_init(self):
        """Test DiagramReader initialization."""
        reader = DiagramReader(Path("diagram.txt"))
        assert reader.source == "diagram.txt"
        assert reader._text is None

    def test_stdin_source(self):
        """None and "-" both select standard input."""
        assert DiagramReader().source == "<stdin>"
        assert DiagramReader("-").source == "<stdin>"

    def test_load_nonexistent_file(self, tmp_path):
        """Test loading a nonexistent file raises DiagramLoadError."""
        reader = DiagramReader(tmp_path / "missing.txt")
        with pytest.raises(DiagramLoadError, match="file not found"):
            reader.load()

    def test_load_directory(self, tmp_path):
        """Test loading a directory raises DiagramLoadError."""
        with pytest.raises(DiagramLoadError, match="is a directory"):
            DiagramReader(tmp_path).load()

    def test_load_invalid_utf8(self, tmp_path):
        """Test loading undecodable bytes raises DiagramLoadError."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(DiagramLoadError, match="not valid UTF-8"):
            DiagramReader(path).load()

    def test_text_before_load(self):
        """Test accessing text before loading raises DiagramNotLoadedError."""
        reader = DiagramReader(Path("diagram.txt"))
        with pytest.raises(DiagramNotLoadedError, match="Diagram not loaded"):
            _ = reader.text

    def test_line_count_before_load(self):
        reader = DiagramReader(Path("diagram.txt"))
        with pytest.raises(DiagramNotLoadedError):
            _ = reader.line_count

    def test_load_file(self, tmp_path):
        path = tmp_path / "box.txt"
        path.write_text("+--+\n|  |\n+--+\n", encoding="utf-8")
        reader = DiagramReader(path)
        reader.load()
        assert reader.line_count == 3
        grid = reader.grid()
        assert (grid.width, grid.height) == (4, 3)

    def test_grid_is_fresh_each_call(self, tmp_path):
        path = tmp_path / "line.txt"
        path.write_text("---", encoding="utf-8")
        reader = DiagramReader(path)
        reader.load()
        first = reader.grid()
        first.set_used(0, 0)
        assert not reader.grid().is_used(0, 0)

    def test_load_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("-->\n"))
        reader = DiagramReader()
        reader.load()
        assert reader.text == "-->\n"

    def test_context_manager(self, tmp_path):
        """Test context manager loads and releases the text."""
        path = tmp_path / "line.txt"
        path.write_text("---", encoding="utf-8")
        with DiagramReader(path) as reader:
            assert reader.text == "---"
        with pytest.raises(DiagramNotLoadedError):
            _ = reader.text


class TestEscapeXml:
    """Tests for escape_xml."""

    def test_all_specials(self):
        assert escape_xml("&<>\"'") == "&amp;&lt;&gt;&quot;&#39;"

    def test_plain_text(self):
        assert escape_xml("plain text") == "plain text"

    def test_entities_escaped_again(self):
        assert escape_xml("&amp; 'x'") == "&amp;amp; &#39;x&#39;"


class TestSvgWriter:
    """Tests for SvgWriter class."""

    def test_header(self):
        _, svg = _build("---")
        assert svg.startswith(
            '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="32" height="32" '
            'viewBox="0 0 32 32" class="diagram"'
        )
        assert svg.endswith("</svg>")

    def test_css_variables(self):
        _, svg = _build("---")
        assert CSS_VARIABLES in svg
        assert "prefers-color-scheme: dark" in svg

    def test_path_element(self):
        _, svg = _build("---")
        assert '<path d="M 8,16 L 24,16" fill="none" stroke="var(--aasvg-stroke)"/>' in svg

    def test_no_backdrop_by_default(self):
        _, svg = _build("---")
        assert "<rect" not in svg

    def test_backdrop(self):
        _, svg = _build("---", RenderConfig(backdrop=True))
        assert '<rect x="0" y="0" width="32" height="32" fill="var(--aasvg-bg)"/>' in svg

    def test_text_element(self):
        writer, svg = _build("hello")
        assert '<text x="24" y="20">hello</text>' in svg
        assert writer.text_run_count == 1

    def test_text_escaped(self):
        _, svg = _build("a<b")
        assert ">a&lt;b</text>" in svg

    def test_disable_text(self):
        writer, svg = _build("hello", RenderConfig(disable_text=True))
        assert "<text" not in svg
        assert "<g " not in svg
        assert writer.text_run_count == 0

    def test_spaces_zero(self):
        writer, svg = _build("ab", RenderConfig(spaces=0))
        assert svg.count("<text") == 2
        assert writer.text_run_count == 2

    def test_stretch(self):
        _, svg = _build("abc", RenderConfig(stretch=True))
        assert 'textLength="24" lengthAdjust="spacingAndGlyphs"' in svg

    def test_empty_grid(self):
        _, svg = _build("")
        assert 'width="8" height="16"' in svg

    def test_save(self, tmp_path):
        writer, svg = _build("---")
        output = tmp_path / "out.svg"
        writer.save(svg, output)
        assert output.read_text(encoding="utf-8") == svg

    @patch.object(Path, "write_text", side_effect=OSError("disk full"))
    def test_save_failure(self, _mock_write):
        writer, svg = _build("---")
        with pytest.raises(SvgWriteError, match="disk full"):
            writer.save(svg, Path("out.svg"))

    def test_get_svg_path(self):
        """Test default output path generation."""
        assert SvgWriter.get_svg_path(Path("diagram.txt")) == Path("diagram.svg")
        assert SvgWriter.get_svg_path(Path("notes/flow.aa")) == Path("notes/flow.svg")
