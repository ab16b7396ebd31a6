"""Unit tests for render orchestration."""

import io
from unittest.mock import MagicMock

import pytest

from asciigram import render
from asciigram.config import AsciigramSettings, GridConfig, RenderConfig
from asciigram.core.grid import Grid
from asciigram.core.renderer import DiagramRenderer, RenderResult
from asciigram.exceptions import DiagramLoadError

BOX = "+--+\n|  |\n+--+\n"


@pytest.fixture
def renderer() -> DiagramRenderer:
    return DiagramRenderer(AsciigramSettings())


class TestDiagramRenderer:
    """Tests for DiagramRenderer."""

    def test_render_box(self, renderer):
        result = renderer.render(BOX)
        assert isinstance(result, RenderResult)
        assert len(result.paths) == 4
        assert len(result.decorations) == 0
        assert result.svg.count("<path ") == 4
        assert "<text" not in result.svg

    def test_stats(self, renderer):
        stats = renderer.render("A --> B").stats
        assert (stats.width, stats.height) == (7, 1)
        assert stats.path_count == 1
        assert stats.decoration_count == 1
        assert stats.text_run_count == 2
        assert stats.paths_by_orientation == {"horizontal": 1}
        assert stats.decorations_by_kind == {"arrow": 1}
        assert stats.duration_seconds >= 0

    def test_stats_reset_between_renders(self, renderer):
        renderer.render(BOX)
        assert renderer.render("---").stats.path_count == 1

    def test_scan_marks_grid(self, renderer):
        grid = Grid.from_text("-->")
        paths, decorations = renderer.scan(grid)
        assert len(paths) == 1
        assert len(decorations) == 1
        assert all(grid.is_used(x, 0) for x in range(3))

    def test_grid_config(self):
        settings = AsciigramSettings(grid=GridConfig(tab_width=2))
        result = DiagramRenderer(settings).render("a\tb")
        assert result.grid.width == 3

    def test_uses_given_logger(self):
        logger = MagicMock()
        DiagramRenderer(AsciigramSettings(), logger=logger).render("---")
        events = [call.args[0] for call in logger.info.call_args_list]
        assert "Lines recognized" in events
        assert "Decorations recognized" in events

    def test_render_file(self, renderer, tmp_path):
        source = tmp_path / "box.txt"
        source.write_text(BOX, encoding="utf-8")
        output = tmp_path / "box.svg"
        result = renderer.render_file(source, output)
        assert output.read_text(encoding="utf-8") == result.svg

    def test_render_file_without_output(self, renderer, tmp_path):
        source = tmp_path / "box.txt"
        source.write_text(BOX, encoding="utf-8")
        result = renderer.render_file(source)
        assert result.svg.endswith("</svg>")
        assert list(tmp_path.iterdir()) == [source]

    def test_render_file_missing(self, renderer, tmp_path):
        with pytest.raises(DiagramLoadError):
            renderer.render_file(tmp_path / "missing.txt")

    def test_render_file_from_stdin(self, renderer, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("---\n"))
        result = renderer.render_file(None)
        assert len(result.paths) == 1


class TestRenderFunction:
    """Tests for the one-call render() entry point."""

    def test_empty_text(self):
        svg = render("")
        assert 'width="8" height="16"' in svg
        assert svg.endswith("</svg>")

    def test_config_passed_through(self):
        assert "<rect" in render("---", RenderConfig(backdrop=True))

    def test_any_text_renders(self):
        svg = render("just some words")
        assert ">just some words</text>" in svg

    def test_deterministic(self):
        text = BOX + "A --> B\n  |\n  v\n"
        assert render(text) == render(text)
