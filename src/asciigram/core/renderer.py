"""Render orchestration for the diagram-to-SVG pipeline.

This module wires the recognition passes and the SVG writer together:

1. Normalize the text into a Grid
2. Recognize lines and curves
3. Recognize decorations against those lines
4. Emit paths, decorations and leftover text as an SVG document

Key components:
- DiagramRenderer: Orchestrator carrying settings, logging and statistics
- render: One-call library entry point
"""

import time
from dataclasses import dataclass
from pathlib import Path

import structlog

from asciigram.config import AsciigramSettings, RenderConfig
from asciigram.core.decoration_finder import DecorationFinder
from asciigram.core.grid import Grid
from asciigram.core.line_finder import LineFinder
from asciigram.domain import DecorationSet, PathSet
from asciigram.io import DiagramReader, SvgWriter
from asciigram.utils import RenderLogger, RenderStats, get_logger


@dataclass
class RenderResult:
    """Everything produced by one render."""

    svg: str
    grid: Grid
    paths: PathSet
    decorations: DecorationSet
    stats: RenderStats


class DiagramRenderer:
    """Orchestrates diagram recognition and SVG generation.

    Example:
        settings = AsciigramSettings()
        renderer = DiagramRenderer(settings)
        result = renderer.render("+--+\\n|  |\\n+--+")
        print(result.stats.path_count)  # 4
    """

    def __init__(
        self,
        config: AsciigramSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            config: Application settings
            logger: Structured logger (a stdlib-routed package logger if None)
        """
        self.config = config
        self.logger = logger if logger is not None else get_logger()
        self.render_logger = RenderLogger(self.logger)
        self.writer = SvgWriter(config.render)

    def scan(self, grid: Grid) -> tuple[PathSet, DecorationSet]:
        """Run line and decoration recognition on a grid.

        Marks every consumed cell as used, so the grid is ready for text
        extraction afterwards.

        Args:
            grid: Freshly built grid

        Returns:
            Recognized paths and decorations
        """
        paths = LineFinder(grid).find()
        decorations = DecorationFinder(grid, paths).find()
        return paths, decorations

    def render_grid(self, grid: Grid) -> RenderResult:
        """Render an already-built grid.

        Args:
            grid: Freshly built grid

        Returns:
            RenderResult with the document and statistics
        """
        self.render_logger = RenderLogger(self.logger)
        render_logger = self.render_logger
        stats = render_logger.stats
        stats.start_time = time.time()

        render_logger.log_grid(grid.width, grid.height)

        paths, decorations = self.scan(grid)
        render_logger.log_paths_found(
            [p.orientation.name.lower() if p.orientation else "other" for p in paths]
        )
        render_logger.log_decorations_found([d.kind.name.lower() for d in decorations])

        svg = self.writer.build(grid, paths, decorations)
        render_logger.log_text_runs(self.writer.text_run_count)

        stats.end_time = time.time()
        self.logger.debug(
            "Render complete",
            paths=stats.path_count,
            decorations=stats.decoration_count,
            text_runs=stats.text_run_count,
            duration_seconds=round(stats.duration_seconds, 4),
        )

        return RenderResult(
            svg=svg,
            grid=grid,
            paths=paths,
            decorations=decorations,
            stats=stats,
        )

    def render(self, text: str) -> RenderResult:
        """Render diagram text.

        Args:
            text: Diagram source

        Returns:
            RenderResult with the document and statistics
        """
        grid = Grid.from_text(
            text,
            tab_width=self.config.grid.tab_width,
            strip_indent=self.config.grid.strip_indent,
        )
        return self.render_grid(grid)

    def render_file(
        self,
        input_path: Path | None,
        output_path: Path | None = None,
    ) -> RenderResult:
        """Render a diagram file, optionally saving the document.

        Args:
            input_path: Diagram file, or None for standard input
            output_path: Destination SVG (nothing is written if None)

        Returns:
            RenderResult with the document and statistics

        Raises:
            DiagramLoadError: If the input cannot be read
            SvgWriteError: If the output cannot be written
        """
        with DiagramReader(input_path) as reader:
            self.logger.info("Diagram loaded", input=reader.source, lines=reader.line_count)
            grid = reader.grid(
                tab_width=self.config.grid.tab_width,
                strip_indent=self.config.grid.strip_indent,
            )

        result = self.render_grid(grid)

        if output_path is not None:
            self.writer.save(result.svg, output_path)
            self.render_logger.log_output(str(output_path), len(result.svg.encode("utf-8")))

        return result


def render(text: str, config: RenderConfig | None = None) -> str:
    """Convert ASCII-art text to an SVG document.

    Any text is a valid diagram; characters that are not part of the drawing
    become text labels.

    Args:
        text: Diagram source
        config: Document options (defaults if None)

    Returns:
        SVG document

    Examples:
        >>> render("").endswith("</svg>")
        True
    """
    settings = AsciigramSettings(render=config or RenderConfig())
    return DiagramRenderer(settings).render(text).svg
