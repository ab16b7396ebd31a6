"""SVG writer for rendered diagrams.

This module provides the SvgWriter class, which assembles recognized paths,
decorations and leftover text into a complete SVG document and saves it.
Colors are taken from CSS variables so a single document follows the
viewer's light or dark color scheme.
"""

from pathlib import Path
from xml.sax.saxutils import escape

from asciigram.config import RenderConfig
from asciigram.core.grid import Grid
from asciigram.domain import ASPECT, SCALE, DecorationSet, PathSet, format_coord
from asciigram.exceptions import SvgWriteError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Baseline shift that centres 13px monospace text vertically in a cell
TEXT_BASELINE_OFFSET = 4

CSS_VARIABLES = """<style>
  :root {
    --aasvg-stroke: #000;
    --aasvg-fill: #000;
    --aasvg-bg: #fff;
    --aasvg-text: #000;
  }
  @media (prefers-color-scheme: dark) {
    :root {
      --aasvg-stroke: #fff;
      --aasvg-fill: #fff;
      --aasvg-bg: #1a1a1a;
      --aasvg-text: #fff;
    }
  }
</style>
"""

_XML_ENTITIES = {'"': "&quot;", "'": "&#39;"}


def escape_xml(text: str) -> str:
    """Escape the five XML special characters.

    Examples:
        >>> escape_xml("a<b>&c")
        'a&lt;b&gt;&amp;c'
    """
    return escape(text, _XML_ENTITIES)


class SvgWriter:
    """Builds and saves SVG documents.

    Example:
        writer = SvgWriter(RenderConfig(backdrop=True))
        svg = writer.build(grid, paths, decorations)
        writer.save(svg, Path("diagram.svg"))
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize the writer.

        Args:
            config: Document options (defaults if None)
        """
        self._config = config or RenderConfig()
        self._text_run_count = 0

    @property
    def text_run_count(self) -> int:
        """Number of text labels emitted by the last build()."""
        return self._text_run_count

    def build(self, grid: Grid, paths: PathSet, decorations: DecorationSet) -> str:
        """Assemble the complete SVG document.

        Args:
            grid: Scanned grid; its unused cells become text
            paths: Recognized lines and curves
            decorations: Recognized decorations

        Returns:
            SVG document as a string, ending with ``</svg>``
        """
        width = (grid.width + 1) * SCALE
        height = (grid.height + 1) * SCALE * ASPECT

        parts = [
            f'<svg xmlns="{SVG_NAMESPACE}" version="1.1" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}" class="diagram" text-anchor="middle" '
            f'font-family="monospace" font-size="13px" stroke-linecap="round">\n',
            CSS_VARIABLES,
        ]

        if self._config.backdrop:
            parts.append(
                f'<rect x="0" y="0" width="{width}" height="{height}" fill="var(--aasvg-bg)"/>\n'
            )

        parts.extend(self._path_elements(paths))
        parts.extend(f"{decoration.to_svg()}\n" for decoration in decorations)

        self._text_run_count = 0
        if not self._config.disable_text:
            parts.append(self._text_group(grid))

        parts.append("</svg>")
        return "".join(parts)

    def _path_elements(self, paths: PathSet) -> list[str]:
        elements = []
        for path in paths:
            dash = ' stroke-dasharray="4,2"' if path.style.dashed else ""
            for data in path.to_path_data():
                elements.append(
                    f'<path d="{data}" fill="none" stroke="var(--aasvg-stroke)"{dash}/>\n'
                )
        return elements

    def _text_group(self, grid: Grid) -> str:
        lines = ['<g fill="var(--aasvg-text)">\n']
        spaces = self._config.spaces

        for y in range(grid.height):
            x = 0
            while x < grid.width:
                start = grid.text_start(x, y)
                if start is None:
                    break
                text = grid.extract_text(start, y, spaces)
                if text:
                    lines.append(self._text_element(text, start, y))
                    self._text_run_count += 1
                x = start + max(1, len(text))

        lines.append("</g>\n")
        return "".join(lines)

    def _text_element(self, text: str, start: int, y: int) -> str:
        n = len(text)
        px = format_coord((start + 1 + (n - 1) / 2) * SCALE)
        py = format_coord((y + 1) * SCALE * ASPECT + TEXT_BASELINE_OFFSET)
        if self._config.stretch:
            return (
                f'<text x="{px}" y="{py}" textLength="{format_coord(n * SCALE)}" '
                f'lengthAdjust="spacingAndGlyphs">{escape_xml(text)}</text>\n'
            )
        return f'<text x="{px}" y="{py}">{escape_xml(text)}</text>\n'

    def save(self, svg: str, output_path: Path) -> None:
        """Write a document to disk as UTF-8.

        Args:
            svg: Document produced by build()
            output_path: Destination file

        Raises:
            SvgWriteError: If the file cannot be written
        """
        try:
            output_path.write_text(svg, encoding="utf-8")
        except OSError as e:
            raise SvgWriteError(str(output_path), str(e)) from e

    @staticmethod
    def get_svg_path(input_path: Path) -> Path:
        """Generate the default output path for an input file.

        Converts: diagram.txt -> diagram.svg
                  notes/flow.aa -> notes/flow.svg

        Args:
            input_path: Diagram source file path

        Returns:
            Path with the extension replaced by ``.svg``
        """
        return input_path.with_suffix(".svg")
