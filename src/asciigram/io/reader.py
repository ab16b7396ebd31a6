"""Diagram reader for loading ASCII-art text.

This module provides the DiagramReader class for loading diagram text from a
file or standard input and turning it into a character Grid.
"""

import sys
from pathlib import Path

from asciigram.core.grid import Grid
from asciigram.exceptions import DiagramLoadError, DiagramNotLoadedError

# Path value that selects standard input
STDIN_PATH = "-"


class DiagramReader:
    """Loads diagram text and builds grids from it.

    Example:
        with DiagramReader(Path("diagram.txt")) as reader:
            grid = reader.grid()
            print(grid.width, grid.height)
    """

    def __init__(self, path: Path | str | None = None) -> None:
        """Initialize the diagram reader.

        Args:
            path: Diagram file, or None / ``"-"`` for standard input
        """
        self._path = None if path is None or str(path) == STDIN_PATH else Path(path)
        self._text: str | None = None

    @property
    def source(self) -> str:
        """Human-readable name of the input."""
        return str(self._path) if self._path is not None else "<stdin>"

    def load(self) -> None:
        """Read the diagram text.

        Raises:
            DiagramLoadError: If the file is missing, unreadable or not UTF-8
        """
        if self._path is None:
            self._text = sys.stdin.read()
            return

        if not self._path.exists():
            raise DiagramLoadError(str(self._path), "file not found")
        if self._path.is_dir():
            raise DiagramLoadError(str(self._path), "is a directory")

        try:
            self._text = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DiagramLoadError(str(self._path), f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise DiagramLoadError(str(self._path), str(e)) from e

    @property
    def text(self) -> str:
        """Return the raw diagram text.

        Raises:
            DiagramNotLoadedError: If load() has not been called
        """
        if self._text is None:
            raise DiagramNotLoadedError()
        return self._text

    @property
    def line_count(self) -> int:
        """Return the number of lines in the raw text.

        Raises:
            DiagramNotLoadedError: If load() has not been called
        """
        return len(self.text.splitlines())

    def grid(self, tab_width: int = 4, strip_indent: bool = True) -> Grid:
        """Build a fresh Grid from the loaded text.

        Each call returns a new Grid with an empty used-cell mask.

        Args:
            tab_width: Columns per tab stop
            strip_indent: Remove indentation shared by every line

        Returns:
            New Grid

        Raises:
            DiagramNotLoadedError: If load() has not been called
        """
        return Grid.from_text(self.text, tab_width=tab_width, strip_indent=strip_indent)

    def close(self) -> None:
        """Release the loaded text."""
        self._text = None

    def __enter__(self) -> "DiagramReader":
        """Context manager entry: load the diagram."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit: release the text."""
        self.close()
