"""Diagram I/O layer for asciigram.

This module handles reading diagram text and writing SVG documents. It keeps
file and stream handling out of the recognition core.

Key responsibilities:
- Load diagram text from files or standard input
- Build character grids with tab and indentation handling
- Assemble and save SVG documents with light/dark color support

Key classes:
- DiagramReader: Load diagram text and build grids
- SvgWriter: Build and save SVG documents
"""

from asciigram.io.reader import DiagramReader
from asciigram.io.writer import SvgWriter, escape_xml

__all__ = [
    "DiagramReader",
    "SvgWriter",
    "escape_xml",
]
