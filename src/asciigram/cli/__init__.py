"""Command-line interface for asciigram.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Reads files or standard input, writes files or standard output
- Verbose/quiet output modes
- Dry-run mode listing recognized primitives
- Detailed error reporting
"""

from asciigram.cli.app import cli

__all__ = ["cli"]
