"""Rich console output helpers for the CLI.

All console output goes to stderr, so an SVG document written to stdout can
be piped without interference.
"""

from collections import Counter

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]asciigram[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_diagram_info(source: str, width: int, height: int) -> None:
    """Print diagram information.

    Args:
        source: Input file name or ``<stdin>``
        width: Grid width in columns
        height: Grid height in rows
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(f"  {width} columns {SYM_DOT} {height} rows")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def _format_counts(counts: Counter[str]) -> str:
    return f" {SYM_DOT} ".join(
        f"{count} {name.replace('_', ' ')}" for name, count in sorted(counts.items())
    )


def print_analysis(
    paths_by_orientation: Counter[str],
    decorations_by_kind: Counter[str],
    text_runs: int,
    verbose: bool,
) -> None:
    """Print the recognized primitives of a dry run.

    Args:
        paths_by_orientation: Path counts keyed by orientation name
        decorations_by_kind: Decoration counts keyed by kind name
        text_runs: Number of text labels
        verbose: Whether to break counts down by type
    """
    console.print("\n[bold]Analysis[/bold]\n")
    console.print(f"  Paths          {sum(paths_by_orientation.values())}")
    if verbose and paths_by_orientation:
        console.print(f"    {_format_counts(paths_by_orientation)}")
    console.print(f"  Decorations    {sum(decorations_by_kind.values())}")
    if verbose and decorations_by_kind:
        console.print(f"    {_format_counts(decorations_by_kind)}")
    console.print(f"  Text runs      {text_runs}")
    console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] {SYM_DOT} nothing written")


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    paths: int,
    decorations: int,
    text_runs: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total render time in seconds
        paths: Number of paths drawn
        decorations: Number of decorations drawn
        text_runs: Number of text labels emitted
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {paths} paths {SYM_DOT} {decorations} decorations {SYM_DOT} {text_runs} text runs"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No output written")
