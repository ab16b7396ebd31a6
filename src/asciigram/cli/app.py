"""CLI application entry point for asciigram.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from asciigram import __version__
from asciigram.cli.output import (
    console,
    print_analysis,
    print_cancellation_notice,
    print_diagram_info,
    print_error,
    print_header,
    print_step,
    print_success,
)
from asciigram.config import AsciigramSettings, GridConfig, LoggingConfig, RenderConfig
from asciigram.core import DiagramRenderer
from asciigram.exceptions import AsciigramError, DiagramLoadError, SvgWriteError
from asciigram.io import SvgWriter
from asciigram.utils import configure_logging

STDIN_ARGUMENT = "-"

# Create the Typer app
app = typer.Typer(
    name="asciigram",
    help="Convert ASCII-art diagrams to SVG.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]asciigram[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_file: Annotated[
        str | None,
        typer.Argument(
            help="Diagram text file (omit or '-' to read standard input)",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: standard output)",
        ),
    ] = None,
    save: Annotated[
        bool,
        typer.Option(
            "--save",
            "-S",
            help="Save as {name}.svg next to the input file",
        ),
    ] = False,
    backdrop: Annotated[
        bool,
        typer.Option(
            "--backdrop",
            help="Paint a background rectangle behind the drawing",
        ),
    ] = False,
    no_text: Annotated[
        bool,
        typer.Option(
            "--no-text",
            help="Drop leftover characters instead of emitting text labels",
        ),
    ] = False,
    spaces: Annotated[
        int,
        typer.Option(
            "--spaces",
            "-s",
            help="Consecutive spaces that end a text label (0 = one label per glyph)",
            min=0,
            max=16,
        ),
    ] = 2,
    stretch: Annotated[
        bool,
        typer.Option(
            "--stretch",
            help="Stretch text labels to exactly fill their cells",
        ),
    ] = False,
    tab_width: Annotated[
        int,
        typer.Option(
            "--tab-width",
            "-t",
            help="Columns per tab stop",
            min=1,
            max=16,
        ),
    ] = 4,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Recognize the diagram and print a summary without writing SVG",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert an ASCII-art diagram to an SVG drawing.

    Lines, boxes, arrows, rounded corners, points and shading are drawn as
    vector graphics; everything else is kept as text labels.

    Example:
        asciigram flow.txt -o flow.svg

        cat flow.txt | asciigram > flow.svg
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    input_path = None if input_file in (None, STDIN_ARGUMENT) else Path(input_file)

    if save:
        if input_path is None:
            print_error("Cannot use --save when reading standard input")
            raise typer.Exit(code=1)
        if output is None:
            output = SvgWriter.get_svg_path(input_path)

    # The document goes to stdout unless -o is given; keep the console quiet then
    chatty = not quiet and (output is not None or dry_run)

    settings = AsciigramSettings(
        render=RenderConfig(
            backdrop=backdrop,
            disable_text=no_text,
            spaces=spaces,
            stretch=stretch,
        ),
        grid=GridConfig(tab_width=tab_width),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    if chatty:
        print_header(__version__)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        renderer = DiagramRenderer(settings, logger=logger)

        if chatty:
            print_step("Reading diagram")

        result = renderer.render_file(
            input_path,
            output_path=None if dry_run else output,
        )

        if chatty:
            print_diagram_info(
                source=str(input_path) if input_path is not None else "<stdin>",
                width=result.grid.width,
                height=result.grid.height,
            )

        if dry_run:
            if not quiet:
                print_analysis(
                    paths_by_orientation=result.stats.paths_by_orientation,
                    decorations_by_kind=result.stats.decorations_by_kind,
                    text_runs=result.stats.text_run_count,
                    verbose=verbose,
                )
            raise typer.Exit(code=0)

        if output is None:
            typer.echo(result.svg)
            return

        if chatty:
            print_success(
                output_path=str(output),
                file_size=_format_file_size(output),
                total_time_s=result.stats.duration_seconds,
                paths=result.stats.path_count,
                decorations=result.stats.decoration_count,
                text_runs=result.stats.text_run_count,
            )

    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_notice()
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except DiagramLoadError as e:
        print_error(f"Could not load diagram: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except SvgWriteError as e:
        print_error(f"Could not write SVG: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except AsciigramError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
