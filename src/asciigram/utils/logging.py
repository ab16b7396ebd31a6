"""Logging utilities for asciigram."""

import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a render run."""

    width: int = 0
    height: int = 0
    path_count: int = 0
    decoration_count: int = 0
    text_run_count: int = 0
    paths_by_orientation: Counter[str] = field(default_factory=Counter)
    decorations_by_kind: Counter[str] = field(default_factory=Counter)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


_installed_handlers: list[logging.Handler] = []


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so that an SVG written to stdout stays clean.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call instead of stacking them
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("asciigram")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger() -> structlog.stdlib.BoundLogger:
    """Get a structured logger routed through stdlib logging.

    Unlike ``structlog.get_logger()`` before ``configure_logging()`` has run,
    this logger never prints on its own: records only appear where the
    application has attached handlers to the ``asciigram`` logger.
    """
    return structlog.wrap_logger(
        logging.getLogger("asciigram"),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
    )


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_grid(self, width: int, height: int) -> None:
        """Log the size of the normalized grid."""
        self._logger.debug("Grid built", width=width, height=height)
        self._stats.width = width
        self._stats.height = height

    def log_paths_found(self, orientations: list[str]) -> None:
        """Log line recognition results.

        Args:
            orientations: Orientation name of every recognized path
        """
        counts = Counter(orientations)
        self._logger.info("Lines recognized", total=len(orientations), **counts)
        self._stats.path_count += len(orientations)
        self._stats.paths_by_orientation.update(counts)

    def log_decorations_found(self, kinds: list[str]) -> None:
        """Log decoration recognition results.

        Args:
            kinds: Kind name of every recognized decoration
        """
        counts = Counter(kinds)
        self._logger.info("Decorations recognized", total=len(kinds), **counts)
        self._stats.decoration_count += len(kinds)
        self._stats.decorations_by_kind.update(counts)

    def log_text_runs(self, count: int) -> None:
        """Log how many text labels were emitted."""
        self._logger.debug("Text runs emitted", count=count)
        self._stats.text_run_count += count

    def log_output(self, destination: str, size_bytes: int) -> None:
        """Log where the document was written."""
        self._logger.info("SVG written", output=destination, bytes=size_bytes)

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
