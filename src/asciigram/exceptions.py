"""Exception hierarchy for asciigram.

The recognition core never raises for malformed drawings: any text is a valid
diagram. Errors only come from the input and output layers.
"""


class AsciigramError(Exception):
    """Base exception for all asciigram errors."""

    pass


class DiagramError(AsciigramError):
    """Errors related to reading diagram text."""

    pass


class DiagramLoadError(DiagramError):
    """Error loading a diagram file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load diagram '{path}': {reason}")


class DiagramNotLoadedError(DiagramError):
    """Diagram text accessed before it was loaded."""

    def __init__(self) -> None:
        super().__init__("Diagram not loaded. Call load() first.")


class OutputError(AsciigramError):
    """Errors related to writing rendered output."""

    pass


class SvgWriteError(OutputError):
    """Error saving an SVG file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write SVG '{path}': {reason}")
