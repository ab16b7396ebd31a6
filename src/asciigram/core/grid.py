"""Character grid with a used-cell mask.

The Grid is the single piece of mutable state shared by the recognition
passes: each pass reads characters and marks the cells it turns into geometry
as used, and whatever is left unused at the end is emitted as text.
"""

import textwrap

from asciigram.core.chars import HIDEABLE_MARKERS, is_letter

# Private-use stand-ins for marker letters that sit inside words
_HIDDEN = {"o": "\ue004", "v": "\ue005", "V": "\ue006"}
_UNHIDDEN = {hidden: marker for marker, hidden in _HIDDEN.items()}


def _hide_markers(line: str) -> str:
    """Replace marker letters that are part of a word with placeholders.

    A marker is part of a word when two letters precede it, two letters
    follow it, or a letter sits on each side.
    """
    chars = list(line)
    for i, c in enumerate(line):
        if c not in HIDEABLE_MARKERS:
            continue
        before = line[max(0, i - 2) : i]
        after = line[i + 1 : i + 3]
        two_before = len(before) == 2 and all(is_letter(ch) for ch in before)
        two_after = len(after) == 2 and all(is_letter(ch) for ch in after)
        flanked = (
            i > 0
            and i + 1 < len(line)
            and is_letter(line[i - 1])
            and is_letter(line[i + 1])
        )
        if two_before or two_after or flanked:
            chars[i] = _HIDDEN[c]
    return "".join(chars)


def unhide_markers(text: str) -> str:
    """Restore marker letters hidden by grid construction."""
    return "".join(_UNHIDDEN.get(c, c) for c in text)


class Grid:
    """Rectangular character grid with a parallel used-cell mask.

    Out-of-range reads return a space and out-of-range writes are ignored, so
    recognition rules can look at neighbours without bounds checks.

    Example:
        grid = Grid.from_text("+--+\\n|  |\\n+--+")
        grid.get(0, 0)  # "+"
        grid.get(-1, 5)  # " "
    """

    def __init__(self, rows: list[str]) -> None:
        """Initialize from already-normalized rows.

        Args:
            rows: Lines of text, padded to the longest
        """
        self._height = len(rows)
        self._width = max((len(r) for r in rows), default=0)
        self._rows = [r.ljust(self._width) for r in rows]
        self._used = [[False] * self._width for _ in range(self._height)]

    @classmethod
    def from_text(cls, text: str, tab_width: int = 4, strip_indent: bool = True) -> "Grid":
        """Build a grid from raw diagram text.

        Line endings are normalized, tabs expanded, common indentation removed
        and rows padded to the widest row. A single trailing newline does not
        add an empty row.

        Args:
            text: Diagram source
            tab_width: Columns per tab stop
            strip_indent: Remove indentation shared by every line

        Returns:
            New Grid
        """
        text = text.replace("\r\n", "\n").replace("\r", "\n").expandtabs(tab_width)
        if strip_indent:
            text = textwrap.dedent(text)

        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        width = max((len(line) for line in lines), default=0)
        rows = [_hide_markers(line.ljust(width)) for line in lines]
        return cls(rows)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> str:
        """Return the character at a cell, or a space outside the grid."""
        if not self._in_range(x, y):
            return " "
        return self._rows[y][x]

    def is_used(self, x: int, y: int) -> bool:
        """Check whether a cell has been consumed by a recognized primitive."""
        if not self._in_range(x, y):
            return False
        return self._used[y][x]

    def set_used(self, x: int, y: int) -> None:
        """Mark a cell as consumed."""
        if self._in_range(x, y):
            self._used[y][x] = True

    def rows(self) -> list[str]:
        """Return the normalized rows, with hidden markers restored."""
        return [unhide_markers(row) for row in self._rows]

    def text_start(self, x: int, y: int) -> int | None:
        """Find the first unused, non-blank cell at or after column x.

        Returns:
            Column index, or None if the rest of the row is empty
        """
        for col in range(max(0, x), self._width):
            if not self.is_used(col, y) and self.get(col, y) != " ":
                return col
        return None

    def extract_text(self, x: int, y: int, spaces: int) -> str:
        """Collect a text run starting at column x.

        The run stops at a used cell, at the row end, or at ``spaces``
        consecutive blanks. With ``spaces`` of zero every glyph is its own run.
        Trailing blanks are dropped and hidden markers restored.

        Args:
            x: Starting column
            y: Row
            spaces: Number of consecutive blanks that end a run

        Returns:
            Text of the run
        """
        chars: list[str] = []
        blanks = 0
        col = x
        while col < self._width and not self.is_used(col, y):
            c = self.get(col, y)
            if c == " ":
                blanks += 1
                if spaces > 0 and blanks >= spaces:
                    break
            else:
                blanks = 0
            chars.append(c)
            col += 1
            if spaces == 0:
                break
        return unhide_markers("".join(chars).rstrip(" "))
