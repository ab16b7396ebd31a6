"""asciigram - Convert ASCII-art diagrams to SVG.

asciigram is a CLI tool and library that recognizes the lines, boxes, arrows,
curves, points and shading drawn with plain characters in a block of text and
renders them as a resolution-independent SVG drawing. Characters that are not
part of the drawing are kept as text labels.

Example:
    $ asciigram diagram.txt -o diagram.svg

Library use:
    >>> from asciigram import render
    >>> svg = render("+--+\\n|  |\\n+--+")
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from asciigram.core.renderer import render  # noqa: E402

__all__ = ["__author__", "__version__", "render"]
