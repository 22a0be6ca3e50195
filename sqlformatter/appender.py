"""
====================================
Indentation and output buffer helpers.
====================================

Classes:
    Indenter: Tracks the current indentation depth and renders line breaks
    SqlAppender: Append-only output buffer shared by all formatters

The appender collapses whitespace: a whitespace token seen in the middle of a
line is remembered as a single pending space, written only if another token
follows on the same line. Manufactured line breaks therefore never leave
trailing blanks behind, and formatting already formatted SQL gives the same
text back. A line break that ends the buffer, as after a lone ``select``, is
left out of the rendered text.

Example:
    >>> appender = SqlAppender('  ')
    >>> _ = appender.append('select').increment().newline().append('a')
    >>> str(appender)
    'select\\n  a'
"""

from typing import List

LINE_SEPARATOR = "\n"


class Indenter:
    """Indentation depth plus the unit string repeated per level.

    Depth is a plain signed counter. Malformed input (an extra closing
    parenthesis, a stray END) can push it below zero; a negative depth
    renders as no indentation at all.

    Attributes:
        indent_unit: Literal text repeated once per depth level
        depth: Current indentation depth
    """

    def __init__(self, indent_unit: str = "    "):
        self.indent_unit = indent_unit
        self.depth = 0

    def increment(self) -> "Indenter":
        self.depth += 1
        return self

    def decrement(self) -> "Indenter":
        self.depth -= 1
        return self

    def reset(self) -> "Indenter":
        """Return to depth 0, used between statements of a script."""
        self.depth = 0
        return self

    def newline(self) -> str:
        """Render a line separator followed by the current indentation."""
        return LINE_SEPARATOR + self.indent_unit * max(self.depth, 0)


class SqlAppender:
    """Output buffer with indentation control.

    Owned by a single ``format`` call. All mutators return the appender so
    calls can be chained the same way the layout rules read.

    Attributes:
        indenter: Indenter used for every line break
        start_line: True while nothing has been written since the last line break
    """

    def __init__(self, indent_unit: str = "    "):
        self._parts: List[str] = []
        self._pending_space = False
        self.indenter = Indenter(indent_unit)
        self.start_line = False

    def append(self, token: str) -> "SqlAppender":
        """Write a token on the current line."""
        if self._pending_space:
            self._parts.append(" ")
            self._pending_space = False
        self._parts.append(token)
        self.start_line = False
        return self

    def space(self) -> "SqlAppender":
        """Record whitespace between tokens; ignored right after a line break."""
        if not self.start_line and self._parts:
            self._pending_space = True
        return self

    def newline(self) -> "SqlAppender":
        """Start a new line at the current indentation depth."""
        self._pending_space = False
        self._parts.append(self.indenter.newline())
        self.start_line = True
        return self

    def increment(self) -> "SqlAppender":
        self.indenter.increment()
        return self

    def decrement(self) -> "SqlAppender":
        self.indenter.decrement()
        return self

    def reset(self) -> "SqlAppender":
        self.indenter.reset()
        return self

    @property
    def depth(self) -> int:
        """Current indentation depth."""
        return self.indenter.depth

    def __str__(self) -> str:
        # A line break with nothing after it is not part of the output.
        parts = self._parts[:-1] if self.start_line else self._parts
        return "".join(parts)
