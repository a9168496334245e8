"""Append-only text sink with indentation scopes for brace blocks."""

from contextlib import contextmanager
from io import StringIO
from typing import Iterator


class IndentingWriter:
    """Accumulates diagram text.

    Indentation is written lazily, when the first character of a line is
    appended, so empty lines stay empty.
    """

    def __init__(self, indent: str = "  "):
        self._buffer = StringIO()
        self._indent = indent
        self._level = 0
        self._at_line_start = True
        self._last_char = "\n"

    def append(self, text: str) -> "IndentingWriter":
        for i, line in enumerate(str(text).split("\n")):
            if i > 0:
                self.newline()
            if line:
                if self._at_line_start:
                    self._buffer.write(self._indent * self._level)
                    self._at_line_start = False
                self._buffer.write(line)
                self._last_char = line[-1]
        return self

    def whitespace(self) -> "IndentingWriter":
        """Append a single space unless the line is empty or already ends in whitespace."""
        if not self._at_line_start and not self._last_char.isspace():
            self.append(" ")
        return self

    def newline(self) -> "IndentingWriter":
        self._buffer.write("\n")
        self._at_line_start = True
        self._last_char = "\n"
        return self

    @contextmanager
    def indented(self) -> Iterator["IndentingWriter"]:
        self._level += 1
        try:
            yield self
        finally:
            self._level -= 1

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def __str__(self) -> str:
        return self.getvalue()
