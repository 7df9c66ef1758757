"""A character cursor over TL schema source text."""

from __future__ import annotations


class Cursor:
    """Reads a TL schema one character at a time.

    The cursor never moves past the last character: once there, any read
    that would need to advance further raises :class:`EOFError`.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    def _current(self) -> str:
        try:
            return self._source[self._pos]
        except IndexError:
            raise EOFError("cursor has no characters to read") from None

    def _advance(self) -> bool:
        if self._pos >= len(self._source) - 1:
            return False
        self._pos += 1
        return True

    def unread(self, count: int) -> None:
        """Move back ``count`` characters, stopping at the start."""
        self._pos = max(self._pos - count, 0)

    def skip(self, count: int) -> None:
        """Move forward ``count`` characters, stopping at the last one."""
        self._pos = min(self._pos + count, len(self._source) - 1)

    def skip_spaces(self) -> None:
        """Move past whitespace, stopping at the last character."""
        while self._current().isspace():
            if not self._advance():
                break

    def read_at(self, at: str) -> str:
        """Return the text up to (not including) the next ``at``; stay on ``at``."""
        chars = []
        while True:
            char = self._current()
            if char == at:
                return "".join(chars)
            chars.append(char)
            if not self._advance():
                raise EOFError(f"reached end of source looking for {at!r}")

    def read_symbol(self) -> str:
        """Return the current character and move past it.

        Raises :class:`EOFError` when the current character is the last one.
        """
        char = self._current()
        if not self._advance():
            raise EOFError("reached end of source")
        return char

    def read_digits(self) -> str:
        """Return the run of decimal digits starting at the cursor."""
        digits = []
        while self._current().isdecimal():
            digits.append(self._current())
            if not self._advance():
                raise EOFError("reached end of source reading digits")
        return "".join(digits)

    def is_next(self, s: str) -> bool:
        """Consume ``s`` if the source continues with it; otherwise stay put."""
        for index, expected in enumerate(s):
            if self._current() != expected:
                self.unread(index)
                return False
            self._advance()
        return True