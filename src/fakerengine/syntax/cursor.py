"""Immutable cursor for the expression and regex-subset parsers.

Python 3.13+. Zero external dependencies.

Design:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns a NEW cursor, so a loop that forgets to
      reassign cannot spin forever on the same position
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("#{x}", 0)
        >>> cursor.startswith("#{")
        True
        >>> cursor.advance(2).current
        'x'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character at the current position.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, text: str) -> bool:
        """True if the source continues with text at the current position."""
        return self.source.startswith(text, self.pos)

    def slice_to(self, end_pos: int) -> str:
        """Source substring from the current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_spaces(self) -> "Cursor":
        """Return cursor advanced past spaces and tabs."""
        cursor = self
        while not cursor.is_eof and cursor.current in " \t":
            cursor = cursor.advance()
        return cursor
