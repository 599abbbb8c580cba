"""Immutable cursor for scanning affix patterns.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position within an affix pattern.

    Example:
        >>> cursor = Cursor("'%'", 0)
        >>> cursor.current
        "'"
        >>> cursor.peek(1)
        '%'
        >>> cursor.advance().pos
        1
        >>> Cursor("", 0).is_eof
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
            msg = f"Unexpected end of affix pattern at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None beyond EOF (lookahead only)."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def skip_run(self, char: str) -> "Cursor":
        """Return new cursor advanced past consecutive occurrences of char.

        Example:
            >>> Cursor("¤¤¤#", 0).skip_run("¤").pos
            3
        """
        c = self
        while not c.is_eof and c.current == char:
            c = c.advance()
        return c
