"""
Read cursor over an immutable source string.

The cursor only knows about characters. Line and column bookkeeping
belongs to the lexer, since not every consumed character is a visible
column (an escape pair is one logical unit, for instance).
"""

# Returned by peek/consume when reading past the end of the source
EOF_CHAR = '\0'


class Cursor:
    """Lookahead and consumption primitives over a source string."""

    def __init__(self, source: str):
        self._source = source
        self._length = len(source)
        self.position = 0

    @property
    def source(self) -> str:
        return self._source

    def peek(self, offset: int = 0) -> str:
        """Character `offset` positions ahead, or EOF_CHAR if out of range."""
        peek_pos = self.position + offset
        if 0 <= peek_pos < self._length:
            return self._source[peek_pos]
        return EOF_CHAR

    def peek_string(self, count: int) -> str:
        """Up to `count` characters ahead; shorter near the end."""
        if count <= 0:
            return ""
        return self._source[self.position:self.position + count]

    def consume(self) -> str:
        """Return the current character and advance past it."""
        if self.position >= self._length:
            return EOF_CHAR
        char = self._source[self.position]
        self.position += 1
        return char

    def skip(self, count: int = 1):
        """Advance by `count` characters, clamped to the end."""
        if count > 0:
            self.position = min(self.position + count, self._length)

    def is_at_end(self) -> bool:
        return self.position >= self._length

    def remainder(self) -> str:
        """Unconsumed suffix, for diagnostics."""
        return self._source[self.position:]

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, length={self._length})"
