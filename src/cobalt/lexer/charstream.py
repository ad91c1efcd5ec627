"""Random-access character stream over Cobalt source text.

Thread Safety:
CharStream instances are single-use. Create one per source string.

"""

from __future__ import annotations


class CharStream:
    """Cursor over the characters of a source string.

    Indexing is by code point, so a multi-byte character is one addressable
    unit for peek and lookahead. Reading past the end returns None instead of
    raising.

    Usage:
        >>> stream = CharStream("ab")
        >>> stream.peek(), stream.look_ahead(1), stream.look_ahead(2)
        ('a', 'b', None)
        >>> stream.next(), stream.next(), stream.next()
        ('a', 'b', None)

    """

    __slots__ = ("_source", "_source_len", "_index", "_lineno", "_col")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._index = 0
        self._lineno = 1
        self._col = 1

    def peek(self) -> str | None:
        """Return the current character without advancing."""
        if self._index >= self._source_len:
            return None
        return self._source[self._index]

    def look_ahead(self, n: int) -> str | None:
        """Return the character ``n`` positions past the current one.

        Only forward lookahead is supported; a negative ``n`` returns None.
        """
        if n < 0:
            return None
        index = self._index + n
        if index >= self._source_len:
            return None
        return self._source[index]

    def next(self) -> str | None:
        """Return the current character and advance past it."""
        if self._index >= self._source_len:
            return None

        char = self._source[self._index]
        self._index += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def starts_with(self, text: str) -> bool:
        """Check whether the upcoming characters spell ``text``."""
        return self._source.startswith(text, self._index)

    @property
    def at_end(self) -> bool:
        return self._index >= self._source_len

    @property
    def index(self) -> int:
        return self._index

    @property
    def lineno(self) -> int:
        """Line of the current character (1-indexed)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column of the current character (1-indexed)."""
        return self._col
