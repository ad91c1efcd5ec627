"""Token and TokenCategory definitions for the Cobalt tokenizer.

The tokenizer produces a flat sequence of Token objects that the parser
consumes. A token's category is also the key the parser uses to pick the
parselet that handles it.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenCategory is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from cobalt.location import SourceLocation


class TokenCategory(Enum):
    """Categories of tokens produced by the tokenizer."""

    # Reserved, never produced by the tokenizer
    ID = auto()
    CLASS = auto()

    CTRL = auto()  # \keyword

    HEADING_1 = auto()  # # text
    HEADING_2 = auto()
    HEADING_3 = auto()
    HEADING_4 = auto()
    HEADING_5 = auto()
    HEADING_6 = auto()

    PARAGRAPH = auto()  # plain text

    # Delimited tokens
    PAREN = auto()  # (...)
    BRACKET = auto()  # [...]
    BRACE = auto()  # {...}

    @classmethod
    def heading(cls, level: int) -> TokenCategory:
        """Return the heading category for ``level`` (1-6).

        Raises:
            ValueError: If level is outside 1..6
        """
        if not 1 <= level <= MAX_HEADING_LEVEL:
            msg = f"heading level must be between 1 and {MAX_HEADING_LEVEL}, got {level}"
            raise ValueError(msg)
        return _HEADINGS[level - 1]

    @property
    def heading_level(self) -> int | None:
        """Heading level of this category, or None for non-heading categories."""
        try:
            return _HEADINGS.index(self) + 1
        except ValueError:
            return None


MAX_HEADING_LEVEL = 6

_HEADINGS: tuple[TokenCategory, ...] = (
    TokenCategory.HEADING_1,
    TokenCategory.HEADING_2,
    TokenCategory.HEADING_3,
    TokenCategory.HEADING_4,
    TokenCategory.HEADING_5,
    TokenCategory.HEADING_6,
)

HEADING_CATEGORIES: frozenset[TokenCategory] = frozenset(_HEADINGS)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        type: The token category
        value: Token text with sigils and delimiters removed
        lineno: Line of the token's first character (1-indexed)
        col: Column of the token's first character (1-indexed)
        source_file: Optional source file path

    """

    type: TokenCategory
    value: str
    lineno: int = 1
    col: int = 1
    source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.lineno, self.col, self.source_file)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.col})"
