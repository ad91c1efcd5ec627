"""Source location tracking for error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token or expression in Cobalt source.

    All positions are 1-indexed.

    Attributes:
        lineno: Starting line number
        col_offset: Starting column offset
        source_file: Source file path (optional, for site builds)

    Examples:
        >>> loc = SourceLocation(3, 7, "pages/index.cb")
        >>> str(loc)
        'pages/index.cb:3:7'

    """

    lineno: int
    col_offset: int
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder location for synthetically created nodes."""
        return cls(lineno=0, col_offset=0)
