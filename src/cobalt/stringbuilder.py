"""StringBuilder for O(n) string accumulation.

The emitter's head and body buffers grow one fragment per expression.
Appending to a list and joining once keeps the whole emit linear in the
size of the output.

Thread Safety:
StringBuilder instances are local to each emit() call.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string buffer.

    Usage:
        >>> sb = StringBuilder()
        >>> _ = sb.append("<p>").append("Hello").append("</p>")
        >>> sb.build()
        '<p>Hello</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
