"""Exception classes for Cobalt.

Every failure inside the tokenize → parse → emit pipeline is terminal for the
file being compiled. Errors propagate as exceptions and are reported once by
the caller (see ``cobalt.build`` and ``cobalt.cli``).
"""

from __future__ import annotations


class CobaltError(Exception):
    """Base exception for all Cobalt errors."""

    pass


class ParseError(CobaltError):
    """Error while tokenizing or parsing Cobalt source.

    Raised for grammar violations (an unexpected token category, too many
    heading symbols) and for exhaustion (input ends before a rule completes).
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def unexpected_eof(
        cls,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> ParseError:
        """Input ended before the current grammar rule completed."""
        return cls("Unexpected end of file when parsing", lineno, col_offset, source_file)


class EmitError(CobaltError):
    """Error while emitting HTML from an expression sequence.

    Raised for directives whose keyword the emitter does not know.
    """

    pass


class ConfigError(CobaltError):
    """Invalid or missing site configuration.

    Raised for an unknown title protocol, a missing ``cobalt.toml`` or a
    configuration table that lacks a required key.
    """

    pass
