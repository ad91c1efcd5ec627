"""Eager single-pass tokenizer for Cobalt source.

The whole source is scanned when the Tokenizer is constructed; the parser
then walks the finished token tuple with peek/next. There is no partially
tokenized state visible from outside.

The scan never backtracks and needs at most two characters of lookahead
(for ``//`` comments), so tokenizing is O(n) in the length of the source.

Thread Safety:
Tokenizer instances are single-use. Create one per source string.
The produced tokens are immutable and safe to share.

"""

from __future__ import annotations

from collections.abc import Iterator

from cobalt.errors import ParseError
from cobalt.lexer.charsets import (
    COMMENT,
    CONTROL_CHARS,
    CTRL_SIGIL,
    DELIMITERS,
    END_OF_CONTROL,
    HEADING_SIGIL,
    SEPARATORS,
    WHITESPACE,
)
from cobalt.lexer.charstream import CharStream
from cobalt.tokens import MAX_HEADING_LEVEL, Token, TokenCategory
from cobalt.utils.logger import get_logger

logger = get_logger(__name__)

_DELIMITED_CATEGORIES: dict[str, TokenCategory] = {
    "[": TokenCategory.BRACKET,
    "(": TokenCategory.PAREN,
    "{": TokenCategory.BRACE,
}


class Tokenizer:
    """Turns Cobalt source into a token sequence and serves it to the parser.

    Usage:
        >>> tokens = Tokenizer("# Hello\\n[Home](index.html)")
        >>> tokens.collect_all()
        (Token(HEADING_1, 'Hello', 1:1), Token(BRACKET, 'Home', 2:1), Token(PAREN, 'index.html', 2:7))
        >>> tokens.next()
        Token(HEADING_1, 'Hello', 1:1)

    Grammar:
        ``\\keyword``   control keyword, ends at a space or any bracket
        ``# text``      heading, one to six ``#``, ends at newline
        ``[...]``       bracket, no nesting or escaping
        ``(...)``       paren, no nesting or escaping
        ``{...}``       brace, no nesting or escaping
        anything else   paragraph, ends at ``\\``, ``#`` or ``[``

        Tabs and newlines between tokens are skipped, as are ``//`` comments
        running to the end of the line.

    """

    __slots__ = ("_tokens", "_index", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Tokenize ``source`` eagerly.

        Args:
            source: Cobalt source text
            source_file: Optional source file path for error messages

        Raises:
            ParseError: On more than six heading symbols or an unterminated
                ``[``, ``(`` or ``{``
        """
        self._source_file = source_file
        self._tokens: tuple[Token, ...] = tuple(self._scan(CharStream(source)))
        self._index = 0
        logger.debug("Tokenized %s into %d tokens", source_file or "<string>", len(self._tokens))

    # =========================================================================
    # Token stream
    # =========================================================================

    def peek(self) -> Token | None:
        """Return the next token without consuming it."""
        if self._index >= len(self._tokens):
            return None
        return self._tokens[self._index]

    def peek_or_fail(self) -> Token:
        """Return the next token without consuming it, failing at end of input.

        Raises:
            ParseError: If all tokens have been consumed
        """
        token = self.peek()
        if token is None:
            raise self._eof_error()
        return token

    def next(self) -> Token | None:
        """Consume and return the next token."""
        token = self.peek()
        if token is not None:
            self._index += 1
        return token

    def next_or_fail(self) -> Token:
        """Consume and return the next token, failing at end of input.

        Raises:
            ParseError: If all tokens have been consumed
        """
        token = self.next()
        if token is None:
            raise self._eof_error()
        return token

    def collect_all(self) -> tuple[Token, ...]:
        """Return every token produced, regardless of the cursor."""
        return self._tokens

    @property
    def at_end(self) -> bool:
        return self._index >= len(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def _eof_error(self) -> ParseError:
        last = self._tokens[-1] if self._tokens else None
        if last is None:
            return ParseError.unexpected_eof(source_file=self._source_file)
        return ParseError.unexpected_eof(last.lineno, last.col, self._source_file)

    # =========================================================================
    # Scanning
    # =========================================================================

    def _scan(self, stream: CharStream) -> Iterator[Token]:
        """Yield tokens until the character stream is exhausted."""
        while True:
            self._skip_separators(stream)
            char = stream.peek()
            if char is None:
                return

            lineno, col = stream.lineno, stream.col
            if char == CTRL_SIGIL:
                category, value = TokenCategory.CTRL, self._scan_ctrl(stream)
            elif char == HEADING_SIGIL:
                category, value = self._scan_heading(stream)
            elif char in DELIMITERS:
                category, value = _DELIMITED_CATEGORIES[char], self._scan_delimited(stream)
            else:
                category, value = TokenCategory.PARAGRAPH, self._scan_paragraph(stream)

            yield Token(category, value, lineno, col, self._source_file)

    def _skip_separators(self, stream: CharStream) -> None:
        """Skip tabs, newlines and ``//`` comments."""
        while (char := stream.peek()) is not None:
            if char in SEPARATORS:
                stream.next()
            elif stream.starts_with(COMMENT):
                self._skip_comment(stream)
            else:
                break

    def _skip_comment(self, stream: CharStream) -> None:
        """Consume a comment up to, not including, the next newline."""
        while (char := stream.peek()) is not None and char != "\n":
            stream.next()

    def _scan_ctrl(self, stream: CharStream) -> str:
        stream.next()  # \
        chars: list[str] = []
        while (char := stream.peek()) is not None and char not in END_OF_CONTROL:
            chars.append(char)
            stream.next()
        return "".join(chars)

    def _scan_heading(self, stream: CharStream) -> tuple[TokenCategory, str]:
        lineno, col = stream.lineno, stream.col
        level = 0
        while stream.peek() == HEADING_SIGIL:
            stream.next()
            level += 1

        if level > MAX_HEADING_LEVEL:
            raise ParseError("Too many heading symbols '#'", lineno, col, self._source_file)

        if stream.peek() == " ":
            stream.next()

        chars: list[str] = []
        while (char := stream.next()) is not None and char != "\n":
            chars.append(char)

        return TokenCategory.heading(level), "".join(chars).rstrip("\r")

    def _scan_delimited(self, stream: CharStream) -> str:
        """Scan ``[...]``, ``(...)`` or ``{...}``; the first closer always ends it."""
        lineno, col = stream.lineno, stream.col
        closer = DELIMITERS[stream.next()]  # type: ignore[index]

        chars: list[str] = []
        while True:
            char = stream.next()
            if char is None:
                raise ParseError.unexpected_eof(lineno, col, self._source_file)
            if char == closer:
                return "".join(chars)
            chars.append(char)

    def _scan_paragraph(self, stream: CharStream) -> str:
        """Scan plain text up to the next control character.

        A ``//`` that opens the paragraph or follows whitespace starts a
        comment; ``//`` inside a word (``http://``) is kept.
        """
        chars: list[str] = []
        while (char := stream.peek()) is not None and char not in CONTROL_CHARS:
            if stream.starts_with(COMMENT) and (not chars or chars[-1] in WHITESPACE):
                self._skip_comment(stream)
                continue
            chars.append(char)
            stream.next()
        return "".join(chars).rstrip("\t\n\r")
