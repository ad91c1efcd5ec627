"""Hyperlink parselet.

Syntax:
    [text](href)

The bracket token supplies the link text and must be followed immediately
by a paren token supplying the target.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cobalt.errors import ParseError
from cobalt.nodes import Hyperlink
from cobalt.tokens import TokenCategory

if TYPE_CHECKING:
    from cobalt.lexer import Tokenizer
    from cobalt.parser import Parser
    from cobalt.tokens import Token


class HyperlinkParselet:
    """Parses ``[text](href)`` into a Hyperlink expression."""

    categories = frozenset({TokenCategory.BRACKET})

    def parse(self, parser: Parser, tokens: Tokenizer, token: Token) -> Hyperlink:
        """Consume the paren token that carries the link target.

        Raises:
            ParseError: If the tokens end after the bracket, or the next
                token is not a paren
        """
        target = tokens.next_or_fail()
        if target.type is not TokenCategory.PAREN:
            raise ParseError(
                f"Expected opening parenthesis '(' but got {target.value}",
                target.lineno,
                target.col,
                target.source_file,
            )
        return Hyperlink(token.value, target.value, location=token.location)
