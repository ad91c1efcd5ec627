"""Heading parselet.

Syntax:
    # Title
    ### Section

The tokenizer has already measured the level and cut the text, so the rule
consumes nothing beyond the leading token.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cobalt.errors import ParseError
from cobalt.nodes import Heading
from cobalt.tokens import HEADING_CATEGORIES

if TYPE_CHECKING:
    from cobalt.lexer import Tokenizer
    from cobalt.parser import Parser
    from cobalt.tokens import Token


class HeadingParselet:
    """Parses HEADING_1 … HEADING_6 tokens into Heading expressions."""

    categories = HEADING_CATEGORIES

    def parse(self, parser: Parser, tokens: Tokenizer, token: Token) -> Heading:
        level = token.type.heading_level
        if level is None:
            raise ParseError(
                f"Expected heading, got token {token.value}",
                token.lineno,
                token.col,
                token.source_file,
            )
        return Heading(level, token.value, location=token.location)
