"""Paragraph parselet."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cobalt.nodes import Paragraph
from cobalt.tokens import TokenCategory

if TYPE_CHECKING:
    from cobalt.lexer import Tokenizer
    from cobalt.parser import Parser
    from cobalt.tokens import Token


class ParagraphParselet:
    categories = frozenset({TokenCategory.PARAGRAPH})

    def parse(self, parser: Parser, tokens: Tokenizer, token: Token) -> Paragraph:
        return Paragraph(token.value, location=token.location)
