"""Parselet protocol.

A parselet is the grammar rule for one token category. The parser consumes
a leading token, looks up the parselet registered for its category and hands
over control: the parselet pulls as many further tokens as its rule needs and
returns exactly one expression.

Example:
    from cobalt.nodes import Paragraph

    class ShoutParselet:
        categories = frozenset({TokenCategory.PARAGRAPH})

        def parse(self, parser, tokens, token):
            return Paragraph(token.value.upper(), location=token.location)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cobalt.lexer import Tokenizer
    from cobalt.nodes import Expression
    from cobalt.parser import Parser
    from cobalt.tokens import Token, TokenCategory


@runtime_checkable
class Parselet(Protocol):
    """Protocol for parselets.

    Attributes:
        categories: Token categories this parselet handles as a leading token

    Thread Safety:
        Parselets must be stateless; one instance serves every parse.

    """

    categories: frozenset[TokenCategory]

    def parse(self, parser: Parser, tokens: Tokenizer, token: Token) -> Expression:
        """Build one expression starting at ``token``.

        Args:
            parser: The driving parser, for sub-parses
            tokens: Token stream positioned just after ``token``
            token: The leading token (already consumed)

        Returns:
            The parsed expression.

        Raises:
            ParseError: If the following tokens do not match the rule
        """
        ...
