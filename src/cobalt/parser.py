"""Token-dispatch parser producing a flat expression sequence.

The parser owns a ParseletRegistry mapping token categories to parselets.
Each step consumes one leading token, looks up its parselet and lets the
parselet consume whatever trailing tokens its rule needs. Adding a new
syntactic form means registering a new parselet; ``parse_one`` and
``parse_all`` never change.

Thread Safety:
Parser holds only an immutable registry and can be shared across threads.
Token streams are per-parse and must not be shared.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cobalt.errors import ParseError
from cobalt.parselets.registry import create_default_registry
from cobalt.utils.logger import get_logger

if TYPE_CHECKING:
    from cobalt.lexer import Tokenizer
    from cobalt.nodes import Expression
    from cobalt.parselets.registry import ParseletRegistry

logger = get_logger(__name__)


class Parser:
    """Parser for Cobalt token streams.

    Usage:
        >>> parser = Parser()
        >>> parser.parse_all(Tokenizer("# Hello\\nWorld"))
        (Heading(level=1, text='Hello'), Paragraph(text='World'))

    Categories without a registered parselet (by default PAREN, BRACE and the
    reserved ID and CLASS) never lead an expression; they are only consumed
    as trailing tokens by another parselet.

    """

    __slots__ = ("_registry",)

    def __init__(self, registry: ParseletRegistry | None = None) -> None:
        """Initialize parser.

        Args:
            registry: Parselet registry (uses the built-in grammar if None)
        """
        self._registry = registry if registry is not None else create_default_registry()

    @property
    def registry(self) -> ParseletRegistry:
        return self._registry

    def parse_one(self, tokens: Tokenizer) -> Expression | None:
        """Parse the next expression.

        Returns:
            The expression, or None once the token stream is exhausted.

        Raises:
            ParseError: If no parselet handles the leading token, or the
                parselet rejects the tokens that follow it
        """
        token = tokens.next()
        if token is None:
            return None

        parselet = self._registry.get(token.type)
        if parselet is None:
            raise ParseError(
                f"Could not parse near token {token.value}",
                token.lineno,
                token.col,
                token.source_file,
            )

        return parselet.parse(self, tokens, token)

    def parse_all(self, tokens: Tokenizer) -> tuple[Expression, ...]:
        """Parse expressions until the token stream is exhausted.

        Returns:
            Expressions in source order.
        """
        expressions: list[Expression] = []
        while (expression := self.parse_one(tokens)) is not None:
            expressions.append(expression)

        logger.debug("Parsed %d expressions", len(expressions))
        return tuple(expressions)
