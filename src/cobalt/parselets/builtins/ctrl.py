r"""Control sequence parselet.

Syntax:
    \keyword{argument}
    \keyword(class){argument}
    \keyword[id]{argument}
    \keyword(class)[id]{argument}
    \keyword[id](class){argument}

Class and id are optional and may come in either order; if one is given
more than once the last value wins. The brace argument is mandatory and ends
the sequence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cobalt.errors import ParseError
from cobalt.nodes import Ctrl
from cobalt.tokens import TokenCategory

if TYPE_CHECKING:
    from cobalt.lexer import Tokenizer
    from cobalt.parser import Parser
    from cobalt.tokens import Token


class CtrlParselet:
    """Parses ``\\keyword(class)[id]{argument}`` into a Ctrl expression."""

    categories = frozenset({TokenCategory.CTRL})

    def parse(self, parser: Parser, tokens: Tokenizer, token: Token) -> Ctrl:
        """Collect class, id and argument tokens following the keyword.

        Raises:
            ParseError: If a token other than paren, bracket or brace follows
                the keyword, or the tokens end before the brace argument
        """
        class_: str | None = None
        id_: str | None = None

        while (t := tokens.next()) is not None:
            match t.type:
                case TokenCategory.PAREN:
                    class_ = t.value
                case TokenCategory.BRACKET:
                    id_ = t.value
                case TokenCategory.BRACE:
                    return Ctrl(token.value, t.value, class_, id_, location=token.location)
                case _:
                    raise ParseError(
                        "Expected opening brace '{', bracket '[', or parenthesis '(', "
                        f"but got {t.value}",
                        t.lineno,
                        t.col,
                        t.source_file,
                    )

        raise ParseError(
            f"Could not parse near token {token.value}",
            token.lineno,
            token.col,
            token.source_file,
        )
