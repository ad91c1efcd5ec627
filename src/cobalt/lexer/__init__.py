"""Character-level tokenizer for Cobalt source.

Architecture:
lexer/
├── __init__.py          # Re-exports CharStream, Tokenizer
├── charsets.py          # Character classes used by the scan
├── charstream.py        # CharStream (peek / look_ahead / next)
└── core.py              # Tokenizer (eager scan + token stream)

Usage:
    >>> from cobalt.lexer import Tokenizer
    >>> Tokenizer("\\\\pagename{Home}").collect_all()
    (Token(CTRL, 'pagename', 1:1), Token(BRACE, 'Home', 1:10))

"""

from cobalt.lexer.charstream import CharStream
from cobalt.lexer.core import Tokenizer

__all__ = ["CharStream", "Tokenizer"]
