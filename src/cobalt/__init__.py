r"""Cobalt: a small markup language compiled to HTML.

Compilation runs in three eager stages: the tokenizer turns source text into
a flat token sequence, the parser dispatches each leading token to a
parselet to build a flat expression sequence, and the emitter renders a
complete HTML document from it.

Quick Start:
    >>> from cobalt import SiteConfig, compile_source
    >>> config = SiteConfig.from_dict({
    ...     "site": {"name": "Acme", "title": "page | site"},
    ...     "style": {"default": "style.css"},
    ... })
    >>> html = compile_source("\\pagename{Home}\n# Welcome\n[About](about.html)", config)
    >>> "<title>Home | Acme</title>" in html
    True

    >>> # Or keep a compiler around for many pages
    >>> from cobalt import Cobalt
    >>> compiler = Cobalt(config)
    >>> html = compiler("\\image(photo){banner.png}")

Custom grammar:
    >>> from cobalt import Cobalt, create_registry_with_defaults
    >>> builder = create_registry_with_defaults()
    >>> builder.register(MyParenParselet())
    >>> compiler = Cobalt(config, registry=builder.build())
"""

from collections.abc import Iterable
from pathlib import Path

from cobalt.config import (
    CONFIG_FILENAME,
    Site,
    SiteConfig,
    Style,
    TitleProtocol,
    find_config,
    load_config,
)
from cobalt.emitter import HtmlEmitter
from cobalt.errors import CobaltError, ConfigError, EmitError, ParseError
from cobalt.lexer import CharStream, Tokenizer
from cobalt.location import SourceLocation
from cobalt.nodes import Ctrl, Expression, Heading, Hyperlink, Paragraph
from cobalt.parselets import (
    Parselet,
    ParseletRegistry,
    ParseletRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from cobalt.parser import Parser
from cobalt.tokens import Token, TokenCategory

__version__ = "0.1.0"


def tokenize(source: str, source_file: str | None = None) -> tuple[Token, ...]:
    """Tokenize Cobalt source.

    Raises:
        ParseError: On malformed headings or unterminated delimiters
    """
    return Tokenizer(source, source_file).collect_all()


def parse(
    source: str,
    *,
    source_file: str | None = None,
    registry: ParseletRegistry | None = None,
) -> tuple[Expression, ...]:
    """Parse Cobalt source into expressions.

    Args:
        source: Cobalt source text
        source_file: Optional source file path for error messages
        registry: Custom parselet registry (uses the built-in grammar if None)

    Returns:
        Expressions in source order

    Example:
        >>> parse("[Home](index.html)")
        (Hyperlink(text='Home', href='index.html'),)
    """
    return Parser(registry).parse_all(Tokenizer(source, source_file))


def emit(
    expressions: Iterable[Expression],
    config: SiteConfig,
    stylesheet_root: str | Path = ".",
) -> str:
    """Emit an HTML document from parsed expressions.

    Raises:
        EmitError: On an unknown control keyword
        ConfigError: On an unknown title protocol
    """
    return HtmlEmitter(config).emit(expressions, stylesheet_root)


def compile_source(
    source: str,
    config: SiteConfig,
    *,
    stylesheet_root: str | Path = ".",
    source_file: str | None = None,
    registry: ParseletRegistry | None = None,
) -> str:
    """Tokenize, parse and emit in one call.

    Raises:
        CobaltError: From whichever stage fails first
    """
    expressions = parse(source, source_file=source_file, registry=registry)
    return emit(expressions, config, stylesheet_root)


class Cobalt:
    """Compiler bound to one site configuration.

    Usage:
        >>> compiler = Cobalt(config, stylesheet_root="site")
        >>> html = compiler("# Hello")

        >>> # Access the expressions
        >>> compiler.parse("# Heading")[0].level
        1

    Thread Safety:
        Holds only immutable state (config, registry). Safe to share.

    """

    __slots__ = ("_emitter", "_parser", "_stylesheet_root")

    def __init__(
        self,
        config: SiteConfig,
        *,
        registry: ParseletRegistry | None = None,
        stylesheet_root: str | Path = ".",
    ) -> None:
        self._parser = Parser(registry)
        self._emitter = HtmlEmitter(config)
        self._stylesheet_root = stylesheet_root

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Compile source text to an HTML document."""
        return self.emit(self.parse(source, source_file=source_file))

    def parse(self, source: str, *, source_file: str | None = None) -> tuple[Expression, ...]:
        return self._parser.parse_all(Tokenizer(source, source_file))

    def emit(self, expressions: Iterable[Expression]) -> str:
        return self._emitter.emit(expressions, self._stylesheet_root)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "tokenize",
    "parse",
    "emit",
    "compile_source",
    "Cobalt",
    # Tokenizer
    "CharStream",
    "Tokenizer",
    "Token",
    "TokenCategory",
    # Expressions
    "Expression",
    "Ctrl",
    "Paragraph",
    "Hyperlink",
    "Heading",
    # Parser
    "Parser",
    "Parselet",
    "ParseletRegistry",
    "ParseletRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    # Emitter
    "HtmlEmitter",
    # Configuration
    "CONFIG_FILENAME",
    "Site",
    "SiteConfig",
    "Style",
    "TitleProtocol",
    "find_config",
    "load_config",
    # Errors
    "CobaltError",
    "ConfigError",
    "EmitError",
    "ParseError",
    # Location
    "SourceLocation",
]
