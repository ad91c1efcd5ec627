"""Parselet registry for token-category dispatch.

The registry maps token categories to the parselets that handle them, so a
new syntactic form is one parselet plus one ``register`` call; the parser's
dispatch loop never changes.

Thread Safety:
ParseletRegistry is immutable after creation. Safe to share.
Use ParseletRegistryBuilder for mutable construction.

Example:
    >>> builder = ParseletRegistryBuilder()
    >>> builder.register(HeadingParselet())
    >>> registry = builder.build()
    >>> registry.get(TokenCategory.HEADING_2)

"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cobalt.parselets.protocol import Parselet
    from cobalt.tokens import TokenCategory


class ParseletRegistry:
    """Immutable mapping from token category to parselet."""

    __slots__ = ("_parselets", "_by_category")

    def __init__(
        self,
        parselets: tuple[Parselet, ...],
        by_category: dict[TokenCategory, Parselet],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use ParseletRegistryBuilder to create instances.
        """
        self._parselets = parselets
        self._by_category = MappingProxyType(by_category)

    def get(self, category: TokenCategory) -> Parselet | None:
        """Get the parselet for a leading token category, if any."""
        return self._by_category.get(category)

    def has(self, category: TokenCategory) -> bool:
        return category in self._by_category

    @property
    def categories(self) -> frozenset[TokenCategory]:
        """All categories that can lead an expression."""
        return frozenset(self._by_category.keys())

    @property
    def parselets(self) -> tuple[Parselet, ...]:
        return self._parselets

    def __contains__(self, category: TokenCategory) -> bool:
        return self.has(category)

    def __len__(self) -> int:
        """Number of registered categories."""
        return len(self._by_category)


class ParseletRegistryBuilder:
    """Mutable builder for ParseletRegistry.

    Example:
        >>> builder = ParseletRegistryBuilder()
        >>> builder.register(CtrlParselet()).register(ParagraphParselet())
        >>> registry = builder.build()

    """

    __slots__ = ("_parselets", "_by_category")

    def __init__(self) -> None:
        self._parselets: list[Parselet] = []
        self._by_category: dict[TokenCategory, Parselet] = {}

    def register(self, parselet: Parselet) -> ParseletRegistryBuilder:
        """Register a parselet for every category it declares.

        Args:
            parselet: Object implementing the Parselet protocol

        Returns:
            Self for chaining

        Raises:
            TypeError: If the parselet does not declare ``categories``
            ValueError: If a category is already registered
        """
        if not hasattr(parselet, "categories"):
            msg = f"Parselet {type(parselet).__name__} missing 'categories' attribute"
            raise TypeError(msg)

        for category in parselet.categories:
            if category in self._by_category:
                existing = self._by_category[category]
                msg = f"Category {category.name} already registered by {type(existing).__name__}"
                raise ValueError(msg)

        for category in parselet.categories:
            self._by_category[category] = parselet

        self._parselets.append(parselet)
        return self

    def register_all(self, parselets: list[Parselet]) -> ParseletRegistryBuilder:
        for parselet in parselets:
            self.register(parselet)
        return self

    def build(self) -> ParseletRegistry:
        """Build immutable registry from registered parselets."""
        return ParseletRegistry(
            parselets=tuple(self._parselets),
            by_category=dict(self._by_category),
        )

    def __len__(self) -> int:
        """Number of registered parselets."""
        return len(self._parselets)


def create_registry_with_defaults() -> ParseletRegistryBuilder:
    """Create a builder pre-loaded with the built-in parselets.

    Use this to extend the default grammar with your own forms.

    Example:
        >>> builder = create_registry_with_defaults()
        >>> builder.register(MyParenParselet())
        >>> parser = Parser(builder.build())

    """
    from cobalt.parselets.builtins import (
        CtrlParselet,
        HeadingParselet,
        HyperlinkParselet,
        ParagraphParselet,
    )

    builder = ParseletRegistryBuilder()
    builder.register(HeadingParselet())
    builder.register(CtrlParselet())
    builder.register(ParagraphParselet())
    builder.register(HyperlinkParselet())
    return builder


_DEFAULT_REGISTRY: ParseletRegistry | None = None


def create_default_registry() -> ParseletRegistry:
    """Return the registry with the built-in grammar.

    Headings (all six levels), control sequences, paragraphs and hyperlinks.
    The registry is immutable, so one shared instance is returned.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY
