"""Parselets: one grammar rule per leading token category.

Provides:
- Parselet: protocol every grammar rule implements
- ParseletRegistry / ParseletRegistryBuilder: category → parselet dispatch table
- Built-in parselets for headings, paragraphs, hyperlinks and control sequences
"""

from cobalt.parselets.builtins import (
    CtrlParselet,
    HeadingParselet,
    HyperlinkParselet,
    ParagraphParselet,
)
from cobalt.parselets.protocol import Parselet
from cobalt.parselets.registry import (
    ParseletRegistry,
    ParseletRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)

__all__ = [
    "CtrlParselet",
    "HeadingParselet",
    "HyperlinkParselet",
    "ParagraphParselet",
    "Parselet",
    "ParseletRegistry",
    "ParseletRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
]
