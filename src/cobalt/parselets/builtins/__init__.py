"""Built-in parselets."""

from cobalt.parselets.builtins.ctrl import CtrlParselet
from cobalt.parselets.builtins.heading import HeadingParselet
from cobalt.parselets.builtins.hyperlink import HyperlinkParselet
from cobalt.parselets.builtins.paragraph import ParagraphParselet

__all__ = [
    "CtrlParselet",
    "HeadingParselet",
    "HyperlinkParselet",
    "ParagraphParselet",
]
