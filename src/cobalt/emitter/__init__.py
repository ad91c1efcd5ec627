"""HTML emission for Cobalt expression sequences."""

from cobalt.emitter.html import Html, HtmlEmitter, decorate

__all__ = ["Html", "HtmlEmitter", "decorate"]
