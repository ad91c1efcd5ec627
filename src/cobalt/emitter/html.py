"""HTML emitter using the StringBuilder pattern.

Walks the expression sequence once, accumulating separate head and body
buffers, then resolves the page title and stylesheet links and wraps
everything in a fixed document skeleton.

Thread Safety:
All per-emit state lives in an Html accumulator created fresh for each
emit() call. One HtmlEmitter can be shared across threads.

"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from cobalt.config import SiteConfig, TitleProtocol
from cobalt.errors import EmitError
from cobalt.nodes import Ctrl, Expression, Heading, Hyperlink, Paragraph
from cobalt.stringbuilder import StringBuilder

logger = logging.getLogger(__name__)

DOCUMENT_START = "<!DOCTYPE html>\n<html>\n<head>\n"
HEAD_END = "</head>\n<body>\n"
DOCUMENT_END = "</body>\n</html>\n"

DOWNLOAD_CLASS = "download"


def attr_escape(s: str) -> str:
    """Escape a value for a double-quoted attribute.

    Only the quote character is replaced; everything else is written as
    authored, matching how text content is passed through.
    """
    return s.replace('"', "&quot;")


def decorate(
    tag: str,
    attr: str,
    value: str,
    class_: str | None = None,
    id: str | None = None,
) -> str:
    """Render an opening tag with optional class and id.

    Attribute order is always class, id, then ``attr``:

        >>> decorate("img", "src", "a.png", "photo", "hero")
        '<img class="photo" id="hero" src="a.png">'
        >>> decorate("img", "src", "a.png")
        '<img src="a.png">'

    """
    sb = StringBuilder().append(f"<{tag}")
    if class_ is not None:
        sb.append(f' class="{attr_escape(class_)}"')
    if id is not None:
        sb.append(f' id="{attr_escape(id)}"')
    return sb.append(f' {attr}="{attr_escape(value)}">').build()


@dataclass(slots=True)
class Html:
    """Per-emit accumulator.

    ``site`` is fixed from configuration before the walk; ``page`` starts
    empty and is set by a ``pagename`` directive.

    """

    site: str
    page: str = ""
    head: StringBuilder = field(default_factory=StringBuilder)
    body: StringBuilder = field(default_factory=StringBuilder)

    def title(self, protocol: TitleProtocol) -> str:
        return f"<title>{protocol.format(self.site, self.page)}</title>\n"


class HtmlEmitter:
    """Emit a complete HTML document from Cobalt expressions.

    Usage:
        >>> emitter = HtmlEmitter(config)
        >>> emitter.emit([Paragraph("Hello")], "site")
        '<!DOCTYPE html>\\n<html>\\n<head>\\n<title></title>\\n...<p>Hello</p></body>\\n</html>\\n'

    Control sequences:
        ``pagename``  sets the page name used by the title protocol
        ``image``     ``<img src=...>`` with optional class and id
        ``script``    ``<script src=...></script>`` with optional class and id
        ``download``  ``<a class="download" href=...>Download</a>``; any
                      authored class is replaced, id is kept

    """

    __slots__ = ("_config",)

    def __init__(self, config: SiteConfig) -> None:
        self._config = config

    @property
    def config(self) -> SiteConfig:
        return self._config

    def emit(
        self,
        expressions: Iterable[Expression],
        stylesheet_root: str | Path = ".",
    ) -> str:
        """Emit an HTML document.

        Args:
            expressions: Parsed expressions in source order
            stylesheet_root: Directory the default stylesheet path is joined to

        Returns:
            HTML document string

        Raises:
            EmitError: On an unknown control keyword
            ConfigError: On an unknown title protocol
        """
        html = Html(site=self._config.site.name)

        count = 0
        for expression in expressions:
            self._emit_expression(expression, html)
            count += 1

        html.head.append(html.title(self._config.title_protocol))
        self._emit_stylesheets(html, stylesheet_root)

        logger.debug("Emitted page %r from %d expressions", html.page, count)

        return (
            StringBuilder()
            .append(DOCUMENT_START)
            .append(html.head.build())
            .append(HEAD_END)
            .append(html.body.build())
            .append(DOCUMENT_END)
            .build()
        )

    def _emit_expression(self, expression: Expression, html: Html) -> None:
        match expression:
            case Ctrl():
                self._emit_ctrl(expression, html)
            case Paragraph(text=text):
                html.body.append(f"<p>{text}</p>")
            case Hyperlink(text=text, href=href):
                html.body.append(f'<a href="{attr_escape(href)}">{text}</a>')
            case Heading(level=level, text=text):
                html.body.append(f"<h{level}>{text}</h{level}>\n")

    def _emit_ctrl(self, ctrl: Ctrl, html: Html) -> None:
        match ctrl.keyword:
            case "pagename":
                html.page = ctrl.argument
            case "image":
                html.body.append(decorate("img", "src", ctrl.argument, ctrl.class_, ctrl.id))
            case "script":
                html.body.append(decorate("script", "src", ctrl.argument, ctrl.class_, ctrl.id))
                html.body.append("</script>")
            case "download":
                html.body.append(decorate("a", "href", ctrl.argument, DOWNLOAD_CLASS, ctrl.id))
                html.body.append("Download</a>")
            case _:
                location = f" (line {ctrl.location.lineno})" if ctrl.location.lineno else ""
                raise EmitError(f"Invalid control sequence: {ctrl.keyword}{location}")

    def _emit_stylesheets(self, html: Html, stylesheet_root: str | Path) -> None:
        """Link the default stylesheet, then each external one in order."""
        style = self._config.style
        default = (Path(stylesheet_root) / style.default).as_posix()
        html.head.append(f'<link rel="stylesheet" href="{attr_escape(default)}">')
        for stylesheet in style.external:
            html.head.append(f'<link rel="stylesheet" href="{attr_escape(stylesheet)}">')
