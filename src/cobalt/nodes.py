"""Typed expression nodes for Cobalt.

Parsing produces a flat, source-ordered tuple of these nodes; the emitter
consumes it. All nodes are frozen dataclasses with slots, so they can be
shared across threads and used in ``match`` statements.

Node Hierarchy:
Node (base)
├── Ctrl         \\keyword(class)[id]{argument}
├── Paragraph    plain text
├── Hyperlink    [text](href)
└── Heading      # text

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from cobalt.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all expression nodes."""

    location: SourceLocation = field(
        default_factory=SourceLocation.unknown, repr=False, compare=False, kw_only=True
    )


@dataclass(frozen=True, slots=True)
class Ctrl(Node):
    """Control sequence (directive).

    Cobalt: ``\\image(photo)[hero]{banner.png}``

    ``class_`` and ``id`` are optional decorations; the emitter decides which
    keywords honour them.

    """

    keyword: str
    argument: str
    class_: str | None = None
    id: str | None = None


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph of plain text.

    HTML: <p>text</p>

    """

    text: str


@dataclass(frozen=True, slots=True)
class Hyperlink(Node):
    """Hyperlink.

    Cobalt: ``[text](href)``
    HTML: <a href="href">text</a>

    """

    text: str
    href: str


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Heading, level 1 to 6.

    Cobalt: ``## text``
    HTML: <h2>text</h2>

    """

    level: int
    text: str


Expression: TypeAlias = Ctrl | Paragraph | Hyperlink | Heading
