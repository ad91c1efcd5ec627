"""Tests for HtmlEmitter."""

from __future__ import annotations

import pytest

from cobalt.config import Site, SiteConfig, Style
from cobalt.emitter import Html, HtmlEmitter, decorate
from cobalt.errors import ConfigError, EmitError
from cobalt.nodes import Ctrl, Heading, Hyperlink, Paragraph


def make_config(
    *,
    name: str = "Acme",
    title: str | None = None,
    default: str = "style.css",
    external: tuple[str, ...] = (),
) -> SiteConfig:
    return SiteConfig(Site(name, title=title), Style(default, external=external))


def emit(expressions, **config) -> str:
    return HtmlEmitter(make_config(**config)).emit(expressions)


class TestDocument:
    def test_full_document(self) -> None:
        html = HtmlEmitter(make_config()).emit([Heading(1, "Hi"), Paragraph("Text")], "site")
        assert html == (
            "<!DOCTYPE html>\n<html>\n<head>\n"
            "<title></title>\n"
            '<link rel="stylesheet" href="site/style.css">'
            "</head>\n<body>\n"
            "<h1>Hi</h1>\n<p>Text</p>"
            "</body>\n</html>\n"
        )

    def test_empty_document(self) -> None:
        html = emit([])
        assert html.startswith("<!DOCTYPE html>\n<html>\n<head>\n")
        assert html.endswith("</head>\n<body>\n</body>\n</html>\n")

    def test_emit_is_deterministic(self) -> None:
        emitter = HtmlEmitter(make_config(title="site | page"))
        expressions = (Ctrl("pagename", "Home"), Paragraph("Hello"), Ctrl("image", "a.png", "c", "i"))
        assert emitter.emit(expressions) == emitter.emit(expressions)

    def test_state_does_not_leak_between_emits(self) -> None:
        emitter = HtmlEmitter(make_config())
        first = emitter.emit([Ctrl("pagename", "Home"), Paragraph("one")])
        second = emitter.emit([Paragraph("two")])
        assert "<title>Home</title>" in first
        assert "<title></title>" in second
        assert "one" not in second

    def test_accepts_generators(self) -> None:
        html = emit(Paragraph(t) for t in ("a", "b"))
        assert "<p>a</p><p>b</p>" in html


class TestTextExpressions:
    def test_paragraph(self) -> None:
        assert "<p>Hello world</p>" in emit([Paragraph("Hello world")])

    def test_hyperlink(self) -> None:
        assert '<a href="index.html">Home</a>' in emit([Hyperlink("Home", "index.html")])

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading(self, level: int) -> None:
        assert f"<h{level}>Title</h{level}>\n" in emit([Heading(level, "Title")])

    def test_text_is_passed_through(self) -> None:
        assert "<p>a <em>b</em> & c</p>" in emit([Paragraph("a <em>b</em> & c")])


class TestControlSequences:
    def test_image_with_class(self) -> None:
        assert '<img class="photo" src="banner.png">' in emit([Ctrl("image", "banner.png", class_="photo")])

    def test_image_minimal(self) -> None:
        html = emit([Ctrl("image", "banner.png")])
        assert '<img src="banner.png">' in html
        assert "class=" not in html
        assert "id=" not in html

    def test_image_with_id(self) -> None:
        assert '<img id="hero" src="banner.png">' in emit([Ctrl("image", "banner.png", id="hero")])

    def test_image_with_class_and_id(self) -> None:
        html = emit([Ctrl("image", "banner.png", class_="photo", id="hero")])
        assert '<img class="photo" id="hero" src="banner.png">' in html

    def test_script(self) -> None:
        assert '<script src="app.js"></script>' in emit([Ctrl("script", "app.js")])

    def test_script_with_class(self) -> None:
        html = emit([Ctrl("script", "app.js", class_="deferred")])
        assert '<script class="deferred" src="app.js"></script>' in html

    def test_download_forces_class(self) -> None:
        html = emit([Ctrl("download", "file.pdf", class_="ignored", id="brochure")])
        assert '<a class="download" id="brochure" href="file.pdf">Download</a>' in html
        assert "ignored" not in html

    def test_download_without_id(self) -> None:
        assert '<a class="download" href="file.pdf">Download</a>' in emit([Ctrl("download", "file.pdf")])

    def test_pagename_emits_nothing_in_body(self) -> None:
        html = emit([Ctrl("pagename", "Home", class_="x", id="y")])
        assert html.endswith("<body>\n</body>\n</html>\n")

    def test_unknown_keyword_fails(self) -> None:
        with pytest.raises(EmitError, match="Invalid control sequence: foo"):
            emit([Ctrl("foo", "x")])


class TestTitleProtocol:
    def test_default_is_page(self) -> None:
        html = emit([Ctrl("pagename", "Home"), Paragraph("Welcome")])
        assert "<title>Home</title>\n" in html

    def test_page_without_pagename_is_empty(self) -> None:
        assert "<title></title>" in emit([Paragraph("x")], title="page")

    def test_site(self) -> None:
        assert "<title>Acme</title>" in emit([Ctrl("pagename", "Home")], title="site")

    def test_site_page(self) -> None:
        assert "<title>Acme | Home</title>" in emit([Ctrl("pagename", "Home")], title="site | page")

    def test_page_site(self) -> None:
        assert "<title>Home | Acme</title>" in emit([Ctrl("pagename", "Home")], title="page | site")

    def test_last_pagename_wins(self) -> None:
        html = emit([Ctrl("pagename", "One"), Ctrl("pagename", "Two")])
        assert "<title>Two</title>" in html

    def test_invalid_protocol_fails(self) -> None:
        with pytest.raises(ConfigError, match="Invalid configuration sequence: page - site"):
            emit([Paragraph("x")], title="page - site")


class TestStylesheets:
    def test_default_stylesheet_joined_to_root(self) -> None:
        html = HtmlEmitter(make_config(default="css/main.css")).emit([], "/srv/site")
        assert '<link rel="stylesheet" href="/srv/site/css/main.css">' in html

    def test_default_root_is_relative(self) -> None:
        assert '<link rel="stylesheet" href="style.css">' in emit([])

    def test_external_stylesheets_in_order(self) -> None:
        html = emit([], external=("https://a.example/a.css", "https://b.example/b.css"))
        assert (
            '<link rel="stylesheet" href="style.css">'
            '<link rel="stylesheet" href="https://a.example/a.css">'
            '<link rel="stylesheet" href="https://b.example/b.css">'
        ) in html

    def test_stylesheets_follow_title(self) -> None:
        html = emit([])
        assert html.index("<title>") < html.index("<link")


class TestDecorate:
    def test_four_way_branch(self) -> None:
        assert decorate("img", "src", "a.png", "c", "i") == '<img class="c" id="i" src="a.png">'
        assert decorate("img", "src", "a.png", "c", None) == '<img class="c" src="a.png">'
        assert decorate("img", "src", "a.png", None, "i") == '<img id="i" src="a.png">'
        assert decorate("img", "src", "a.png") == '<img src="a.png">'

    def test_quotes_in_values_are_escaped(self) -> None:
        assert decorate("img", "src", 'a"b.png') == '<img src="a&quot;b.png">'

    def test_html_accumulator_defaults(self) -> None:
        html = Html(site="Acme")
        assert html.page == ""
        assert not html.head
        assert not html.body
