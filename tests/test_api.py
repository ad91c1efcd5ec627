"""Tests for the public API: tokenize, parse, emit, compile_source, Cobalt."""

import pytest

import cobalt
from cobalt import (
    Cobalt,
    Ctrl,
    Heading,
    Hyperlink,
    Paragraph,
    SiteConfig,
    TokenCategory,
    compile_source,
    emit,
    parse,
    tokenize,
)
from cobalt.errors import CobaltError, EmitError, ParseError

SOURCE = """\\pagename{Home}
// The landing page
# Welcome
Glad you are here.
[About](about.html)
\\image(photo)[hero]{banner.png}
"""


@pytest.fixture
def config() -> SiteConfig:
    return SiteConfig.from_dict(
        {
            "site": {"name": "Acme", "title": "site | page"},
            "style": {"default": "style.css"},
        }
    )


class TestPipeline:
    def test_tokenize(self) -> None:
        tokens = tokenize("[Home](index.html)")
        assert [t.type for t in tokens] == [TokenCategory.BRACKET, TokenCategory.PAREN]

    def test_parse(self) -> None:
        assert parse(SOURCE) == (
            Ctrl("pagename", "Home"),
            Heading(1, "Welcome"),
            Paragraph("Glad you are here."),
            Hyperlink("About", "about.html"),
            Ctrl("image", "banner.png", class_="photo", id="hero"),
        )

    def test_emit(self, config: SiteConfig) -> None:
        html = emit(parse(SOURCE), config)
        assert "<title>Acme | Home</title>" in html
        assert "<h1>Welcome</h1>\n<p>Glad you are here.</p>" in html
        assert '<a href="about.html">About</a>' in html
        assert '<img class="photo" id="hero" src="banner.png">' in html

    def test_compile_source_matches_stages(self, config: SiteConfig) -> None:
        assert compile_source(SOURCE, config) == emit(parse(SOURCE), config)

    def test_compile_source_stylesheet_root(self, config: SiteConfig) -> None:
        html = compile_source("x", config, stylesheet_root="assets")
        assert 'href="assets/style.css"' in html

    def test_pagename_sets_title(self) -> None:
        config = SiteConfig.from_dict({"site": {"name": "Acme", "title": "page"}, "style": {"default": "s.css"}})
        html = compile_source("\\pagename{Home}\nWelcome", config)
        assert "<title>Home</title>" in html
        assert "<p>Welcome</p>" in html

    def test_unknown_control_keyword(self, config: SiteConfig) -> None:
        with pytest.raises(EmitError, match="Invalid control sequence: foo"):
            compile_source("\\foo{x}", config)

    def test_errors_share_a_base(self, config: SiteConfig) -> None:
        for source in ("[x", "\\foo{x}", "####### x", "(x)"):
            with pytest.raises(CobaltError):
                compile_source(source, config)

    def test_source_file_in_errors(self, config: SiteConfig) -> None:
        with pytest.raises(ParseError, match="index.cb:1:1"):
            compile_source("(stray)", config, source_file="index.cb")


class TestCobalt:
    def test_call(self, config: SiteConfig) -> None:
        compiler = Cobalt(config)
        assert compiler(SOURCE) == compile_source(SOURCE, config)

    def test_parse_and_emit(self, config: SiteConfig) -> None:
        compiler = Cobalt(config, stylesheet_root="root")
        expressions = compiler.parse("# Heading")
        assert expressions[0].level == 1
        assert 'href="root/style.css"' in compiler.emit(expressions)

    def test_reusable(self, config: SiteConfig) -> None:
        compiler = Cobalt(config)
        first = compiler("\\pagename{One}")
        second = compiler("\\pagename{Two}")
        assert "<title>Acme | One</title>" in first
        assert "<title>Acme | Two</title>" in second


class TestExports:
    def test_all_names_resolve(self) -> None:
        for name in cobalt.__all__:
            assert hasattr(cobalt, name), name
