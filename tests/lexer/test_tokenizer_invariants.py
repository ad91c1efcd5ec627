"""Property-based tests for tokenizer invariants using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from cobalt.errors import ParseError
from cobalt.lexer import Tokenizer
from cobalt.lexer.charsets import END_OF_CONTROL
from cobalt.tokens import HEADING_CATEGORIES, TokenCategory

# Everything the grammar reacts to, plus ordinary text
cobalt_text = st.text(alphabet="ab \t\n\\#[](){}", max_size=200)

# No heading markers or openers, so tokenizing can never fail
safe_text = st.text(alphabet="ab \t\n\\)]}", max_size=200)


def try_tokenize(source: str) -> Tokenizer | None:
    try:
        return Tokenizer(source)
    except ParseError:
        return None


class TestTermination:
    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_any_text_tokenizes_or_raises_parse_error(self, source: str) -> None:
        """Tokenizing terminates with tokens or a ParseError, nothing else."""
        try_tokenize(source)

    @given(safe_text)
    @settings(max_examples=100)
    def test_text_without_openers_never_fails(self, source: str) -> None:
        Tokenizer(source)


class TestCoverage:
    @given(cobalt_text)
    @settings(max_examples=200)
    def test_token_values_are_source_slices(self, source: str) -> None:
        """Without comments, every token value is a contiguous slice of the source."""
        tokens = try_tokenize(source)
        if tokens is None:
            return
        for token in tokens.collect_all():
            assert token.value in source

    @given(cobalt_text)
    @settings(max_examples=200)
    def test_tokens_are_in_source_order(self, source: str) -> None:
        tokens = try_tokenize(source)
        if tokens is None:
            return
        positions = [(t.lineno, t.col) for t in tokens.collect_all()]
        assert positions == sorted(positions)
        assert len(set(positions)) == len(positions)

    @given(cobalt_text)
    @settings(max_examples=100)
    def test_non_separator_source_yields_tokens(self, source: str) -> None:
        tokens = try_tokenize(source)
        if tokens is None:
            return
        if source.strip("\t\n"):
            assert len(tokens) > 0


class TestTokenShapes:
    @given(cobalt_text)
    @settings(max_examples=200)
    def test_values_respect_their_terminators(self, source: str) -> None:
        tokens = try_tokenize(source)
        if tokens is None:
            return
        closers = {
            TokenCategory.BRACKET: "]",
            TokenCategory.PAREN: ")",
            TokenCategory.BRACE: "}",
        }
        for token in tokens.collect_all():
            if token.type is TokenCategory.CTRL:
                assert not set(token.value) & END_OF_CONTROL
            elif token.type in closers:
                assert closers[token.type] not in token.value
            elif token.type in HEADING_CATEGORIES:
                assert "\n" not in token.value
            elif token.type is TokenCategory.PARAGRAPH:
                assert token.value
                assert not set(token.value) & {"\\", "#", "["}

    @given(cobalt_text)
    @settings(max_examples=100)
    def test_reserved_categories_never_produced(self, source: str) -> None:
        tokens = try_tokenize(source)
        if tokens is None:
            return
        for token in tokens.collect_all():
            assert token.type not in (TokenCategory.ID, TokenCategory.CLASS)

    @given(st.integers(min_value=7, max_value=20), st.text(alphabet="ab ", max_size=10))
    def test_more_than_six_heading_symbols_always_fails(self, count: int, text: str) -> None:
        try:
            Tokenizer("#" * count + text)
        except ParseError as e:
            assert "Too many heading symbols" in str(e)
        else:
            raise AssertionError("expected ParseError")
