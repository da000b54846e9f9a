"""Unit tests for the term tokenizer."""

import pytest

from lettersmith.contexts.targeting.tokenizer import Tokenizer, tokenize


@pytest.mark.unit
class TestTokenize:
    def test_lowercases_and_splits(self):
        assert tokenize("Senior Python Engineer") == ["senior", "python", "engineer"]

    def test_punctuation_becomes_whitespace(self):
        assert tokenize("billing,platform.python/go") == ["billing", "platform", "python", "go"]

    def test_strips_edge_symbols_but_keeps_inner(self):
        """Leading/trailing -#+ are trimmed; interior ones survive."""
        assert tokenize("C++ C# --remote-- full-stack #hiring") == [
            "c",
            "c",
            "remote",
            "full-stack",
            "hiring",
        ]

    def test_duplicates_kept_in_source_order(self):
        assert tokenize("python go python") == ["python", "go", "python"]

    def test_symbol_only_pieces_dropped(self):
        assert tokenize("--- +++ ### -#+") == []

    @pytest.mark.parametrize("text", ["", "   ", None, 42, ["a", "list"], object()])
    def test_non_text_is_empty(self, text):
        assert tokenize(text) == []

    def test_utf8_bytes_decoded(self):
        assert tokenize("Remote Role".encode("utf-8")) == ["remote", "role"]

    def test_undecodable_bytes_are_empty(self):
        assert tokenize(b"\xff\xfe\xfa") == []

    def test_no_empty_tokens(self):
        text = "  -- a , ++ b #  \n\t c-- ... "
        tokens = tokenize(text)
        assert all(tokens)
        assert tokens == ["a", "b", "c"]


@pytest.mark.unit
class TestTokenizerModes:
    def test_ascii_mode_drops_accented_letters(self):
        assert Tokenizer().tokenize("café") == ["caf"]

    def test_unicode_mode_keeps_accented_letters(self):
        assert Tokenizer(ascii_only=False).tokenize("Café crème") == ["café", "crème"]

    def test_unicode_mode_treats_underscore_as_separator(self):
        assert Tokenizer(ascii_only=False).tokenize("snake_case") == ["snake", "case"]

    def test_callable(self):
        tokenizer = Tokenizer()
        assert tokenizer("Go Rust") == tokenizer.tokenize("Go Rust") == ["go", "rust"]

    def test_config_dict(self):
        assert Tokenizer(ascii_only=False).get_config_dict() == {"ascii_only": False}
