"""
Term tokenization for resume/job vocabulary matching.

Pipeline order:
1. Coerce input to text (bytes decoded as UTF-8, anything else is empty)
2. Lowercase
3. Replace characters outside the allowed set with whitespace
4. Split on whitespace runs
5. Strip leading/trailing hyphen, hash, plus
6. Drop empty pieces

Length and stopword filtering happen downstream in the frequency index, so
the token stream keeps every occurrence in source order.

Usage:
    from lettersmith.contexts.targeting.tokenizer import Tokenizer

    tokenizer = Tokenizer()
    tokens = tokenizer.tokenize("C++ and C# developer, 5+ years")
    # ['c', 'and', 'c', 'developer', '5', 'years']
"""

import re
from typing import Any

# Allowed: ASCII letters, digits, whitespace, hyphen, hash, plus
_ASCII_DISALLOWED = re.compile(r"[^a-z0-9\s\-#+]")

# Allowed: any Unicode letter or digit, whitespace, hyphen, hash, plus
_UNICODE_DISALLOWED = re.compile(r"[^\w\s\-#+]|_")

_EDGE_CHARS = "-#+"


def _coerce_text(text: Any) -> str:
    """Return text as str; undecodable or non-text input becomes empty."""
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8")
        except UnicodeDecodeError:
            return ""
    return ""


class Tokenizer:
    """
    Normalizes raw text into an ordered sequence of candidate terms.

    The tokenizer is callable, so it can be passed anywhere a
    ``Callable[[str], list[str]]`` is expected.
    """

    def __init__(self, ascii_only: bool = True):
        """
        Initialize tokenizer.

        Args:
            ascii_only: Keep only ASCII letters/digits (default).
                        False admits any Unicode letter or digit.
        """
        self.ascii_only = ascii_only
        self._disallowed = _ASCII_DISALLOWED if ascii_only else _UNICODE_DISALLOWED

    def tokenize(self, text: Any) -> list[str]:
        """
        Tokenize text into normalized terms.

        Never raises: None, non-string, and undecodable input yield [].

        Returns:
            List of tokens in first-appearance order, duplicates retained
        """
        text = _coerce_text(text)
        if not text:
            return []

        cleaned = self._disallowed.sub(" ", text.lower())

        tokens = []
        for piece in cleaned.split():
            piece = piece.strip(_EDGE_CHARS)
            if piece:
                tokens.append(piece)
        return tokens

    def __call__(self, text: Any) -> list[str]:
        return self.tokenize(text)

    def get_config_dict(self) -> dict:
        """Return tokenizer settings as a dictionary."""
        return {"ascii_only": self.ascii_only}


_DEFAULT_TOKENIZER = Tokenizer()


def tokenize(text: Any) -> list[str]:
    """Tokenize with the default (ASCII) tokenizer."""
    return _DEFAULT_TOKENIZER.tokenize(text)
