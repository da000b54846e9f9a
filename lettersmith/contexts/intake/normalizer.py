"""
Source text normalizer for the Intake context.

Extracted resume and posting text arrives with typographic characters, mixed
line endings, and stray control characters depending on where it came from
(PDF extraction, HTML, clipboard). Normalize BEFORE tokenizing or loading into
an editing Document so offsets and term boundaries behave predictably.
"""

import re
import unicodedata

from lettersmith.utils.text_processing import normalize_line_breaks

SPACE_CHARS = "\u00a0\u202f"
ZERO_WIDTH_CHARS = "\u200b\u200c\u200d\u2060\ufeff"

# Applied after NFKC, which leaves these typographic characters in place
TYPOGRAPHY_TABLE = str.maketrans(
    {
        **dict.fromkeys(SPACE_CHARS, " "),
        **dict.fromkeys(ZERO_WIDTH_CHARS, None),
        "\u2018": "'",
        "\u2019": "'",
        "\u201c": '"',
        "\u201d": '"',
        "\u2013": "-",
        "\u2014": "--",
        "\u2022": "*",
        "\u00b7": "*",  # middle dot used as a bullet
        "\u2026": "...",
    }
)

# C0/C1 control characters except tab and newline
CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")


def normalize_unicode(text: str) -> str:
    """NFKC-normalize, then map quotes, dashes, bullets and odd spaces to ASCII."""
    return unicodedata.normalize("NFKC", text).translate(TYPOGRAPHY_TABLE)


def normalize_source_text(text: str) -> str:
    """
    Normalize extracted text for downstream use.

    Line breaks are unified before control characters are stripped, so a
    lone carriage return becomes a newline instead of disappearing.

    Args:
        text: Raw extracted text (None is treated as empty)

    Returns:
        Text with normalized unicode, \\n line breaks, and no control characters
    """
    if not text:
        return ""
    text = normalize_line_breaks(normalize_unicode(text))
    return CONTROL_CHARS.sub("", text)
