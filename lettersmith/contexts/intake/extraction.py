"""
Resume/posting file extraction.

Reads plain text and PDF sources into SourceText. Failures never propagate:
they come back as an error status that the caller shows in place of the text,
so a bad upload leaves the rest of the tool usable.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pdfplumber

from lettersmith.contexts.intake.logger import _log_debug, _log_error, _log_info

TEXT_SUFFIXES = {".txt", ".md"}
PDF_SUFFIX = ".pdf"


@dataclass(frozen=True)
class SourceText:
    """
    Extracted source text.

    Attributes:
        text: Extracted text ("" on failure)
        origin: Where the text came from (file path or URL)
        error: Status message when extraction failed
    """

    text: str = ""
    origin: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def field_text(self) -> str:
        """Text to place in an input field: the extracted text, or the status message."""
        return self.text if self.ok else self.error


def extract_pdf_text(pdf_path: Path) -> str:
    """Extract text from every page, pages separated by a blank line."""
    with pdfplumber.open(pdf_path) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n\n".join(pages)


def read_source_file(path: Path) -> SourceText:
    """
    Read a resume or job posting file.

    .txt/.md and unknown suffixes are decoded as UTF-8; .pdf goes through
    pdfplumber.

    Args:
        path: File to read

    Returns:
        SourceText with text, or with error set ("Failed to parse PDF: ...",
        "Unable to read file: ...")
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == PDF_SUFFIX:
        try:
            text = extract_pdf_text(path)
        except Exception as e:
            _log_error(f"Failed to parse PDF {path.name}: {e}")
            return SourceText(origin=str(path), error=f"Failed to parse PDF: {e}")
        _log_info(f"Extracted {len(text)} chars from PDF {path.name}")
        return SourceText(text=text, origin=str(path))

    if suffix not in TEXT_SUFFIXES:
        _log_debug(f"Unknown suffix '{suffix}' for {path.name}; reading as text")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _log_error(f"Unable to read {path}: {e}")
        return SourceText(origin=str(path), error=f"Unable to read file: {e}")

    _log_info(f"Read {len(text)} chars from {path.name}")
    return SourceText(text=text, origin=str(path))
