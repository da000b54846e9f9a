"""
Intake Context

Responsibilities:
- Reads resume/posting files (text and PDF)
- Fetches job postings from URLs and reduces HTML to readable text
- Normalizes unicode, line breaks, and control characters

Owns: Raw source acquisition
Never: Interprets content (that's the targeting and templating contexts)
"""

from lettersmith.contexts.intake.extraction import SourceText, read_source_file
from lettersmith.contexts.intake.job_fetch import fetch_job_posting, html_to_job_text
from lettersmith.contexts.intake.normalizer import normalize_source_text

__all__ = [
    "SourceText",
    "read_source_file",
    "fetch_job_posting",
    "html_to_job_text",
    "normalize_source_text",
]
