"""
Job posting fetch.

Downloads a posting page and reduces it to readable text: the title, the meta
description, and the first paragraphs of body text.
"""

from typing import Optional

import httpx
from bs4 import BeautifulSoup

from lettersmith.contexts.intake.extraction import SourceText
from lettersmith.contexts.intake.logger import _log_error, _log_success

DEFAULT_TIMEOUT_S = 20.0
DEFAULT_MAX_PARAGRAPHS = 80

FETCH_ERROR_TEMPLATE = "Unable to fetch job posting. Paste job text manually. (Error: {error})"


def html_to_job_text(html: str, max_paragraphs: int = DEFAULT_MAX_PARAGRAPHS) -> str:
    """
    Extract readable posting text from HTML.

    Combines the first <h1> (or the <title>), the meta description
    (or og:description), and the first non-empty <p> texts, separated by
    blank lines. Missing parts are skipped.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    title_tag = soup.find("h1")
    title = title_tag.get_text(strip=True) if title_tag else ""
    if not title and soup.title and soup.title.string:
        title = soup.title.string.strip()

    meta = soup.find("meta", attrs={"name": "description"}) or soup.find(
        "meta", attrs={"property": "og:description"}
    )
    meta_desc = (meta.get("content") or "").strip() if meta else ""

    paragraphs = []
    for p in soup.find_all("p"):
        text = p.get_text(" ", strip=True)
        if text:
            paragraphs.append(text)
        if len(paragraphs) >= max_paragraphs:
            break

    return "\n\n".join(part for part in [title, meta_desc, *paragraphs] if part)


def fetch_job_posting(
    url: str,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT_S,
    max_paragraphs: int = DEFAULT_MAX_PARAGRAPHS,
) -> SourceText:
    """
    Fetch a job posting URL and extract its text.

    Args:
        url: Posting URL
        client: Optional httpx client (tests pass one with a mock transport)
        timeout: Request timeout in seconds
        max_paragraphs: Paragraph cap for the extracted text

    Returns:
        SourceText; on network/HTTP failure, error is set to the
        "Unable to fetch job posting..." status message
    """
    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as owned:
                response = owned.get(url)
        else:
            response = client.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPError as e:
        _log_error(f"Fetch failed for {url}: {e}")
        return SourceText(origin=url, error=FETCH_ERROR_TEMPLATE.format(error=e))

    text = html_to_job_text(response.text, max_paragraphs=max_paragraphs)
    _log_success(f"Fetched {url} ({len(text)} chars)")
    return SourceText(text=text, origin=url)
