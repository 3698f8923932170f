"""Text acquisition: local files, fetched pages, PDF and HTML conversion."""

from __future__ import annotations

import io
import logging
import os
import re
from pathlib import Path
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup
from pypdf import PdfReader

DEFAULT_TIMEOUT_SECONDS = 30
USER_AGENT = "Mozilla/5.0 (compatible; call-brief/1.0)"

LOGGER = logging.getLogger(__name__)

_PDF_URL_RE = re.compile(r"\.pdf(?:[?#]|$)", re.IGNORECASE)
_WP_TEXT_RE = re.compile(r"work\s*program(?:me)?", re.IGNORECASE)
_WP_HREF_RE = re.compile(r"work|wp|programme", re.IGNORECASE)
_BLANK_RUN_RE = re.compile(r"\n\s*\n+")


class SourceError(RuntimeError):
    """Raised when document text cannot be acquired."""


def request_timeout() -> float:
    return float(os.getenv("FETCH_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))


def fetch(url: str) -> requests.Response:
    """GET a URL or raise SourceError on network/HTTP failure."""
    try:
        response = requests.get(
            url,
            headers={"User-Agent": USER_AGENT, "Accept-Language": "en-GB,en;q=0.8"},
            timeout=request_timeout(),
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SourceError(f"Fetch failed for {url}: {exc}") from exc

    LOGGER.info("Fetched url=%s status=%s bytes=%s", url, response.status_code, len(response.content))
    return response


def html_to_text(html: str) -> str:
    """Visible page text with block boundaries kept as line breaks."""
    soup = BeautifulSoup(html or "", "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    text = soup.get_text("\n")
    return _BLANK_RUN_RE.sub("\n\n", text).strip()


def pdf_to_text(data: bytes) -> str:
    """Concatenate the extracted text of every PDF page."""
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as exc:  # pypdf raises KeyError/TypeError on malformed fonts
        raise SourceError(f"Could not read PDF: {exc}") from exc

    LOGGER.info("Extracted text from pdf pages=%s", len(pages))
    return "\n".join(pages)


def read_document(path: str | Path) -> str:
    """Load a local .pdf, .html/.htm or plain-text file as text."""
    path = Path(path)
    try:
        if path.suffix.lower() == ".pdf":
            return pdf_to_text(path.read_bytes())
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SourceError(f"Could not read {path}: {exc}") from exc

    if path.suffix.lower() in {".html", ".htm"}:
        return html_to_text(content)
    return content


def fetch_pdf_text(url: str) -> str:
    return pdf_to_text(fetch(url).content)


def find_work_programme_links(html: str, base_url: str) -> list[str]:
    """Absolute PDF links on a topic page that look like work programmes.

    A link qualifies when it points at a PDF and either its anchor text names
    a work programme or its URL mentions work/wp/programme.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    links: dict[str, None] = {}
    for anchor in soup.find_all("a", href=True):
        url = urljoin(base_url, anchor["href"].strip())
        if not url.startswith(("http://", "https://")) or not _PDF_URL_RE.search(url):
            continue
        label = anchor.get_text(" ", strip=True)
        if _WP_TEXT_RE.search(label) or _WP_HREF_RE.search(url):
            links.setdefault(url, None)
    return list(links)
