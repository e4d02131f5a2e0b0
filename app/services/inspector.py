"""Crawler-eye view of a generated document.

Parses the document the way a search-engine bot would see it with scripting
disabled: header metadata plus the content of ``<noscript>``.
"""

from bs4 import BeautifulSoup
from markdownify import markdownify

from app.models.summary import DocumentSummary

_HEADING_TAGS = ["h1", "h2", "h3"]


def _extract_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    if title_tag:
        return title_tag.get_text(strip=True)
    return ""


def _extract_meta(soup: BeautifulSoup, name: str) -> str:
    meta = soup.find("meta", attrs={"name": name})
    if meta and meta.get("content"):
        return str(meta["content"]).strip()
    return ""


def _extract_canonical(soup: BeautifulSoup) -> str:
    link_tag = soup.find("link", rel="canonical")
    if link_tag and link_tag.get("href"):
        return str(link_tag["href"])
    return ""


def _noscript_fragment(soup: BeautifulSoup) -> BeautifulSoup:
    noscript = soup.find("noscript")
    if noscript is None:
        return BeautifulSoup("", "lxml")
    # Some parsers keep <noscript> content as raw text instead of elements
    if noscript.find(True) is None:
        markup = noscript.get_text()
    else:
        markup = noscript.decode_contents()
    return BeautifulSoup(markup, "lxml")


def inspect_document(html: str) -> DocumentSummary:
    """Summarise what a crawler indexes from *html*."""
    soup = BeautifulSoup(html, "lxml")
    fragment = _noscript_fragment(soup)

    body = fragment.find("body") or fragment
    content_markdown = markdownify(body.decode_contents(), heading_style="ATX").strip()

    return DocumentSummary(
        title=_extract_title(soup),
        description=_extract_meta(soup, "description"),
        canonical_url=_extract_canonical(soup),
        headings=[h.get_text(strip=True) for h in fragment.find_all(_HEADING_TAGS)],
        content_markdown=content_markdown,
        word_count=len(content_markdown.split()),
    )
