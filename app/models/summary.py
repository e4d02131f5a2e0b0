from typing import List

from pydantic import BaseModel


class DocumentSummary(BaseModel):
    """What a search-engine crawler sees in a generated document."""

    title: str
    description: str
    canonical_url: str
    headings: List[str]
    content_markdown: str  # <noscript> fragment converted to Markdown
    word_count: int
