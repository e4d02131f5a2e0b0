"""Content record consumed by the static snapshot renderer.

Records arrive as JSON from the content editor, which uses camelCase keys
(``pageTitle``, ``metaData``, ``faqData`` …).  Every model accepts both the
camelCase alias and the snake_case field name.  All free-text fields are
optional: absent, ``null`` and empty values all render as nothing.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class _ContentModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class MetaData(_ContentModel):
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    canonical_url: Optional[str] = None


class Author(_ContentModel):
    name: Optional[str] = None
    description: Optional[str] = None


class TextBlock(_ContentModel):
    """A titled run of paragraphs (the before-table block and generic content blocks)."""

    title: Optional[str] = None
    paragraphs: Optional[List[Optional[str]]] = None


class Course(_ContentModel):
    title: Optional[str] = None
    school: Optional[str] = None
    price: Optional[Union[int, float]] = None
    duration: Optional[str] = None
    features: Optional[List[Optional[str]]] = None
    advantages: Optional[List[Optional[str]]] = None


class FaqItem(_ContentModel):
    question: Optional[str] = None
    answer: Optional[str] = None


class RenderableContent(_ContentModel):
    """Sections shared by the site-wide record and every auxiliary page."""

    author: Optional[Author] = None
    intro_text: Optional[str] = None
    before_table_block: Optional[TextBlock] = None
    courses: Optional[List[Course]] = None
    content_blocks: Optional[List[TextBlock]] = None
    faq_data: Optional[List[FaqItem]] = None

    @property
    def heading(self) -> str:
        return ""


class SitePage(RenderableContent):
    """An auxiliary page published under ``{public_root}/{slug}/index.html``."""

    id: str
    slug: str
    title: Optional[str] = None
    meta_data: MetaData = Field(default_factory=MetaData)

    @property
    def heading(self) -> str:
        return self.title or ""

    @field_validator("slug")
    @classmethod
    def _single_path_segment(cls, slug: str) -> str:
        """A slug is one URL-path segment; it doubles as the output folder name."""
        if not slug or slug.strip() != slug:
            raise ValueError("slug must be a non-empty path segment without surrounding whitespace")
        if "/" in slug or "\\" in slug or ".." in slug or slug == ".":
            raise ValueError(f"slug '{slug}' must not contain '/', '\\' or '..'")
        return slug


class SiteContent(RenderableContent):
    """The site-wide record: main page content plus the auxiliary pages."""

    page_title: Optional[str] = None
    meta_data: MetaData = Field(default_factory=MetaData)
    ad_disclosure_text: Optional[str] = None
    pages: List[SitePage] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_pages(self) -> "SiteContent":
        # Ids key the preview controls and slugs name the output folders
        for attr in ("id", "slug"):
            seen = set()
            for page in self.pages:
                value = getattr(page, attr)
                if value in seen:
                    raise ValueError(f"duplicate page {attr}: '{value}'")
                seen.add(value)
        return self

    @property
    def heading(self) -> str:
        return self.page_title or ""

    def find_page(self, page_id: str) -> Optional[SitePage]:
        for page in self.pages:
            if page.id == page_id:
                return page
        return None
