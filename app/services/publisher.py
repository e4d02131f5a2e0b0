"""Export helpers: target paths, publishing instructions and the ZIP bundle.

The generated files follow a hosting convention shared with the static-file
server: the main document replaces ``index.html`` at the repository root and
every auxiliary page goes to ``{public_root}/{slug}/index.html``.  Nothing
here writes to disk; callers receive strings, models or archive bytes.
"""

import io
import json
import logging
import zipfile
from typing import List, Optional

from app.config import settings
from app.models.content import SiteContent, SitePage
from app.models.export_response import ExportResponse, GeneratedDocument, InstructionSection
from app.services.document import render_main_document, render_page_document, resolve_canonical_url

logger = logging.getLogger(__name__)

FILENAME = "index.html"
MAIN_DOCUMENT_ID = "main"

# Slugs listed in the folder preview before it is cut short
_FOLDER_PREVIEW_LIMIT = 3


class PageNotFoundError(LookupError):
    """Raised when a page id does not match any auxiliary page of the record."""

    def __init__(self, page_id: str):
        super().__init__(f"Page '{page_id}' not found.")
        self.page_id = page_id


def document_path(page: Optional[SitePage] = None) -> str:
    """Return where the document for *page* (or the main page) is published."""
    if page is None:
        return FILENAME
    return f"{settings.PUBLIC_ROOT}/{page.slug}/{FILENAME}"


def get_page(content: SiteContent, page_id: str) -> SitePage:
    page = content.find_page(page_id)
    if page is None:
        raise PageNotFoundError(page_id)
    return page


def render_document(content: SiteContent, page_id: Optional[str] = None) -> str:
    """Render the main document, or the auxiliary page *page_id* when given.

    Raises:
        PageNotFoundError: if *page_id* matches no page.
    """
    if page_id is None:
        return render_main_document(content)
    return render_page_document(get_page(content, page_id), content)


def build_main_document(content: SiteContent) -> GeneratedDocument:
    meta = content.meta_data
    return GeneratedDocument(
        id=MAIN_DOCUMENT_ID,
        kind="main",
        path=document_path(),
        filename=FILENAME,
        canonical_url=resolve_canonical_url(content),
        title_length=len(meta.title or ""),
        description_length=len(meta.description or ""),
        has_static_content=True,
        html=render_main_document(content),
    )


def build_page_document(page: SitePage, content: SiteContent) -> GeneratedDocument:
    meta = page.meta_data
    return GeneratedDocument(
        id=page.id,
        kind="page",
        path=document_path(page),
        filename=FILENAME,
        canonical_url=resolve_canonical_url(content, page),
        title_length=len(meta.title or ""),
        description_length=len(meta.description or ""),
        has_static_content=True,
        html=render_page_document(page, content),
    )


def folder_preview(content: SiteContent) -> List[str]:
    """Return the ``public/`` folder layout shown to the user, truncated after three pages."""
    if not content.pages:
        return []
    lines = [f"{settings.PUBLIC_ROOT}/"]
    for page in content.pages[:_FOLDER_PREVIEW_LIMIT]:
        lines.append(f"  {page.slug}/{FILENAME}")
    if len(content.pages) > _FOLDER_PREVIEW_LIMIT:
        lines.append("  ... и другие")
    return lines


def publishing_instructions(content: SiteContent) -> List[InstructionSection]:
    """Return the human-readable publishing steps for *content*."""
    sections = [
        InstructionSection(
            title="Главная страница",
            steps=[
                f"Скачайте {FILENAME}",
                "Замените файл в корне репозитория",
                "Сделайте git commit и push",
            ],
        )
    ]
    if content.pages:
        example = content.pages[0].slug
        sections.append(
            InstructionSection(
                title="Дополнительные страницы",
                steps=[
                    f"Создайте папку {settings.PUBLIC_ROOT}/[slug]/ для каждой страницы",
                    f"Скачайте {FILENAME} и положите в эту папку",
                    "Сделайте git commit и push",
                ],
                note=(
                    f"Пример: для страницы /{example} создайте "
                    f"{settings.PUBLIC_ROOT}/{example}/{FILENAME}"
                ),
            )
        )
    sections.append(
        InstructionSection(
            title="После публикации",
            steps=[
                "Запросите переиндексацию в Яндекс.Вебмастере или Google Search Console",
            ],
            note="Изменения появятся в поиске через несколько дней.",
        )
    )
    return sections


def build_export(content: SiteContent) -> ExportResponse:
    """Render every document of *content* together with the publishing instructions."""
    documents = [build_main_document(content)]
    documents.extend(build_page_document(page, content) for page in content.pages)
    logger.info("Generated %d document(s)", len(documents))
    return ExportResponse(
        documents=documents,
        folder_preview=folder_preview(content),
        instructions=publishing_instructions(content),
    )


def build_bundle(content: SiteContent) -> bytes:
    """Return a ZIP archive holding every document at its publish path.

    The archive holds:
    - ``index.json`` – id, path and canonical URL of each document.
    - ``index.html`` – the main page.
    - ``<public_root>/<slug>/index.html`` – one file per auxiliary page.
    """
    export = build_export(content)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        index = {
            "documents": [
                {"id": d.id, "path": d.path, "canonical_url": d.canonical_url}
                for d in export.documents
            ],
        }
        zf.writestr("index.json", json.dumps(index, ensure_ascii=False, indent=2))
        for document in export.documents:
            zf.writestr(document.path, document.html)
    return buffer.getvalue()
