"""Generation endpoints: render, export, download and inspect SEO documents."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.models.content import SiteContent
from app.models.export_response import ExportResponse, GeneratedDocument
from app.models.summary import DocumentSummary
from app.services.inspector import inspect_document
from app.services.publisher import (
    FILENAME,
    PageNotFoundError,
    build_bundle,
    build_export,
    build_main_document,
    build_page_document,
    get_page,
    render_document,
)

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/seo-html", tags=["SEO HTML"])


@router.post(
    "/main",
    response_model=GeneratedDocument,
    summary="Render the main page document",
)
@limiter.limit(settings.RATE_LIMIT)
async def main_document(request: Request, body: SiteContent) -> GeneratedDocument:
    logger.info("Main document requested", extra={"pages": len(body.pages)})
    return build_main_document(body)


@router.post(
    "/pages/{page_id}",
    response_model=GeneratedDocument,
    summary="Render one auxiliary page document",
)
@limiter.limit(settings.RATE_LIMIT)
async def page_document(request: Request, page_id: str, body: SiteContent) -> GeneratedDocument:
    logger.info("Page document requested", extra={"page_id": page_id})
    try:
        page = get_page(body, page_id)
    except PageNotFoundError as exc:
        logger.warning("Unknown page id: %s", page_id)
        raise HTTPException(status_code=404, detail=str(exc))
    return build_page_document(page, body)


@router.post(
    "/export",
    response_model=ExportResponse,
    summary="Render every document with publishing instructions",
)
@limiter.limit(settings.RATE_LIMIT)
async def export(request: Request, body: SiteContent) -> ExportResponse:
    logger.info("Export requested", extra={"pages": len(body.pages)})
    return build_export(body)


@router.post(
    "/download",
    summary="Download one document as index.html",
    description=(
        "Returns the main page document as a `text/html` attachment named "
        "`index.html`.  Pass `?page_id=` to download an auxiliary page instead; "
        "it belongs in `public/<slug>/index.html`."
    ),
)
@limiter.limit(settings.RATE_LIMIT)
async def download(
    request: Request,
    body: SiteContent,
    page_id: Optional[str] = Query(default=None, description="Auxiliary page id; omit for the main page."),
) -> Response:
    html = _render_or_404(body, page_id)
    return Response(
        content=html,
        media_type="text/html",
        headers={"Content-Disposition": f'attachment; filename="{FILENAME}"'},
    )


@router.post(
    "/bundle",
    summary="Download every document as a ZIP archive",
)
@limiter.limit(settings.RATE_LIMIT)
async def bundle(request: Request, body: SiteContent) -> Response:
    logger.info("Bundle requested", extra={"pages": len(body.pages)})
    return Response(
        content=build_bundle(body),
        media_type="application/zip",
        headers={"Content-Disposition": 'attachment; filename="seo-html.zip"'},
    )


@router.post(
    "/inspect",
    response_model=DocumentSummary,
    summary="Show what a crawler sees in a generated document",
)
@limiter.limit(settings.RATE_LIMIT)
async def inspect(
    request: Request,
    body: SiteContent,
    page_id: Optional[str] = Query(default=None, description="Auxiliary page id; omit for the main page."),
) -> DocumentSummary:
    return inspect_document(_render_or_404(body, page_id))


def _render_or_404(content: SiteContent, page_id: Optional[str]) -> str:
    """Render the requested document and propagate a missing page as HTTP 404."""
    try:
        return render_document(content, page_id)
    except PageNotFoundError as exc:
        logger.warning("Unknown page id: %s", page_id)
        raise HTTPException(status_code=404, detail=str(exc))
