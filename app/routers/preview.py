import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.models.content import SiteContent
from app.services.preview import render_preview
from app.services.publisher import build_export

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(tags=["Preview"])


@router.post(
    "/preview",
    response_class=HTMLResponse,
    summary="Preview every generated document",
    description=(
        "Returns a single HTML page listing the main document and every "
        "auxiliary page document, each with copy-to-clipboard and download "
        "buttons, followed by the publishing instructions."
    ),
)
@limiter.limit(settings.RATE_LIMIT)
async def preview(request: Request, body: SiteContent) -> HTMLResponse:
    logger.info("Preview requested", extra={"pages": len(body.pages)})
    return HTMLResponse(render_preview(build_export(body)))
