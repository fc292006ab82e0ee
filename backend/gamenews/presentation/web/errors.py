"""Application-level exception handlers."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from gamenews.domain.exceptions import UnauthorizedAccessError

logger = logging.getLogger(__name__)

PAGE_NOT_FOUND_MESSAGE = "Hmmm, that page doesn't appear to exist."


async def unauthorized_access_handler(request: Request, exc: UnauthorizedAccessError) -> PlainTextResponse:
    """Render admin-gate rejections exactly like a missing page."""
    logger.warning(
        "Unauthorized access: origin=%s action=%s path=%s",
        exc.origin,
        exc.action,
        request.url.path,
    )
    return PlainTextResponse(PAGE_NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UnauthorizedAccessError, unauthorized_access_handler)
