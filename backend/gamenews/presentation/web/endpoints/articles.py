"""Article pages and form actions.

Admin-gated routes let ``UnauthorizedAccessError`` propagate to the
application exception handler, which answers with a plain 404.
"""

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from gamenews.application.schemas import ArticleCreate, ArticleUpdate
from gamenews.application.services import ArticleService
from gamenews.domain.exceptions import (
    ArticleNotPersistedError,
    ArticleValidationError,
    EntityNotFoundError,
)
from gamenews.infrastructure.dependencies import get_article_service
from gamenews.presentation.web.templating import client_origin, templates

router = APIRouter(tags=["Articles"])

ARTICLE_GONE_MESSAGE = "Sorry, this article no longer exists"
DELETE_MISSING_MESSAGE = "Sorry, someone beat you to the punch. We couldn't find that article"


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


def _not_modified() -> Response:
    # 304 responses carry no body; the reason is logged by the service
    return Response(status_code=status.HTTP_304_NOT_MODIFIED)


@router.get("/")
async def index() -> RedirectResponse:
    return _redirect("/articles")


@router.get("/articles", response_class=HTMLResponse)
async def list_articles(
    request: Request,
    page: str | None = Query(None, description="1-based page number"),
    service: ArticleService = Depends(get_article_service),
) -> HTMLResponse:
    """Show one page of articles, newest first."""
    article_page = await service.list_page(page, client_origin(request))
    return templates.TemplateResponse(request, "index.html", {"page": article_page})


@router.get("/articles/new", response_class=HTMLResponse)
async def new_article_form(
    request: Request,
    service: ArticleService = Depends(get_article_service),
) -> HTMLResponse:
    """Show the empty article creation form (admins only)."""
    await service.show_create_form(client_origin(request))
    return templates.TemplateResponse(request, "new.html", {})


@router.post("/articles")
async def create_article(
    request: Request,
    title: str = Form(...),
    body: str = Form(...),
    publish_date: str = Form(...),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Save a new article and redirect to it."""
    data = ArticleCreate(title=title, body=body, publish_date=publish_date)
    try:
        article = await service.create_article(client_origin(request), data)
    except ArticleValidationError as e:
        return PlainTextResponse(e.message, status_code=status.HTTP_400_BAD_REQUEST)
    except ArticleNotPersistedError:
        return _not_modified()
    return _redirect(f"/articles/{article.id}")


@router.get("/articles/{article_id}", response_class=HTMLResponse)
async def show_article(
    request: Request,
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Show a single article."""
    try:
        view = await service.show_article(article_id, client_origin(request))
    except EntityNotFoundError:
        return PlainTextResponse(ARTICLE_GONE_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)
    return templates.TemplateResponse(request, "show.html", {"view": view})


@router.get("/articles/{article_id}/edit", response_class=HTMLResponse)
async def edit_article_form(
    request: Request,
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Show the edit form for an article (admins only)."""
    try:
        article = await service.show_edit_form(article_id, client_origin(request))
    except EntityNotFoundError:
        return PlainTextResponse(ARTICLE_GONE_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)
    return templates.TemplateResponse(request, "edit.html", {"article": article})


@router.post("/articles/{article_id}")
async def update_article(
    request: Request,
    article_id: str,
    title: str = Form(...),
    body: str = Form(...),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Save edits to an article and redirect back to it."""
    data = ArticleUpdate(title=title, body=body)
    try:
        await service.update_article(article_id, client_origin(request), data)
    except EntityNotFoundError:
        return PlainTextResponse(ARTICLE_GONE_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)
    except ArticleValidationError as e:
        return PlainTextResponse(e.message, status_code=status.HTTP_400_BAD_REQUEST)
    except ArticleNotPersistedError:
        return _not_modified()
    return _redirect(f"/articles/{article_id}")


async def _delete(article_id: str, request: Request, service: ArticleService) -> Response:
    try:
        await service.delete_article(article_id, client_origin(request))
    except EntityNotFoundError:
        return PlainTextResponse(DELETE_MISSING_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)
    except ArticleNotPersistedError:
        return _not_modified()
    return _redirect("/articles")


@router.delete("/articles/{article_id}")
async def delete_article(
    request: Request,
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Delete an article and return to the listing."""
    return await _delete(article_id, request, service)


@router.post("/articles/{article_id}/delete")
async def delete_article_form(
    request: Request,
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Same as ``DELETE /articles/{id}``, for HTML forms that can only POST."""
    return await _delete(article_id, request, service)
