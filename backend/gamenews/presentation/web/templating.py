"""Jinja2 template environment and request helpers shared by the HTML endpoints."""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from gamenews.config import get_settings

# .html templates are autoescaped, so user-supplied titles/bodies cannot inject markup
templates = Jinja2Templates(directory=get_settings().templates_dir)


def client_origin(request: Request) -> str | None:
    """Remote host address of the caller, as seen by the transport layer.

    Behind a reverse proxy this is only the real client address when the
    server runs with proxy headers enabled for trusted proxies.
    """
    return request.client.host if request.client else None
