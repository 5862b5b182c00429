from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from .config import Settings
from .page import HostInfo, render_page
from .schemas import HealthOut
from .utils import now_iso


logger = logging.getLogger(__name__)

HEALTH_PATHS = frozenset({"/health", "/healthz"})
METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def request_target(request: Request) -> str:
    """Path plus query string, as it appeared on the request line."""
    raw_path = request.scope.get("raw_path") or request.url.path.encode("utf-8")
    target = raw_path.decode("latin-1")
    query = request.scope.get("query_string", b"")
    if query:
        target += "?" + query.decode("latin-1")
    return target


def create_app(settings: Settings, host_info: Optional[HostInfo] = None) -> FastAPI:
    """Build the responder for one set of settings.

    The page is rendered once here: nothing that goes into it changes
    while the process is alive.
    """
    info = host_info or HostInfo.detect()
    page = render_page(settings.message, info)

    # No docs routes: every path belongs to the catch-all below.
    app = FastAPI(title="Greeter", version="1.0.0", docs_url=None, redoc_url=None, openapi_url=None)

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        logger.info("%s - %s %s", now_iso(), request.method, request_target(request))
        return await call_next(request)

    # === Single catch-all route ===

    @app.api_route("/{path:path}", methods=METHODS, include_in_schema=False)
    async def handle(request: Request):
        # The reply goes out only once the whole request has arrived.
        await request.body()
        if request_target(request) in HEALTH_PATHS:
            return JSONResponse(HealthOut().model_dump())
        return HTMLResponse(page)

    return app
