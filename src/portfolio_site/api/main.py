"""FastAPI application entry point for the portfolio site."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_site.api.routes import experience, health, pages, projects, skills, soccer
from portfolio_site.config import (
    DEFAULT_PORT,
    get_host,
    get_log_level,
    get_static_dir,
    register_mime_types,
)
from portfolio_site.data.repository import ContentRepository, StaticContentRepository
from portfolio_site.exceptions import NotFoundError, RenderError
from portfolio_site.rendering import ViewRenderer

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from pathlib import Path

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and shutdown; all state is built before serving."""
    logger.info("Portfolio site ready with %d pages", len(app.state.renderer.pages))
    yield
    logger.info("Portfolio site shutting down")


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=404)


async def render_error_handler(request: Request, exc: RenderError) -> PlainTextResponse:
    logger.error("Render failure on %s: %s", request.url.path, exc)
    return PlainTextResponse(f"render error: {exc}", status_code=500)


def create_app(
    renderer: ViewRenderer | None = None,
    repository: ContentRepository | None = None,
    static_dir: Path | None = None,
) -> FastAPI:
    """Build the application with its renderer and content repository.

    Args:
        renderer: View renderer to use; a default one is compiled if omitted.
        repository: Content source; defaults to the compiled-in tables.
        static_dir: Directory served under ``/static``.

    Returns:
        FastAPI: Configured application.
    """
    register_mime_types()
    static_dir = static_dir or get_static_dir()

    app = FastAPI(
        title="Portfolio Site",
        description="Personal portfolio pages, HTML fragments and a soccer schedule demo",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.renderer = renderer or ViewRenderer()
    app.state.repository = repository or StaticContentRepository()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RenderError, render_error_handler)

    app.include_router(health.router)
    app.include_router(pages.router)
    app.include_router(experience.router)
    app.include_router(skills.router)
    app.include_router(projects.router)
    app.include_router(soccer.router)

    app.mount("/static", StaticFiles(directory=static_dir), name="static")
    favicon_path = static_dir / "images" / "favicon.ico"

    @app.get("/favicon.ico", include_in_schema=False)
    def favicon() -> FileResponse:
        return FileResponse(favicon_path, media_type="image/x-icon")

    return app


app = create_app()


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "portfolio_site.api.main:app",
        host=get_host(),
        port=DEFAULT_PORT,
        log_level=get_log_level(),
    )


if __name__ == "__main__":
    main()
