"""Projects routes."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from portfolio_site.api.dependencies import Renderer, Repository

router = APIRouter(prefix="/projects", tags=["projects"], default_response_class=HTMLResponse)


@router.get("", summary="Projects page")
def projects_page(request: Request, renderer: Renderer) -> HTMLResponse:
    return renderer.render_page(request, "projects")


@router.get(
    "/grid",
    summary="Projects grid fragment",
    description="Return the project cards for swapping into the projects page.",
)
def projects_grid(request: Request, renderer: Renderer, repository: Repository) -> HTMLResponse:
    return renderer.render_fragment(request, "projects_grid", projects=repository.list_projects())
