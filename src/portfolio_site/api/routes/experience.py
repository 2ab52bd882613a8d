"""Experience routes."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from portfolio_site.api.dependencies import Renderer, Repository

router = APIRouter(prefix="/experience", tags=["experience"], default_response_class=HTMLResponse)


@router.get("", summary="Experience page")
def experience_page(request: Request, renderer: Renderer) -> HTMLResponse:
    return renderer.render_page(request, "experience")


@router.get(
    "/timeline",
    summary="Experience timeline fragment",
    description="Return the timeline markup for swapping into the experience page.",
)
def experience_timeline(
    request: Request, renderer: Renderer, repository: Repository
) -> HTMLResponse:
    return renderer.render_fragment(
        request, "experience_timeline", experiences=repository.list_experience()
    )
