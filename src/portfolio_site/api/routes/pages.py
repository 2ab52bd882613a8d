"""Routes for the standalone pages: home, about, education and contact."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from portfolio_site.api.dependencies import Renderer, Repository
from portfolio_site.services.profile import home_context

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


@router.get("/", summary="Home page")
def home(request: Request, renderer: Renderer) -> HTMLResponse:
    return renderer.render_page(request, "home", **home_context())


@router.get("/about", summary="About page")
def about(request: Request, renderer: Renderer) -> HTMLResponse:
    return renderer.render_page(request, "about")


@router.get("/education", summary="Education page")
def education(request: Request, renderer: Renderer, repository: Repository) -> HTMLResponse:
    """Render education entries together with their credentials."""
    return renderer.render_page(request, "education", educations=repository.list_education())


@router.get("/contact", summary="Contact page")
def contact(request: Request, renderer: Renderer) -> HTMLResponse:
    return renderer.render_page(request, "contact")
