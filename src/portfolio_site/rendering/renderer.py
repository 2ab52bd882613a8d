"""Jinja2-backed view renderer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from portfolio_site.config import PROFILE, TEMPLATES_DIR
from portfolio_site.exceptions import RenderError
from portfolio_site.rendering.helpers import TEMPLATE_HELPERS

logger = logging.getLogger(__name__)

__all__ = ["FRAGMENTS", "NAV_ITEMS", "PAGES", "ViewRenderer"]

LAYOUT_TEMPLATE = "layout.html"

PAGES: Mapping[str, str] = MappingProxyType(
    {
        "home": "pages/home.html",
        "about": "pages/about.html",
        "experience": "pages/experience.html",
        "skills": "pages/skills.html",
        "projects": "pages/projects.html",
        "education": "pages/education.html",
        "contact": "pages/contact.html",
        "soccer": "pages/soccer.html",
    }
)

FRAGMENTS: Mapping[str, str] = MappingProxyType(
    {
        "experience_timeline": "fragments/experience_timeline.html",
        "skills_grid": "fragments/skills_grid.html",
        "skills_filtered": "fragments/skills_filtered.html",
        "skill_detail": "fragments/skill_detail.html",
        "projects_grid": "fragments/projects_grid.html",
        "soccer_table": "fragments/soccer_table.html",
    }
)

# (page id, label, path) in navigation order.
NAV_ITEMS: tuple[tuple[str, str, str], ...] = (
    ("home", "Home", "/"),
    ("about", "About", "/about"),
    ("experience", "Experience", "/experience"),
    ("skills", "Skills", "/skills"),
    ("projects", "Projects", "/projects"),
    ("education", "Education", "/education"),
    ("contact", "Contact", "/contact"),
)


class ViewRenderer:
    """Renders full pages inside the site layout, or bare fragments.

    Every registered template is compiled when the renderer is built. After
    that the renderer holds no mutable state and is safe to share between
    concurrent requests.
    """

    def __init__(
        self,
        templates_dir: Path = TEMPLATES_DIR,
        pages: Mapping[str, str] = PAGES,
        fragments: Mapping[str, str] = FRAGMENTS,
    ) -> None:
        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        env.globals.update(TEMPLATE_HELPERS)
        env.globals["nav_items"] = NAV_ITEMS
        env.globals["profile"] = PROFILE
        self._templates = Jinja2Templates(env=env)
        self._pages = MappingProxyType(dict(pages))
        self._fragments = MappingProxyType(dict(fragments))
        self._compile_all()

    @property
    def pages(self) -> Mapping[str, str]:
        return self._pages

    @property
    def fragments(self) -> Mapping[str, str]:
        return self._fragments

    def _compile_all(self) -> None:
        names = [LAYOUT_TEMPLATE, *self._pages.values(), *self._fragments.values()]
        for name in names:
            try:
                self._templates.get_template(name)
            except Exception as exc:
                raise RenderError(f"failed to compile template {name!r}: {exc}") from exc
        logger.debug("Compiled %d templates", len(names))

    def render_page(self, request: Request, page_id: str, **context: Any) -> HTMLResponse:
        """Render *page_id* wrapped in the shared layout.

        The layout receives ``active_page`` for navigation highlighting.

        Raises:
            RenderError: If the page is unknown or its template fails.
        """
        template_name = self._pages.get(page_id)
        if template_name is None:
            raise RenderError(f"unknown page {page_id!r}")
        return self._render(request, template_name, {**context, "active_page": page_id})

    def render_fragment(
        self, request: Request, fragment_id: str, **context: Any
    ) -> HTMLResponse:
        """Render only the inner markup of *fragment_id*, without layout.

        Raises:
            RenderError: If the fragment is unknown or its template fails.
        """
        template_name = self._fragments.get(fragment_id)
        if template_name is None:
            raise RenderError(f"unknown fragment {fragment_id!r}")
        return self._render(request, template_name, context)

    def _render(
        self, request: Request, template_name: str, context: dict[str, Any]
    ) -> HTMLResponse:
        try:
            return self._templates.TemplateResponse(request, template_name, context)
        except Exception as exc:
            logger.exception("Failed to render %s", template_name)
            raise RenderError(f"failed to render {template_name!r}: {exc}") from exc
