"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from portfolio_site.data.repository import ContentRepository
from portfolio_site.rendering import ViewRenderer


def get_renderer(request: Request) -> ViewRenderer:
    """Return the renderer built by the application factory.

    Args:
        request: Incoming request; the renderer lives on ``app.state``.

    Returns:
        ViewRenderer: Shared, read-only renderer.
    """
    return request.app.state.renderer


def get_repository(request: Request) -> ContentRepository:
    """Return the content repository built by the application factory."""
    return request.app.state.repository


Renderer = Annotated[ViewRenderer, Depends(get_renderer)]
Repository = Annotated[ContentRepository, Depends(get_repository)]
