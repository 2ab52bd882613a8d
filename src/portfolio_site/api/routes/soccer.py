"""Soccer schedule demo routes.

The fetch, download and subscribe actions accept POST only; other methods
get a 405 from the router.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Form, Request, Response
from fastapi.responses import HTMLResponse

from portfolio_site.api.dependencies import Renderer
from portfolio_site.api.schemas.soccer import ScheduleForm
from portfolio_site.services.soccer import (
    CALENDAR_CONTENT_TYPE,
    CALENDAR_FILENAME,
    download_calendar,
    fetch_schedules,
    subscribe,
)

router = APIRouter(prefix="/soccer", tags=["soccer"], default_response_class=HTMLResponse)


@router.get("", summary="Soccer schedule page")
def soccer_page(request: Request, renderer: Renderer) -> HTMLResponse:
    return renderer.render_page(request, "soccer")


@router.post(
    "/fetch",
    summary="Fetch schedules",
    description="Return a table of sample games for the submitted team codes.",
)
def fetch_schedules_endpoint(
    request: Request,
    renderer: Renderer,
    form: Annotated[ScheduleForm, Form()],
) -> HTMLResponse:
    return renderer.render_fragment(
        request,
        "soccer_table",
        games=fetch_schedules(form.team_codes),
        team_codes=form.team_codes,
    )


@router.post(
    "/download",
    summary="Download calendar",
    response_class=Response,
    responses={200: {"content": {CALENDAR_CONTENT_TYPE: {}}}},
)
def download_calendar_endpoint() -> Response:
    return Response(
        content=download_calendar(),
        media_type=CALENDAR_CONTENT_TYPE,
        headers={"Content-Disposition": f"attachment; filename={CALENDAR_FILENAME}"},
    )


@router.post("/subscribe", summary="Subscribe to schedule updates")
def subscribe_endpoint() -> HTMLResponse:
    return HTMLResponse(subscribe())
