"""Skills routes."""

from __future__ import annotations

import re
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse

from portfolio_site.api.dependencies import Renderer, Repository
from portfolio_site.api.schemas.skills import SkillFilterParams
from portfolio_site.constants.proficiency import PROFICIENCY_LABELS, get_proficiency_label
from portfolio_site.services.skills import filter_skill_categories

_SKILL_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

router = APIRouter(prefix="/skills", tags=["skills"], default_response_class=HTMLResponse)


def _parse_skill_id(raw: str | None) -> int:
    """Parse the ``id`` query parameter as a signed ASCII integer or raise 400."""
    if raw is None or not _SKILL_ID_PATTERN.fullmatch(raw):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid skill id",
        )
    return int(raw)


@router.get("", summary="Skills page")
def skills_page(request: Request, renderer: Renderer) -> HTMLResponse:
    return renderer.render_page(request, "skills")


@router.get(
    "/grid",
    summary="Skills grid fragment",
    description="Return featured skills followed by every category.",
)
def skills_grid(request: Request, renderer: Renderer, repository: Repository) -> HTMLResponse:
    return renderer.render_fragment(
        request,
        "skills_grid",
        categories=repository.list_skill_categories(),
        featured_skills=repository.featured_skills(),
    )


@router.get(
    "/filtered",
    summary="Filtered skills fragment",
    description=(
        "Return skills matching every supplied filter. Missing filters impose no "
        "constraint; unknown values produce an empty list."
    ),
)
def skills_filtered(
    request: Request,
    renderer: Renderer,
    repository: Repository,
    filters: Annotated[SkillFilterParams, Query()],
) -> HTMLResponse:
    all_categories = repository.list_skill_categories()
    categories = filter_skill_categories(all_categories, filters.category, filters.proficiency)
    return renderer.render_fragment(
        request,
        "skills_filtered",
        categories=categories,
        category_names=[c.name for c in all_categories],
        proficiencies=list(PROFICIENCY_LABELS.items()),
        active_category=filters.category or "",
        active_proficiency=filters.proficiency or "",
        skill_count=sum(len(c.skills) for c in categories),
    )


@router.get(
    "/detail",
    summary="Skill detail fragment",
    responses={400: {"description": "Invalid skill id"}, 404: {"description": "Skill not found"}},
)
def skill_detail(
    request: Request,
    renderer: Renderer,
    repository: Repository,
    skill_id: Annotated[str | None, Query(alias="id", description="Skill ID")] = None,
) -> HTMLResponse:
    """Return details for a single skill, stamped with its category."""
    skill = repository.find_skill_by_id(_parse_skill_id(skill_id))
    return renderer.render_fragment(
        request,
        "skill_detail",
        skill=skill,
        proficiency_label=get_proficiency_label(skill.proficiency),
    )
