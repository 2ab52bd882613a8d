"""Queries over skill categories.

All functions are pure: they take the category listing as input and never
mutate it. Returned skills that need their owning category are copies
stamped via ``Skill.with_category``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from portfolio_site.exceptions import NotFoundError
from portfolio_site.models.content import Skill, SkillCategory

__all__ = [
    "featured_skills",
    "filter_skill_categories",
    "find_skill_by_id",
    "iter_skills",
]


def iter_skills(categories: Iterable[SkillCategory]) -> Iterable[Skill]:
    """Yield every skill in category order, stamped with its category name."""
    for category in categories:
        for skill in category.skills:
            yield skill.with_category(category.name)


def featured_skills(categories: Iterable[SkillCategory]) -> list[Skill]:
    """Return the featured subset of all skills, in display order."""
    return [skill for skill in iter_skills(categories) if skill.featured]


def find_skill_by_id(categories: Iterable[SkillCategory], skill_id: int) -> Skill:
    """Return the skill with *skill_id*, stamped with its category.

    Raises:
        NotFoundError: If no category contains a skill with that ID.
    """
    for skill in iter_skills(categories):
        if skill.id == skill_id:
            return skill
    raise NotFoundError("skill", skill_id)


def filter_skill_categories(
    categories: Sequence[SkillCategory],
    category: str | None = None,
    proficiency: str | None = None,
) -> list[SkillCategory]:
    """Return categories narrowed to skills matching every given filter.

    Empty or missing filters impose no constraint. Categories left without
    skills are dropped, so an unknown category or proficiency yields ``[]``.
    """
    result: list[SkillCategory] = []
    for group in categories:
        if category and group.name != category:
            continue
        skills = tuple(
            skill for skill in group.skills if not proficiency or skill.proficiency == proficiency
        )
        if skills:
            result.append(SkillCategory(name=group.name, skills=skills))
    return result
