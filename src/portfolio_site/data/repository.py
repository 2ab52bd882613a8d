"""Read-only repository over the site's content.

Handlers depend on ``ContentRepository`` only, so the compiled-in tables can
be swapped for a real store without touching the routes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar

from portfolio_site.data.content import (
    list_education,
    list_experience,
    list_projects,
    list_skill_categories,
)
from portfolio_site.exceptions import NotFoundError
from portfolio_site.models.content import Education, Experience, Project, Skill, SkillCategory
from portfolio_site.services.skills import featured_skills, find_skill_by_id

__all__ = ["ContentRepository", "StaticContentRepository"]

_T = TypeVar("_T", Experience, Project, Education)


class ContentRepository(Protocol):
    """Interface every content backend must provide."""

    def list_experience(self) -> list[Experience]: ...

    def list_skill_categories(self) -> list[SkillCategory]: ...

    def list_projects(self) -> list[Project]: ...

    def list_education(self) -> list[Education]: ...

    def featured_skills(self) -> list[Skill]: ...

    def find_experience_by_id(self, experience_id: int) -> Experience: ...

    def find_skill_by_id(self, skill_id: int) -> Skill: ...

    def find_project_by_id(self, project_id: int) -> Project: ...

    def find_education_by_id(self, education_id: int) -> Education: ...


def _find_by_id(items: Iterable[_T], item_id: int, kind: str) -> _T:
    for item in items:
        if item.id == item_id:
            return item
    raise NotFoundError(kind, item_id)


class StaticContentRepository:
    """Serves the hardcoded content tables.

    The tables are loaded once at construction and never mutated, so one
    instance can be shared across concurrent requests.
    """

    def __init__(
        self,
        experience: Callable[[], list[Experience]] = list_experience,
        skill_categories: Callable[[], list[SkillCategory]] = list_skill_categories,
        projects: Callable[[], list[Project]] = list_projects,
        education: Callable[[], list[Education]] = list_education,
    ) -> None:
        self._experience = tuple(experience())
        self._skill_categories = tuple(skill_categories())
        self._projects = tuple(projects())
        self._education = tuple(education())

    def list_experience(self) -> list[Experience]:
        return list(self._experience)

    def list_skill_categories(self) -> list[SkillCategory]:
        return list(self._skill_categories)

    def list_projects(self) -> list[Project]:
        return list(self._projects)

    def list_education(self) -> list[Education]:
        return list(self._education)

    def featured_skills(self) -> list[Skill]:
        return featured_skills(self._skill_categories)

    def find_experience_by_id(self, experience_id: int) -> Experience:
        return _find_by_id(self._experience, experience_id, "experience")

    def find_skill_by_id(self, skill_id: int) -> Skill:
        """Return the skill with *skill_id* stamped with its category.

        Raises:
            NotFoundError: If no skill has that ID.
        """
        return find_skill_by_id(self._skill_categories, skill_id)

    def find_project_by_id(self, project_id: int) -> Project:
        return _find_by_id(self._projects, project_id, "project")

    def find_education_by_id(self, education_id: int) -> Education:
        return _find_by_id(self._education, education_id, "education")
