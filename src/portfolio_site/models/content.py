"""Read-only content records rendered by the site."""

from __future__ import annotations

from dataclasses import dataclass, replace

from portfolio_site.constants.proficiency import Proficiency


@dataclass(frozen=True, slots=True)
class Experience:
    """A work experience entry on the timeline.

    Attributes:
        id: Unique identifier within the experience collection.
        position: Role title.
        company: Organization name.
        duration: Human-readable date range, e.g. ``2022 – Present``.
        responsibilities: Narrative paragraph.
        technologies: Ordered technology tags.
        skill_areas: Comma separated skill-area tags used for client filtering.
        side: Timeline column, ``left`` or ``right``.
    """

    id: int
    position: str
    company: str
    duration: str
    responsibilities: str
    technologies: tuple[str, ...] = ()
    skill_areas: str = ""
    side: str = "left"

    @property
    def skill_area_list(self) -> list[str]:
        return [area.strip() for area in self.skill_areas.split(",") if area.strip()]


@dataclass(frozen=True, slots=True)
class Skill:
    """A single technical skill.

    ``category`` is not part of the stored record; it is stamped on copies
    returned by lookups that know the owning category.
    """

    id: int
    name: str
    link: str
    proficiency: Proficiency
    icon: str = ""
    icon_path: str = ""
    featured: bool = False
    description: str = ""
    category: str | None = None

    def with_category(self, category: str) -> Skill:
        """Return a copy of this skill stamped with *category*."""
        return replace(self, category=category)


@dataclass(frozen=True, slots=True)
class SkillCategory:
    """Named, ordered group of skills."""

    name: str
    skills: tuple[Skill, ...] = ()


@dataclass(frozen=True, slots=True)
class Project:
    """A showcased project."""

    id: int
    name: str
    intro: str
    description: str
    technologies: tuple[str, ...] = ()
    image: str = ""
    github_url: str | None = None
    demo_url: str | None = None
    category: str = ""


@dataclass(frozen=True, slots=True)
class Credential:
    """A certification attached to an education entry."""

    name: str
    issuer: str
    issue_date: str
    credly_link: str


@dataclass(frozen=True, slots=True)
class Education:
    """An education entry with its earned credentials."""

    id: int
    school: str
    degree: str
    field_of_study: str
    duration: str
    description: str = ""
    achievements: tuple[str, ...] = ()
    credentials: tuple[Credential, ...] = ()


@dataclass(frozen=True, slots=True)
class Game:
    """A scheduled soccer game."""

    id: str
    datetime: str
    field: str
    home: str
    away: str
    season: str
