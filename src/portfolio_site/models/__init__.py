"""Data models and type definitions"""

from portfolio_site.models.content import (
    Credential,
    Education,
    Experience,
    Game,
    Project,
    Skill,
    SkillCategory,
)

__all__ = [
    "Credential",
    "Education",
    "Experience",
    "Game",
    "Project",
    "Skill",
    "SkillCategory",
]
