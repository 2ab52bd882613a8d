"""Compiled-in content tables."""

from portfolio_site.data.content.education import list_education
from portfolio_site.data.content.experience import list_experience
from portfolio_site.data.content.projects import list_projects
from portfolio_site.data.content.skills import list_skill_categories

__all__ = [
    "list_education",
    "list_experience",
    "list_projects",
    "list_skill_categories",
]
