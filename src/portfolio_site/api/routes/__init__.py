"""Route handlers for the site."""

from portfolio_site.api.routes import experience, health, pages, projects, skills, soccer

__all__ = [
    "experience",
    "health",
    "pages",
    "projects",
    "skills",
    "soccer",
]
