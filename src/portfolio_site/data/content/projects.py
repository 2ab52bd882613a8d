"""Projects shown on the projects page."""

from __future__ import annotations

from portfolio_site.models.content import Project

__all__ = ["list_projects"]

_PROJECTS: tuple[Project, ...] = (
    Project(
        id=1,
        name="Personal Portfolio Website",
        intro="A modern, responsive portfolio built with FastAPI and HTMX",
        description=(
            "Showcases my projects, skills, and certifications with a focus on cloud and web "
            "technologies."
        ),
        technologies=("Python", "FastAPI", "HTMX", "CSS", "HTML", "GitHub", "AWS"),
        image="/static/images/projects/portfolio.webp",
        github_url="https://github.com/CraigDevJohnson/craig-johnson-portfolio-vue",
        demo_url="https://craigdevjohnson.com",
        category="Web",
    ),
    Project(
        id=2,
        name="New User Account Provisioning",
        intro="PowerShell scripts to fully automate user account creation and configuration.",
        description=(
            "Completely automated new user account creation and configuration based on database "
            "push of new user information. This automation included creating the new user's "
            "active directory account, email account in O365/Exchange, and role based group "
            "memberships."
        ),
        technologies=("PowerShell", "Git", "APIs", "AD DS", "O365/Exchange"),
        image="/static/images/projects/provisioning.webp",
        category="Automation",
    ),
    Project(
        id=3,
        name="Soccer Schedule Scraper",
        intro="A web scraper to pull and parse team schedules and download as ICS file.",
        description=(
            "A multi function Python script deployed as an AWS Lambda function to scrape and "
            "parse soccer team schedules and return them in ICS file format for broadly "
            "supported calendar importing."
        ),
        technologies=("Python", "AWS Lambda", "GitHub", "API"),
        image="/static/images/projects/scraper.webp",
        github_url="https://github.com/CraigDevJohnson/soccer-scraper",
        demo_url="/soccer",
        category="Automation",
    ),
)


def list_projects() -> list[Project]:
    """Return showcased projects in display order."""
    return list(_PROJECTS)
