"""Runtime configuration for the portfolio site.

Defaults suit local development. A few values can be overridden through
environment variables:

- ``PORTFOLIO_HOST``: bind address for the dev server.
- ``PORTFOLIO_LOG_LEVEL``: uvicorn/application log level.
- ``PORTFOLIO_STATIC_DIR``: directory served under ``/static``.
"""

from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_ROOT / "web" / "templates"
DEFAULT_STATIC_DIR = PACKAGE_ROOT / "web" / "static"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "info"

# Extension to content-type associations added at startup.
MIME_TYPES: dict[str, str] = {
    ".css": "text/css",
    ".js": "application/javascript",
    ".ico": "image/x-icon",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".png": "image/png",
    ".jpg": "image/jpeg",
}


@dataclass(frozen=True)
class SiteProfile:
    """Owner details shown on the home page and footer."""

    name: str
    role: str
    email: str
    description: str
    github_url: str
    linkedin_url: str


PROFILE = SiteProfile(
    name="Craig Johnson",
    role="Cloud Engineer Principal",
    email="gravatar@craigdevjohnson.com",
    description=(
        "Hi there! I'm a seasoned System Engineer with over a decade of experience in system "
        "engineering, administration, and optimization. I specialize in designing, "
        "implementing, and maintaining various systems and applications, thriving on "
        "performance optimization and security enhancement. I enjoy collaborating with "
        "application owners and software engineers to deliver innovative solutions and "
        "streamline processes through automation. I'm passionate about modernizing "
        "infrastructure and documenting critical processes. Let's connect and share our tech "
        "journeys!"
    ),
    github_url="https://github.com/CraigDevJohnson",
    linkedin_url="https://www.linkedin.com/in/craigdevjohnson/",
)

AVATAR_SIZE = 275


def get_host() -> str:
    return os.getenv("PORTFOLIO_HOST") or DEFAULT_HOST


def get_log_level() -> str:
    return (os.getenv("PORTFOLIO_LOG_LEVEL") or DEFAULT_LOG_LEVEL).lower()


def get_static_dir() -> Path:
    """Return the static asset directory, allowing overrides via environment variable."""
    env_dir = os.getenv("PORTFOLIO_STATIC_DIR")
    if env_dir:
        return Path(env_dir)
    return DEFAULT_STATIC_DIR


def register_mime_types() -> None:
    """Add the site's extension to content-type associations."""
    for extension, mime_type in MIME_TYPES.items():
        mimetypes.add_type(mime_type, extension)
