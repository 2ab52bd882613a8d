"""Home page profile helpers."""

from __future__ import annotations

import hashlib

from portfolio_site.config import AVATAR_SIZE, PROFILE, SiteProfile

__all__ = ["gravatar_url", "home_context"]

_GRAVATAR_BASE = "https://www.gravatar.com/avatar/"


def gravatar_url(email: str, size: int) -> str:
    """Return the Gravatar image URL for *email* at *size* pixels."""
    normalized = email.strip().lower()
    digest = hashlib.md5(normalized.encode("utf-8"), usedforsecurity=False).hexdigest()
    return f"{_GRAVATAR_BASE}{digest}?s={size}"


def home_context(profile: SiteProfile = PROFILE) -> dict[str, str]:
    """Build the template context for the home page hero."""
    return {
        "name": profile.name,
        "role": profile.role,
        "avatar_url": gravatar_url(profile.email, AVATAR_SIZE),
        "description": profile.description,
    }
