"""Exception types raised by the portfolio site."""

from __future__ import annotations

__all__ = ["NotFoundError", "PortfolioError", "RenderError"]


class PortfolioError(Exception):
    """Base class for all portfolio site errors."""


class NotFoundError(PortfolioError, LookupError):
    """Raised when a lookup by identifier has no matching record."""

    def __init__(self, kind: str, identifier: object) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} {identifier!r} not found")


class RenderError(PortfolioError, RuntimeError):
    """Raised when a page or fragment cannot be rendered."""
