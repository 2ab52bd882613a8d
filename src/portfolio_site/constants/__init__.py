from __future__ import annotations

from portfolio_site.constants.proficiency import (
    PROFICIENCY_LABELS,
    Proficiency,
    get_proficiency_label,
)

__all__ = [
    "Proficiency",
    "PROFICIENCY_LABELS",
    "get_proficiency_label",
]
