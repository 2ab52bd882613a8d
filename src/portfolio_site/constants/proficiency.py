"""Skill proficiency levels."""

from __future__ import annotations

from enum import StrEnum


class Proficiency(StrEnum):
    """Closed set of proficiency levels a skill can carry, strongest first."""

    EXPERT = "expert"
    ADVANCED = "advanced"
    INTERMEDIATE = "intermediate"
    FAMILIAR = "familiar"


PROFICIENCY_LABELS: dict[Proficiency, str] = {
    Proficiency.EXPERT: "Expert",
    Proficiency.ADVANCED: "Advanced",
    Proficiency.INTERMEDIATE: "Intermediate",
    Proficiency.FAMILIAR: "Familiar",
}


def get_proficiency_label(level: Proficiency | str) -> str:
    """Return the display label for *level*, or the raw value if unknown."""
    try:
        return PROFICIENCY_LABELS[Proficiency(level)]
    except ValueError:
        return str(level)
