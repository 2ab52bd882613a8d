"""Pydantic schemas for skills query parameters."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class SkillFilterParams(BaseModel):
    """Optional filters for the filtered skills fragment.

    Blank values are treated the same as missing ones.
    """

    category: str | None = Field(None, description="Exact skill category name")
    proficiency: str | None = Field(
        None, description="Proficiency level (expert, advanced, intermediate, familiar)"
    )

    @field_validator("category", "proficiency", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value
