"""Pydantic schemas for soccer demo form submissions."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScheduleForm(BaseModel):
    """Form body for the schedule fetch action."""

    team_codes: str = Field("", description="Team codes separated by commas, semicolons or spaces")
