"""Soccer schedule demo.

Stands in for an external schedule lookup: any non-empty set of team codes
yields the same three sample games, and the calendar download is a fixed
iCalendar document.
"""

from __future__ import annotations

import logging
import re

from portfolio_site.models.content import Game

logger = logging.getLogger(__name__)

__all__ = [
    "CALENDAR_CONTENT_TYPE",
    "CALENDAR_FILENAME",
    "SUBSCRIBE_CONFIRMATION",
    "download_calendar",
    "fetch_schedules",
    "parse_team_codes",
    "subscribe",
]

CALENDAR_CONTENT_TYPE = "text/calendar"
CALENDAR_FILENAME = "soccer_schedule.ics"

SUBSCRIBE_CONFIRMATION = (
    '<div class="subscribe-success">✅ Subscribed! Check your email to confirm.</div>'
)

_TEAM_CODE_SEPARATORS = re.compile(r"[,; ]")

_SAMPLE_GAMES: tuple[Game, ...] = (
    Game(
        id="sample1",
        datetime="Sun 01/11/26 02:55 PM",
        field="3",
        home="YOUR TEAM",
        away="OPPONENT A",
        season="168",
    ),
    Game(
        id="sample2",
        datetime="Sun 01/18/26 04:30 PM",
        field="5",
        home="OPPONENT B",
        away="YOUR TEAM",
        season="168",
    ),
    Game(
        id="sample3",
        datetime="Sun 01/25/26 01:00 PM",
        field="2",
        home="YOUR TEAM",
        away="OPPONENT C",
        season="168",
    ),
)

_SAMPLE_CALENDAR = "\r\n".join(
    [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Craig Johnson Portfolio//Soccer Schedule//EN",
        "BEGIN:VEVENT",
        "UID:sample1@craigdevjohnson.com",
        "DTSTART:20260111T145500",
        "DTEND:20260111T165500",
        "SUMMARY:Soccer: YOUR TEAM vs OPPONENT A",
        "LOCATION:Field 3",
        "DESCRIPTION:Season 168",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
)


def parse_team_codes(raw: str | None) -> list[str]:
    """Split *raw* on commas, semicolons and spaces, dropping empty tokens.

    >>> parse_team_codes("TeamA, TeamB;TeamC")
    ['TeamA', 'TeamB', 'TeamC']
    """
    if not raw:
        return []
    tokens = (token.strip() for token in _TEAM_CODE_SEPARATORS.split(raw))
    return [token for token in tokens if token]


def fetch_schedules(raw_team_codes: str | None) -> list[Game]:
    """Return the sample games for any non-empty team code input.

    The codes themselves are not looked up; only their presence matters.
    """
    team_codes = parse_team_codes(raw_team_codes)
    if not team_codes:
        logger.debug("No team codes supplied; returning empty schedule")
        return []
    logger.info("Returning sample schedule for %d team code(s)", len(team_codes))
    return list(_SAMPLE_GAMES)


def download_calendar() -> bytes:
    """Return the sample schedule as an iCalendar document."""
    return _SAMPLE_CALENDAR.encode("utf-8")


def subscribe() -> str:
    """Return the subscription confirmation fragment."""
    logger.info("Schedule subscription requested")
    return SUBSCRIBE_CONFIRMATION
