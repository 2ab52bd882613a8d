"""Display helpers exposed to every template.

These cover layout arithmetic only (animation stagger, alternating rows),
never business rules.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

__all__ = ["TEMPLATE_HELPERS"]


def current_year() -> int:
    return datetime.now(UTC).year


def mul(a: int, b: int) -> int:
    return a * b


def sub(a: int, b: int) -> int:
    return a - b


def mod(a: int, b: int) -> int:
    return a % b


def has_prefix(value: str | None, prefix: str) -> bool:
    return bool(value) and value.startswith(prefix)


def seq(*values: int) -> list[int]:
    """Return the given integers as a list, e.g. for placeholder loops."""
    return [int(v) for v in values]


TEMPLATE_HELPERS: dict[str, Callable[..., Any]] = {
    "current_year": current_year,
    "mul": mul,
    "sub": sub,
    "mod": mod,
    "has_prefix": has_prefix,
    "seq": seq,
}
