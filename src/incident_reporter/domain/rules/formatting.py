"""Display formatting: turns typed record values into report strings.

All business formatting happens here, at mapping time. The renderer
receives finished strings only.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from enum import Enum

from incident_reporter.domain.rules.constants import (
    CATEGORY_LABELS,
    CURRENCY_SYMBOL,
    DATE_FORMAT,
    NOT_AVAILABLE,
    TIMESTAMP_FORMAT,
)


def is_blank(value: str | None) -> bool:
    """True for ``None`` or whitespace-only strings."""
    return value is None or not value.strip()


def or_na(value: object | None, fallback: str = NOT_AVAILABLE) -> str:
    """Return *value* as text, or *fallback* when missing or blank."""
    if value is None:
        return fallback
    if isinstance(value, Enum):
        value = value.value
    text = str(value)
    return fallback if not text.strip() else text


def yes_no(flag: bool | None) -> str:
    """``True`` → "Yes"; ``False`` and unset → "No"."""
    return "Yes" if flag else "No"


def humanize(value: str | Enum | None, fallback: str = NOT_AVAILABLE) -> str:
    """``member_of_public`` → "Member of public"."""
    if value is None:
        return fallback
    raw = value.value if isinstance(value, Enum) else value
    if not raw.strip():
        return fallback
    text = raw.replace("_", " ").strip()
    return text[0].upper() + text[1:]


def upper(value: str | Enum | None, fallback: str = NOT_AVAILABLE) -> str:
    """Upper-case an enum-like value (``in_progress`` → "IN PROGRESS")."""
    if value is None:
        return fallback
    raw = value.value if isinstance(value, Enum) else value
    return raw.replace("_", " ").upper() if raw.strip() else fallback


def money(amount: float | None) -> str:
    if amount is None:
        return NOT_AVAILABLE
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def uk_date(value: date | datetime | None) -> str:
    """``DD/MM/YYYY`` or "N/A"."""
    if value is None:
        return NOT_AVAILABLE
    return value.strftime(DATE_FORMAT)


def uk_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def joined(values: Iterable[str | Enum] | None, fallback: str = NOT_AVAILABLE) -> str:
    """Comma-join humanized values, or *fallback* for an empty list."""
    items = [humanize(v) for v in values or ()]
    return ", ".join(items) if items else fallback


def with_unit(value: float | int | None, unit: str) -> str:
    if value is None:
        return NOT_AVAILABLE
    number = int(value) if float(value).is_integer() else value
    return f"{number} {unit}"


def category_label(category: str | None) -> str:
    """Display label for a category tag; unknown tags are shown verbatim."""
    if not category:
        return NOT_AVAILABLE
    return CATEGORY_LABELS.get(category, category)
