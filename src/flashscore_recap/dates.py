"""Target-day resolution and the date tokens used to spot it in page text."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser

from .config import validate_timezone


@dataclass(frozen=True)
class DateTokens:
    """Textual forms of one day/month pair as they appear on results pages."""

    day: date
    tokens: tuple[str, ...]

    def matches(self, *texts: str) -> bool:
        haystack = " ".join(texts)
        return any(token in haystack for token in self.tokens)


def resolve_target_day(timezone: str, *, now: Optional[datetime] = None) -> date:
    """Return yesterday's civil date in ``timezone``.

    ``now`` may be any aware datetime; it is converted into the zone before the
    calendar day is taken, so the subtraction happens on a plain date.
    """

    zone = validate_timezone(timezone)
    if now is None:
        local_now = datetime.now(tz=zone)
    else:
        local_now = now.astimezone(zone)
    today = date(local_now.year, local_now.month, local_now.day)
    return today - timedelta(days=1)


def tokens_for(day: date) -> DateTokens:
    dd = f"{day.day:02d}"
    mm = f"{day.month:02d}"
    return DateTokens(day=day, tokens=(f"{dd}.{mm}.", f"{dd}.{mm}", f"{dd}-{mm}"))


def format_day_label(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def parse_day(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` day given on the command line."""

    cleaned = (value or "").strip()
    if not cleaned:
        raise ValueError("An empty date was given.")
    return parser.isoparse(cleaned).date()
