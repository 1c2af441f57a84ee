"""Classification and extraction of single match rows.

Everything here works against :class:`RowSource`, the read-only view of a
match row that the page adapters provide. Adapters report any failed read as
``None``; this module treats ``None`` and blank text the same way.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional, Protocol

from .dates import DateTokens
from .models import MatchResult, Score

Side = Literal["home", "away"]

FINISHED_MARKER = "event__match--finished"


class RowSource(Protocol):
    async def status(self) -> Optional[str]:
        ...

    async def own_date_text(self) -> Optional[str]:
        ...

    async def header_date_text(self) -> Optional[str]:
        ...

    async def participant_text(self, side: Side) -> Optional[str]:
        ...

    async def score_text(self, side: Side) -> Optional[str]:
        ...


@dataclass(frozen=True)
class RowClassification:
    finished: bool
    date_matches: bool

    @property
    def accepted(self) -> bool:
        return self.finished and self.date_matches


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


async def classify_row(
    row: RowSource,
    tokens: DateTokens,
    *,
    finished_marker: str = FINISHED_MARKER,
) -> RowClassification:
    status = _clean(await row.status())
    if finished_marker not in status:
        return RowClassification(finished=False, date_matches=False)

    own_date = _clean(await row.own_date_text())
    header_date = _clean(await row.header_date_text())
    return RowClassification(
        finished=True,
        date_matches=tokens.matches(own_date, header_date),
    )


def parse_score(text: str) -> Score:
    """Parse a base-10 score, returning NaN for anything non-numeric."""

    try:
        return int(text.strip(), 10)
    except ValueError:
        return math.nan


async def extract_match(row: RowSource) -> Optional[MatchResult]:
    home = _clean(await row.participant_text("home"))
    away = _clean(await row.participant_text("away"))
    home_score = _clean(await row.score_text("home"))
    away_score = _clean(await row.score_text("away"))
    if not home or not away or not home_score or not away_score:
        return None
    return MatchResult.from_scores(
        home, away, parse_score(home_score), parse_score(away_score)
    )
