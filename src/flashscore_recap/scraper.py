"""Scrape one competition results page into a :class:`CompetitionBucket`."""
from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence

from .dates import DateTokens
from .models import UNKNOWN_COMPETITION, CompetitionBucket
from .rows import FINISHED_MARKER, RowSource, classify_row, extract_match

LOGGER = logging.getLogger(__name__)


class MatchListNotFoundError(RuntimeError):
    def __init__(self, url: str, message: str = "match list did not appear"):
        super().__init__(f"{url}: {message}")
        self.url = url


class ResultsPage(Protocol):
    """A loaded results page, as seen by the scraper."""

    url: str

    async def dismiss_consent(self, timeout_ms: int) -> None:
        ...

    async def wait_for_match_list(self, timeout_ms: int) -> None:
        ...

    async def rows(self) -> Sequence[RowSource]:
        ...

    async def heading(self) -> Optional[str]:
        ...


class Session(Protocol):
    async def load(self, url: str) -> ResultsPage:
        ...


async def scrape_competition(
    session: Session,
    url: str,
    tokens: DateTokens,
    *,
    consent_timeout_ms: int = 2000,
    match_list_timeout_ms: int = 15000,
    finished_marker: str = FINISHED_MARKER,
) -> CompetitionBucket:
    page = await session.load(url)
    await page.dismiss_consent(consent_timeout_ms)
    await page.wait_for_match_list(match_list_timeout_ms)

    bucket = CompetitionBucket(competition=UNKNOWN_COMPETITION)
    rows = await page.rows()
    for row in rows:
        classification = await classify_row(row, tokens, finished_marker=finished_marker)
        if not classification.accepted:
            continue
        match = await extract_match(row)
        if match is not None:
            bucket.matches.append(match)

    name = ((await page.heading()) or "").strip()
    if name:
        bucket.competition = name
    LOGGER.info(
        "%s: %d of %d rows kept for %s", bucket.competition, len(bucket.matches), len(rows), url
    )
    return bucket
