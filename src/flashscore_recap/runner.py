"""Run the recap over every configured competition."""
from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import AsyncContextManager, Callable, List, Optional, Sequence

from .browser import PlaywrightSession
from .config import RecapConfig
from .dates import DateTokens, format_day_label, resolve_target_day, tokens_for
from .models import CompetitionBucket
from .report import build_report, report_path, write_report
from .rows import FINISHED_MARKER
from .scraper import Session, scrape_competition
from .snapshot import SnapshotSession

LOGGER = logging.getLogger(__name__)

SessionFactory = Callable[[RecapConfig], AsyncContextManager[Session]]


def open_session(config: RecapConfig) -> AsyncContextManager[Session]:
    if config.renderer == "snapshot":
        return SnapshotSession(config.selectors)

    return PlaywrightSession(config.selectors, headless=config.headless)


async def collect_buckets(
    session: Session,
    urls: Sequence[str],
    tokens: DateTokens,
    *,
    consent_timeout_ms: int = 2000,
    match_list_timeout_ms: int = 15000,
    finished_marker: str = FINISHED_MARKER,
) -> List[CompetitionBucket]:
    buckets: List[CompetitionBucket] = []
    for url in urls:
        try:
            bucket = await scrape_competition(
                session,
                url,
                tokens,
                consent_timeout_ms=consent_timeout_ms,
                match_list_timeout_ms=match_list_timeout_ms,
                finished_marker=finished_marker,
            )
        except Exception as exc:
            LOGGER.error("Failed to scrape competition %s: %s", url, exc)
            continue
        buckets.append(bucket)
    return buckets


async def run(
    config: RecapConfig,
    *,
    target_day: Optional[date] = None,
    session_factory: SessionFactory = open_session,
) -> Path:
    """Scrape, render and write the recap, returning the written path."""

    day = target_day or resolve_target_day(config.timezone)
    tokens = tokens_for(day)
    LOGGER.info(
        "Collecting results for %s from %d competitions",
        format_day_label(day),
        len(config.competitions),
    )

    async with session_factory(config) as session:
        buckets = await collect_buckets(
            session,
            config.competitions,
            tokens,
            consent_timeout_ms=config.consent_timeout_ms,
            match_list_timeout_ms=config.match_list_timeout_ms,
            finished_marker=config.selectors.finished_class,
        )

    report = build_report(buckets, day)
    return write_report(report, report_path(config.output_dir, day))
