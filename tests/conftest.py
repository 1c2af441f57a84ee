"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Union

import pytest

from flashscore_recap.scraper import MatchListNotFoundError


DATA_DIR = Path(__file__).resolve().parent / 'data'


@dataclass
class FakeRow:
    """In-memory match row that records which fields were read."""

    status_text: Optional[str] = 'event__match event__match--finished'
    own_date: Optional[str] = '09.11. 19:05'
    header_date: Optional[str] = None
    home: Optional[str] = 'Tigers'
    away: Optional[str] = 'Lions'
    home_score: Optional[str] = '4'
    away_score: Optional[str] = '2'
    reads: List[str] = field(default_factory=list)

    async def status(self):
        self.reads.append('status')
        return self.status_text

    async def own_date_text(self):
        self.reads.append('own_date')
        return self.own_date

    async def header_date_text(self):
        self.reads.append('header_date')
        return self.header_date

    async def participant_text(self, side):
        self.reads.append(f'participant_{side}')
        return self.home if side == 'home' else self.away

    async def score_text(self, side):
        self.reads.append(f'score_{side}')
        return self.home_score if side == 'home' else self.away_score


@dataclass
class FakePage:
    """Results page with fixed rows; ``has_match_list=False`` simulates a timeout."""

    url: str = 'https://example.test/results/'
    row_list: List[FakeRow] = field(default_factory=list)
    title: Optional[str] = 'Serie Nacional'
    has_match_list: bool = True
    consent_attempts: int = 0

    async def dismiss_consent(self, timeout_ms):
        self.consent_attempts += 1

    async def wait_for_match_list(self, timeout_ms):
        if not self.has_match_list:
            raise MatchListNotFoundError(self.url)

    async def rows(self):
        return list(self.row_list)

    async def heading(self):
        return self.title


class FakeSession:
    """Session serving fake pages by URL; exceptions are raised on load."""

    def __init__(self, pages: Dict[str, Union[FakePage, Exception]]):
        self.pages = pages
        self.loaded: List[str] = []
        self.entered = False
        self.closed = False

    async def __aenter__(self):
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True

    async def load(self, url):
        self.loaded.append(url)
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        page.url = url
        return page


@pytest.fixture
def target_day() -> date:
    return date(2024, 11, 9)


@pytest.fixture(scope='session')
def data_dir() -> Path:
    """Path to the HTML snapshots."""
    return DATA_DIR
