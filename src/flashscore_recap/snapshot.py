"""Static results pages parsed with BeautifulSoup.

Used for saved HTML snapshots (local paths or ``file://`` URLs) and for sites
that serve the match list without JavaScript. Pages are fetched once and never
re-rendered, so there is no consent dialog and waiting only checks presence.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional
from urllib.parse import unquote, urlparse

import requests
from bs4 import BeautifulSoup, Tag

from .config import Selectors
from .rows import Side
from .scraper import MatchListNotFoundError

REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; flashscore-recap/1.0; +https://github.com/)",
    "Accept": "text/html,application/xhtml+xml",
}


def fetch_html(url: str, *, timeout: int = 30) -> str:
    response = requests.get(url, headers=REQUEST_HEADERS, timeout=timeout)
    response.raise_for_status()
    return response.text


def _read_local(url: str) -> str:
    parsed = urlparse(url)
    path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(url)
    return path.read_text(encoding="utf-8")


def _first_text(tag: Tag, selector: str) -> Optional[str]:
    element = tag.select_one(selector)
    if element is None:
        return None
    return element.get_text()


class SoupRow:
    def __init__(self, tag: Tag, selectors: Selectors) -> None:
        self._tag = tag
        self._selectors = selectors

    async def status(self) -> Optional[str]:
        classes = self._tag.get("class")
        if not classes:
            return None
        return " ".join(classes)

    async def own_date_text(self) -> Optional[str]:
        return _first_text(self._tag, self._selectors.row_time)

    async def header_date_text(self) -> Optional[str]:
        marker = self._selectors.day_header_class

        def is_day_header(candidate: Tag) -> bool:
            return candidate.name == "div" and marker in " ".join(candidate.get("class") or [])

        # Ancestors come before the row in document order but are not headers of it.
        ancestors = {id(parent) for parent in self._tag.parents}
        for candidate in self._tag.find_all_previous(is_day_header):
            if id(candidate) not in ancestors:
                return candidate.get_text()
        return None

    async def participant_text(self, side: Side) -> Optional[str]:
        selector = (
            self._selectors.home_participant if side == "home" else self._selectors.away_participant
        )
        return _first_text(self._tag, selector)

    async def score_text(self, side: Side) -> Optional[str]:
        selector = self._selectors.home_score if side == "home" else self._selectors.away_score
        return _first_text(self._tag, selector)


class SoupResultsPage:
    def __init__(self, soup: BeautifulSoup, url: str, selectors: Selectors) -> None:
        self._soup = soup
        self.url = url
        self._selectors = selectors

    async def dismiss_consent(self, timeout_ms: int) -> None:
        return None

    async def wait_for_match_list(self, timeout_ms: int) -> None:
        if self._soup.select_one(self._selectors.match_list) is None:
            raise MatchListNotFoundError(self.url)

    async def rows(self) -> List[SoupRow]:
        return [SoupRow(tag, self._selectors) for tag in self._soup.select(self._selectors.row)]

    async def heading(self) -> Optional[str]:
        return _first_text(self._soup, self._selectors.heading)


class SnapshotSession:
    """Async context manager loading results pages without a browser."""

    def __init__(self, selectors: Selectors) -> None:
        self._selectors = selectors

    async def __aenter__(self) -> "SnapshotSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def load(self, url: str) -> SoupResultsPage:
        if urlparse(url).scheme in {"http", "https"}:
            html_text = await asyncio.to_thread(fetch_html, url)
        else:
            html_text = _read_local(url)
        soup = BeautifulSoup(html_text, "html.parser")
        return SoupResultsPage(soup, url, self._selectors)
