"""Playwright-backed results pages.

One Chromium instance and one page serve the whole run. Every read goes
through :func:`_first_text` / :func:`_attribute`, which answer ``None`` instead
of raising when an element is missing, detached or slow.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from playwright.async_api import (
    Browser,
    Error as PlaywrightError,
    Locator,
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeoutError,
    async_playwright,
)

from .config import Selectors
from .rows import Side
from .scraper import MatchListNotFoundError

LOGGER = logging.getLogger(__name__)

READ_TIMEOUT_MS = 1000
NAVIGATION_TIMEOUT_MS = 30000


async def _first_text(locator: Locator) -> Optional[str]:
    try:
        if await locator.count() == 0:
            return None
        return await locator.first.text_content(timeout=READ_TIMEOUT_MS)
    except PlaywrightError:
        return None


async def _attribute(locator: Locator, name: str) -> Optional[str]:
    try:
        return await locator.get_attribute(name, timeout=READ_TIMEOUT_MS)
    except PlaywrightError:
        return None


class PlaywrightRow:
    def __init__(self, locator: Locator, selectors: Selectors) -> None:
        self._locator = locator
        self._selectors = selectors

    async def status(self) -> Optional[str]:
        return await _attribute(self._locator, "class")

    async def own_date_text(self) -> Optional[str]:
        return await _first_text(self._locator.locator(self._selectors.row_time))

    async def header_date_text(self) -> Optional[str]:
        # preceding:: is in document order, so the last hit is the nearest header.
        headers = self._locator.locator(
            f'xpath=preceding::div[contains(@class, "{self._selectors.day_header_class}")]'
        )
        try:
            if await headers.count() == 0:
                return None
            return await headers.last.text_content(timeout=READ_TIMEOUT_MS)
        except PlaywrightError:
            return None

    async def participant_text(self, side: Side) -> Optional[str]:
        selector = (
            self._selectors.home_participant if side == "home" else self._selectors.away_participant
        )
        return await _first_text(self._locator.locator(selector))

    async def score_text(self, side: Side) -> Optional[str]:
        selector = self._selectors.home_score if side == "home" else self._selectors.away_score
        return await _first_text(self._locator.locator(selector))


class PlaywrightResultsPage:
    def __init__(self, page: Page, url: str, selectors: Selectors) -> None:
        self._page = page
        self.url = url
        self._selectors = selectors

    async def dismiss_consent(self, timeout_ms: int) -> None:
        try:
            await self._page.locator(self._selectors.consent_button).first.click(timeout=timeout_ms)
        except PlaywrightError as exc:
            LOGGER.debug("No consent dialog dismissed on %s: %s", self.url, exc)

    async def wait_for_match_list(self, timeout_ms: int) -> None:
        try:
            await self._page.wait_for_selector(self._selectors.match_list, timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise MatchListNotFoundError(
                self.url, f"match list did not appear within {timeout_ms} ms"
            ) from exc

    async def rows(self) -> List[PlaywrightRow]:
        locator = self._page.locator(self._selectors.row)
        count = await locator.count()
        return [PlaywrightRow(locator.nth(index), self._selectors) for index in range(count)]

    async def heading(self) -> Optional[str]:
        return await _first_text(self._page.locator(self._selectors.heading))


class PlaywrightSession:
    """Async context manager owning the browser for one run."""

    def __init__(self, selectors: Selectors, *, headless: bool = True) -> None:
        self._selectors = selectors
        self._headless = headless
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> "PlaywrightSession":
        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(headless=self._headless)
            self._page = await self._browser.new_page()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._browser is not None:
            await self._browser.close()
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None
        self._page = None

    async def load(self, url: str) -> PlaywrightResultsPage:
        if self._page is None:
            raise RuntimeError("PlaywrightSession must be entered before loading pages.")
        await self._page.goto(url, wait_until="domcontentloaded", timeout=NAVIGATION_TIMEOUT_MS)
        return PlaywrightResultsPage(self._page, url, self._selectors)
