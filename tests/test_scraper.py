"""Tests for flashscore_recap.scraper against fake pages."""

import asyncio

import pytest

from conftest import FakePage, FakeRow, FakeSession
from flashscore_recap.dates import tokens_for
from flashscore_recap.models import UNKNOWN_COMPETITION, MatchResult
from flashscore_recap.scraper import MatchListNotFoundError, scrape_competition

URL = 'https://example.test/baseball/cuba/serie-nacional/results/'


def _scrape(page, target_day):
    session = FakeSession({URL: page})
    return asyncio.run(scrape_competition(session, URL, tokens_for(target_day)))


class TestScrapeCompetition:

    def test_keeps_finished_rows_of_target_day_in_page_order(self, target_day):
        page = FakePage(row_list=[
            FakeRow(home='Tigers', away='Lions', home_score='4', away_score='2'),
            FakeRow(status_text='event__match event__match--scheduled', home='A', away='B'),
            FakeRow(own_date='08.11. 18:00', home='C', away='D'),
            FakeRow(own_date=None, header_date='09.11.', home='Industriales', away='Santiago',
                    home_score='3', away_score='5'),
        ])
        bucket = _scrape(page, target_day)
        assert bucket.competition == 'Serie Nacional'
        assert bucket.matches == [
            MatchResult('Tigers', 'Lions', 4, 2, True),
            MatchResult('Industriales', 'Santiago', 3, 5, False),
        ]

    def test_rejected_rows_are_not_extracted(self, target_day):
        scheduled = FakeRow(status_text='event__match event__match--live')
        other_day = FakeRow(own_date='10.11.')
        _scrape(FakePage(row_list=[scheduled, other_day]), target_day)
        assert scheduled.reads == ['status']
        assert not any(read.startswith('participant') for read in other_day.reads)

    def test_incomplete_rows_are_dropped(self, target_day):
        page = FakePage(row_list=[FakeRow(away_score=None), FakeRow(home='Leones')])
        bucket = _scrape(page, target_day)
        assert [match.home for match in bucket.matches] == ['Leones']

    def test_empty_bucket_is_still_returned(self, target_day):
        bucket = _scrape(FakePage(row_list=[]), target_day)
        assert bucket.competition == 'Serie Nacional'
        assert bucket.matches == []

    @pytest.mark.parametrize('title', [None, '', '   '])
    def test_unreadable_heading_uses_sentinel(self, target_day, title):
        bucket = _scrape(FakePage(row_list=[FakeRow()], title=title), target_day)
        assert bucket.competition == UNKNOWN_COMPETITION
        assert len(bucket.matches) == 1

    def test_heading_is_trimmed(self, target_day):
        bucket = _scrape(FakePage(title='  LIDOM \n'), target_day)
        assert bucket.competition == 'LIDOM'

    def test_consent_is_attempted(self, target_day):
        page = FakePage()
        _scrape(page, target_day)
        assert page.consent_attempts == 1

    def test_missing_match_list_raises(self, target_day):
        with pytest.raises(MatchListNotFoundError) as excinfo:
            _scrape(FakePage(has_match_list=False, row_list=[FakeRow()]), target_day)
        assert excinfo.value.url == URL
        assert URL in str(excinfo.value)
