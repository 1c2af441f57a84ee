"""Build a daily Markdown recap of finished matches from Flashscore results pages."""

from .config import RecapConfig, Selectors, load_config
from .dates import DateTokens, resolve_target_day, tokens_for
from .models import UNKNOWN_COMPETITION, CompetitionBucket, MatchResult
from .report import build_report
from .rows import classify_row, extract_match
from .runner import collect_buckets, run
from .scraper import MatchListNotFoundError, scrape_competition

__all__ = [
    "CompetitionBucket",
    "DateTokens",
    "MatchListNotFoundError",
    "MatchResult",
    "RecapConfig",
    "Selectors",
    "UNKNOWN_COMPETITION",
    "build_report",
    "classify_row",
    "collect_buckets",
    "extract_match",
    "load_config",
    "resolve_target_day",
    "run",
    "scrape_competition",
    "tokens_for",
]
