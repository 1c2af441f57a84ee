"""Markdown rendering of the daily recap."""
from __future__ import annotations

import math
import unicodedata
from datetime import date
from pathlib import Path
from typing import Iterable, List, Tuple

from .dates import format_day_label
from .models import CompetitionBucket, MatchResult, Score

TITLE_PREFIX = "Daily Recap"
WINNER_MARK = "(W)"
LOSER_MARK = "(L)"


def collation_key(value: str) -> Tuple[str, str]:
    normalized = unicodedata.normalize("NFKD", value)
    stripped = "".join(char for char in normalized if not unicodedata.combining(char))
    return stripped.casefold(), value


def format_score(value: Score) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


def format_match_line(match: MatchResult) -> str:
    score = f"Final score: {format_score(match.home_score)}–{format_score(match.away_score)}"
    if match.winner_home:
        return f"**{match.home} {WINNER_MARK}** – {match.away} {LOSER_MARK} {score}"
    return f"{match.home} {LOSER_MARK} – **{match.away} {WINNER_MARK}** {score}"


def sort_buckets(buckets: Iterable[CompetitionBucket]) -> List[CompetitionBucket]:
    non_empty = [bucket for bucket in buckets if not bucket.is_empty]
    return sorted(non_empty, key=lambda bucket: collation_key(bucket.competition))


def build_report(buckets: Iterable[CompetitionBucket], target_day: date) -> str:
    lines: List[str] = [f"{TITLE_PREFIX} – {format_day_label(target_day)}", ""]
    for bucket in sort_buckets(buckets):
        lines.append(f"### {bucket.competition}")
        lines.extend(format_match_line(match) for match in bucket.matches)
        lines.append("")
    return "\n".join(lines).strip() + "\n"


def report_path(output_dir: Path, target_day: date) -> Path:
    return output_dir / f"recap-{format_day_label(target_day)}.md"


def write_report(text: str, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
