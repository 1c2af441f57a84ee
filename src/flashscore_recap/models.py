from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

UNKNOWN_COMPETITION = "Unknown competition"

# Scores are ints, or NaN when the page shows something non-numeric.
Score = Union[int, float]


@dataclass(frozen=True)
class MatchResult:
    home: str
    away: str
    home_score: Score
    away_score: Score
    winner_home: bool

    @classmethod
    def from_scores(
        cls, home: str, away: str, home_score: Score, away_score: Score
    ) -> "MatchResult":
        # A tie or a NaN score leaves the home side as the loser.
        return cls(
            home=home,
            away=away,
            home_score=home_score,
            away_score=away_score,
            winner_home=home_score > away_score,
        )


@dataclass
class CompetitionBucket:
    competition: str
    matches: List[MatchResult] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.matches
