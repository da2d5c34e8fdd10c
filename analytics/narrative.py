"""Short display sentences describing a metric's trend."""

from __future__ import annotations

import random
from typing import Dict, Optional, Protocol, Sequence, Tuple

from models.trend import TrendDirection

TREND_PHRASES: Dict[TrendDirection, Tuple[str, ...]] = {
    TrendDirection.IMPROVING: ("improvement", "better", "progressing"),
    TrendDirection.DECLINING: ("decline", "struggling", "challenges"),
    TrendDirection.STABLE: ("consistent", "steady", "maintaining"),
}


class PhraseSelector(Protocol):
    """Picks one phrase from a bank. Injected so wording can be made deterministic."""

    def choose(self, phrases: Sequence[str]) -> str:
        ...


class RandomPhraseSelector:
    """Uniform random choice, optionally from a seeded generator."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def choose(self, phrases: Sequence[str]) -> str:
        return self._rng.choice(list(phrases))


class FirstPhraseSelector:
    """Always returns the first phrase."""

    def choose(self, phrases: Sequence[str]) -> str:
        return phrases[0]


def generate_insight(
    label: str,
    trend: TrendDirection,
    metric: str,
    percentage: int,
    selector: PhraseSelector,
) -> str:
    """Render one sentence about ``metric`` for the given trend direction.

    ``label`` identifies the metric row and does not appear in the text.
    """
    trend = TrendDirection(trend)
    word = selector.choose(TREND_PHRASES[trend])

    if trend == TrendDirection.STABLE:
        return (
            f"Your {metric} has remained {word} over the last 10 rounds. "
            "Keep working on consistency."
        )
    if trend == TrendDirection.IMPROVING:
        return f"Your {metric} shows a {percentage}% {word}. The practice is paying off!"
    return (
        f"Your {metric} shows a {percentage}% {word}. "
        f"Consider focusing on {metric} in your next practice session."
    )
