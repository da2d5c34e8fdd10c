from __future__ import annotations

from typing import Iterable, Optional, Sequence

from models.metrics import GolfStats, PerformanceMetrics, RecentTrends
from models.round import Round

from .trends import DEFAULT_TREND_WINDOW, round_half_up, trend_series

FAIRWAYS_PER_ROUND = 14
GREENS_PER_ROUND = 18


def scrambling_percentage(rounds: Iterable[Round]) -> float:
    """
    Percent of missed greens that were saved.

    Only rounds logged with a hole-by-hole breakdown contribute. Returns 0.0
    when no missed greens were recorded.
    """
    chances = 0
    saves = 0
    for round_obj in rounds:
        for hole in round_obj.holes():
            if not hole.is_scramble_chance():
                continue
            chances += 1
            if hole.is_successful_scramble():
                saves += 1

    if not chances:
        return 0.0
    return saves / chances * 100


def calculate_performance_metrics(
    rounds: Sequence[Round],
    recent_trends: Optional[RecentTrends] = None,
) -> PerformanceMetrics:
    """
    Average the primary metrics over every round given.

    Untracked fairway, green and putt counts are summed as zero and still
    count toward the denominator.
    """
    count = len(rounds)
    if not count:
        return PerformanceMetrics(recent_trends=recent_trends)

    return PerformanceMetrics(
        avg_score=sum(r.score for r in rounds) / count,
        avg_fairways_hit=sum(r.fairways_hit_or_zero() for r in rounds) / count,
        avg_greens_in_regulation=sum(r.greens_in_regulation_or_zero() for r in rounds) / count,
        avg_putts=sum(r.putts_or_zero() for r in rounds) / count,
        scrambling_percentage=scrambling_percentage(rounds),
        rounds_analyzed=count,
        recent_trends=recent_trends,
    )


def calculate_golf_stats(
    rounds: Sequence[Round], window: int = DEFAULT_TREND_WINDOW
) -> GolfStats:
    """Dashboard summary. ``rounds`` must be ordered most-recent-first."""
    count = len(rounds)
    if not count:
        return GolfStats()

    scores = [r.score for r in rounds]
    total_fairways = sum(r.fairways_hit_or_zero() for r in rounds)
    total_gir = sum(r.greens_in_regulation_or_zero() for r in rounds)
    total_putts = sum(r.putts_or_zero() for r in rounds)
    series = trend_series(rounds, window)

    return GolfStats(
        average_score=round_half_up(sum(scores) / count),
        rounds_played=count,
        fairways_hit_percentage=round_half_up(total_fairways / (count * FAIRWAYS_PER_ROUND) * 100),
        greens_in_regulation_percentage=round_half_up(total_gir / (count * GREENS_PER_ROUND) * 100),
        average_putts=round_half_up(total_putts / count * 10) / 10,
        best_score=min(scores),
        worst_score=max(scores),
        score_trend=series["scores"],
        fairways_trend=series["fairways"],
        gir_trend=series["gir"],
        putts_trend=series["putts"],
    )
