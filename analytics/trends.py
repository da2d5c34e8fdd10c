from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence

from models.metrics import RecentTrends
from models.round import Round
from models.trend import Trend, TrendDirection, TrendResult

from .narrative import PhraseSelector, generate_insight

# Percent change below which a metric is reported as stable.
TREND_THRESHOLD = 3

DEFAULT_TREND_WINDOW = 10


@dataclass(frozen=True)
class TrendMetric:
    """How one metric is labelled, worded and judged."""
    key: str
    label: str
    insight_label: str
    display_name: str
    lower_is_better: bool = False


TREND_METRICS: List[TrendMetric] = [
    TrendMetric("scores", "Scoring", "Scoring", "scoring", lower_is_better=True),
    TrendMetric("fairways", "Fairways Hit", "Fairways", "accuracy off the tee"),
    TrendMetric("gir", "Greens in Regulation", "GIR", "approach play"),
    TrendMetric("putts", "Putting", "Putting", "putting"),
]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity (-4.5 -> -4)."""
    return int(math.floor(value + 0.5))


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def calculate_trend(data: Sequence[float], lower_is_better: bool = False) -> TrendResult:
    """
    Compare the older and newer halves of a chronological series.

    The series is split at ``len(data) // 2``; with an odd length the newer
    half gets the extra sample. A zero baseline, or one so small that the
    percent change overflows, has no meaningful percent change and is
    reported as stable.
    """
    if len(data) < 2:
        return TrendResult(trend=TrendDirection.STABLE, percentage=0)

    mid = len(data) // 2
    first_avg = _mean(data[:mid])
    second_avg = _mean(data[mid:])

    if first_avg == 0:
        return TrendResult(trend=TrendDirection.STABLE, percentage=0)

    change = (second_avg - first_avg) / first_avg * 100
    if not math.isfinite(change):
        return TrendResult(trend=TrendDirection.STABLE, percentage=0)
    percentage = round_half_up(change)

    if abs(change) < TREND_THRESHOLD:
        return TrendResult(trend=TrendDirection.STABLE, percentage=percentage)

    improved = change < 0 if lower_is_better else change > 0
    return TrendResult(
        trend=TrendDirection.IMPROVING if improved else TrendDirection.DECLINING,
        percentage=percentage,
    )


def build_trends(
    scores: Sequence[float],
    fairways: Sequence[float],
    gir: Sequence[float],
    putts: Sequence[float],
    selector: PhraseSelector,
) -> List[Trend]:
    """Trend and display sentence for each of the four primary metrics."""
    series = {"scores": scores, "fairways": fairways, "gir": gir, "putts": putts}
    trends: List[Trend] = []
    for metric in TREND_METRICS:
        result = calculate_trend(series[metric.key], lower_is_better=metric.lower_is_better)
        trends.append(
            Trend(
                label=metric.label,
                trend=result.trend,
                percentage=result.percentage,
                insight=generate_insight(
                    metric.insight_label,
                    result.trend,
                    metric.display_name,
                    result.percentage,
                    selector,
                ),
            )
        )
    return trends


def trend_series(
    rounds: Sequence[Round], window: int = DEFAULT_TREND_WINDOW
) -> Dict[str, List[int]]:
    """
    Chronological metric series for the newest ``window`` rounds.

    ``rounds`` must be ordered most-recent-first, as the repository returns
    them. Untracked counts are reported as zero.
    """
    recent = list(rounds[:window])
    recent.reverse()
    return {
        "scores": [r.score for r in recent],
        "fairways": [r.fairways_hit_or_zero() for r in recent],
        "gir": [r.greens_in_regulation_or_zero() for r in recent],
        "putts": [r.putts_or_zero() for r in recent],
    }


def recent_trends(
    rounds: Sequence[Round], window: int = DEFAULT_TREND_WINDOW
) -> RecentTrends:
    """Trend labels for the newest ``window`` rounds (most-recent-first input)."""
    series = trend_series(rounds, window)
    labels = {
        metric.key: calculate_trend(series[metric.key], metric.lower_is_better).trend
        for metric in TREND_METRICS
    }
    return RecentTrends(
        score_trend=labels["scores"],
        fairway_trend=labels["fairways"],
        green_trend=labels["gir"],
        putting_trend=labels["putts"],
    )
