import random
from datetime import date, timedelta

import pytest

from analytics.metrics import (
    calculate_golf_stats,
    calculate_performance_metrics,
    scrambling_percentage,
)
from analytics.narrative import FirstPhraseSelector, RandomPhraseSelector, TREND_PHRASES, generate_insight
from analytics.personas import (
    DEVELOPING_PLAYER,
    ELITE_BALL_STRIKER,
    FAIRWAY_FINDER,
    IMPROVING_BEGINNER,
    PUTTING_MACHINE,
    SCRAMBLER,
    RuleBasedPersonaClassifier,
    classify_persona,
    select_persona_name,
)
from analytics.trends import (
    build_trends,
    calculate_trend,
    recent_trends,
    round_half_up,
    trend_series,
)
from models import HoleRecord, PerformanceMetrics, PersonaSource, Round, TrendDirection


def _rounds_newest_first(scores, fairways=None, gir=None, putts=None):
    """Helper: rounds as the repository returns them (most recent first)."""
    start = date(2024, 1, 1)
    rounds = []
    for i, score in enumerate(scores):
        rounds.append(Round(
            id=f"r{i}",
            score=score,
            fairways_hit=fairways[i] if fairways else None,
            greens_in_regulation=gir[i] if gir else None,
            putts=putts[i] if putts else None,
            round_date=start + timedelta(days=i),
        ))
    rounds.reverse()
    return rounds


# ================================================================
# calculate_trend
# ================================================================

def test_scores_going_down_is_improving():
    result = calculate_trend([90, 88, 86, 84], lower_is_better=True)
    assert result.trend == TrendDirection.IMPROVING
    assert result.percentage == -4     # (85 - 89) / 89 = -4.49%


def test_higher_is_better_metric_improves_when_rising():
    result = calculate_trend([5, 6])
    assert result.trend == TrendDirection.IMPROVING
    assert result.percentage == 20


def test_higher_is_better_metric_declines_when_falling():
    result = calculate_trend([10, 10, 8, 8])
    assert result.trend == TrendDirection.DECLINING
    assert result.percentage == -20


def test_scores_going_up_is_declining():
    result = calculate_trend([80, 80, 90, 90], lower_is_better=True)
    assert result.trend == TrendDirection.DECLINING
    assert result.percentage == 13     # 12.5% rounds half up


def test_flat_series_is_stable():
    result = calculate_trend([7, 7, 7, 7])
    assert result.trend == TrendDirection.STABLE
    assert result.percentage == 0


def test_small_change_is_stable_but_reports_percentage():
    # 100 -> 102 is +2%, under the 3% threshold
    result = calculate_trend([100, 102])
    assert result.trend == TrendDirection.STABLE
    assert result.percentage == 2


def test_threshold_uses_unrounded_change():
    # +2.9% rounds to 3 but stays below the threshold
    result = calculate_trend([1000, 1029])
    assert result.trend == TrendDirection.STABLE
    assert result.percentage == 3


@pytest.mark.parametrize("data", [[], [85]])
def test_fewer_than_two_samples_is_stable(data):
    result = calculate_trend(data)
    assert result.trend == TrendDirection.STABLE
    assert result.percentage == 0


def test_zero_baseline_is_stable():
    result = calculate_trend([0, 0, 4, 6])
    assert result.trend == TrendDirection.STABLE
    assert result.percentage == 0


def test_vanishing_baseline_is_stable():
    # 1e-320 is non-zero but the percent change overflows to infinity
    result = calculate_trend([1e-320, 1.0])
    assert result.trend == TrendDirection.STABLE
    assert result.percentage == 0


def test_odd_length_gives_newer_half_the_extra_sample():
    # halves are [10] and [10, 13]: avg 11.5 -> +15%
    result = calculate_trend([10, 10, 13])
    assert result.trend == TrendDirection.IMPROVING
    assert result.percentage == 15


def test_round_half_up_matches_display_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(-4.49) == -4
    assert round_half_up(12.5) == 13


# ================================================================
# Narrative
# ================================================================

def test_generate_insight_sentences():
    first = FirstPhraseSelector()
    assert generate_insight("Scoring", TrendDirection.IMPROVING, "scoring", -4, first) == (
        "Your scoring shows a -4% improvement. The practice is paying off!"
    )
    assert generate_insight("Putting", TrendDirection.DECLINING, "putting", 5, first) == (
        "Your putting shows a 5% decline. "
        "Consider focusing on putting in your next practice session."
    )
    assert generate_insight("GIR", TrendDirection.STABLE, "approach play", 1, first) == (
        "Your approach play has remained consistent over the last 10 rounds. "
        "Keep working on consistency."
    )


def test_random_selector_draws_from_the_bank():
    selector = RandomPhraseSelector(random.Random(7))
    for _ in range(20):
        text = generate_insight("Fairways", TrendDirection.DECLINING, "accuracy off the tee", -8, selector)
        assert any(f"-8% {word}." in text for word in TREND_PHRASES[TrendDirection.DECLINING])


# ================================================================
# build_trends / trend_series
# ================================================================

def test_build_trends_labels_and_order():
    trends = build_trends(
        scores=[90, 88, 86, 84],
        fairways=[5, 6],
        gir=[7, 7, 7, 7],
        putts=[],
        selector=FirstPhraseSelector(),
    )
    assert [t.label for t in trends] == ["Scoring", "Fairways Hit", "Greens in Regulation", "Putting"]

    scoring, fairways, gir, putting = trends
    assert scoring.trend == TrendDirection.IMPROVING
    assert scoring.percentage == -4
    assert scoring.insight == "Your scoring shows a -4% improvement. The practice is paying off!"
    assert fairways.trend == TrendDirection.IMPROVING
    assert "accuracy off the tee" in fairways.insight
    assert gir.trend == TrendDirection.STABLE
    assert putting.trend == TrendDirection.STABLE
    assert putting.percentage == 0


def test_more_putts_reads_as_improving():
    trends = build_trends([], [], [], [30, 30, 33, 33], FirstPhraseSelector())
    assert trends[3].trend == TrendDirection.IMPROVING


def test_trend_series_is_chronological_and_windowed():
    rounds = _rounds_newest_first(
        [95, 94, 93, 92, 91, 90, 89, 88, 87, 86, 85, 84],
        putts=[36, 35, 34, 33, 32, 31, 30, 29, 28, 27, 26, 25],
    )
    series = trend_series(rounds, window=10)
    assert series["scores"] == [93, 92, 91, 90, 89, 88, 87, 86, 85, 84]
    assert series["putts"][0] == 34
    assert series["fairways"] == [0] * 10


def test_recent_trends_labels():
    rounds = _rounds_newest_first([92, 90, 86, 84], fairways=[6, 6, 9, 9], gir=[5, 5, 5, 5], putts=[34, 34, 30, 30])
    labels = recent_trends(rounds)
    assert labels.score_trend == TrendDirection.IMPROVING
    assert labels.fairway_trend == TrendDirection.IMPROVING
    assert labels.green_trend == TrendDirection.STABLE
    assert labels.putting_trend == TrendDirection.DECLINING


# ================================================================
# Metrics
# ================================================================

def test_performance_metrics_averages():
    rounds = [
        Round(score=80, fairways_hit=8, greens_in_regulation=10, putts=30),
        Round(score=90, fairways_hit=6, greens_in_regulation=6, putts=34),
    ]
    m = calculate_performance_metrics(rounds)
    assert m.avg_score == 85
    assert m.avg_fairways_hit == 7
    assert m.avg_greens_in_regulation == 8
    assert m.avg_putts == 32
    assert m.rounds_analyzed == 2
    assert m.scrambling_percentage == 0
    assert m.recent_trends is None


def test_untracked_counts_average_as_zero():
    rounds = [Round(score=80, putts=30), Round(score=90)]
    m = calculate_performance_metrics(rounds)
    assert m.avg_putts == 15
    assert m.avg_fairways_hit == 0


def test_empty_rounds_give_zero_metrics():
    m = calculate_performance_metrics([])
    assert m.rounds_analyzed == 0
    assert m.avg_score == 0


def test_scrambling_percentage_counts_missed_greens():
    holes = [
        HoleRecord(strokes=4, putts=2, green="hit"),    # not a chance
        HoleRecord(strokes=2, putts=1, green="miss"),   # save
        HoleRecord(strokes=5, putts=2, green="miss"),   # chance, no save
        HoleRecord(strokes=6, putts=3, green="miss"),   # chance, no save
    ]
    rounds = [Round(score=80, hole_by_hole_data=holes), Round(score=82)]
    assert scrambling_percentage(rounds) == pytest.approx(100 / 3)


def test_scrambling_without_chances_is_zero():
    rounds = [Round(score=80, hole_by_hole_data=[HoleRecord(strokes=4, putts=2, green="hit")])]
    assert scrambling_percentage(rounds) == 0


def test_golf_stats_summary():
    rounds = _rounds_newest_first(
        [88, 85, 81],
        fairways=[7, 7, 7],
        gir=[9, 9, 9],
        putts=[32, 31, 31],
    )
    stats = calculate_golf_stats(rounds)
    assert stats.average_score == 85      # 84.67
    assert stats.rounds_played == 3
    assert stats.fairways_hit_percentage == 50
    assert stats.greens_in_regulation_percentage == 50
    assert stats.average_putts == 31.3
    assert stats.best_score == 81
    assert stats.worst_score == 88
    assert stats.score_trend == [88, 85, 81]


def test_golf_stats_empty():
    stats = calculate_golf_stats([])
    assert stats.rounds_played == 0
    assert stats.best_score is None


# ================================================================
# Personas
# ================================================================

def _metrics(score, fairways=0.0, gir=0.0, putts=40.0, scrambling=0.0):
    return PerformanceMetrics(
        avg_score=score,
        avg_fairways_hit=fairways,
        avg_greens_in_regulation=gir,
        avg_putts=putts,
        scrambling_percentage=scrambling,
        rounds_analyzed=5,
    )


@pytest.mark.parametrize("metrics, expected", [
    (_metrics(78, gir=13, putts=28), ELITE_BALL_STRIKER),
    (_metrics(78, gir=10, putts=31, scrambling=65), SCRAMBLER),
    (_metrics(83, gir=8, putts=29), PUTTING_MACHINE),
    (_metrics(88, fairways=9, putts=33), FAIRWAY_FINDER),
    (_metrics(92, fairways=5, putts=34), DEVELOPING_PLAYER),
    (_metrics(101, fairways=9, putts=29), IMPROVING_BEGINNER),
])
def test_persona_ladder(metrics, expected):
    assert select_persona_name(metrics) == expected


def test_earlier_rung_wins():
    # qualifies for Elite Ball Striker and Putting Machine
    assert select_persona_name(_metrics(79, gir=13, putts=29, scrambling=70)) == ELITE_BALL_STRIKER


def test_boundaries_are_strict():
    assert select_persona_name(_metrics(80, gir=13, putts=28)) != ELITE_BALL_STRIKER
    assert select_persona_name(_metrics(95)) == IMPROVING_BEGINNER


def test_classify_persona_is_deterministic():
    metrics = _metrics(78, gir=13, putts=28)
    first = classify_persona(metrics, "u1")
    second = RuleBasedPersonaClassifier().classify(metrics, "u1")

    assert first.persona_name == "Elite Ball Striker"
    assert first.source == PersonaSource.RULES
    assert first.model_dump() == second.model_dump()
    assert len(first.strengths) == 3
    assert first.practice_focus
