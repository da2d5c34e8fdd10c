import sys
from datetime import date, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from analytics import charts_from_db  # noqa: E402
from analytics.visualizations import (  # noqa: E402
    _apply_sparse_xticks,
    _default_labels,
    plot_metric_trends,
    plot_score_trend,
)
from models import Round  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def _rounds():
    """Helper: chronological rounds, the second without tracked counts."""
    return [
        Round(score=90, fairways_hit=6, greens_in_regulation=5, putts=34, round_date=date(2024, 4, 1)),
        Round(score=86),
        Round(score=82, fairways_hit=9, greens_in_regulation=10, putts=30, round_date=date(2024, 4, 15)),
    ]


def test_default_labels_use_dates_or_position():
    assert _default_labels(_rounds()) == ["2024-04-01", "R2", "2024-04-15"]


def test_plot_metric_trends_draws_four_panels():
    fig, axes = plot_metric_trends(_rounds())

    assert axes.shape == (2, 2)
    assert [ax.get_title() for ax in axes.flat] == [
        "Score", "Fairways Hit", "Greens in Regulation", "Putts",
    ]
    assert list(axes.flat[0].lines[0].get_ydata()) == [90, 86, 82]
    # Untracked counts are drawn as zero
    assert list(axes.flat[1].lines[0].get_ydata()) == [6, 0, 9]
    assert list(axes.flat[3].lines[0].get_ydata()) == [34, 0, 30]


def test_plot_score_trend_running_average():
    fig, ax = plot_score_trend(_rounds(), labels=["a", "b", "c"])

    score_line, average_line = ax.lines
    assert list(score_line.get_ydata()) == [90, 86, 82]
    assert list(average_line.get_ydata()) == [90, 88, 86]
    assert ax.get_title() == "Score Trend"


@pytest.mark.parametrize("count", [5, 12, 13, 24, 30, 61])
def test_sparse_xticks_are_capped(count):
    fig, ax = plt.subplots()
    labels = [f"R{i}" for i in range(1, count + 1)]

    _apply_sparse_xticks(ax, labels, max_labels=12)
    fig.canvas.draw()

    ticks = list(ax.get_xticks())
    assert len(ticks) <= 12
    assert ticks[0] == 0
    assert ticks[-1] == count - 1
    assert ax.get_xticklabels()[-1].get_text() == labels[-1]


@pytest.mark.asyncio
async def test_charts_from_db_writes_pngs(monkeypatch, tmp_path):
    newest_first = list(reversed(_rounds()))

    pool = MagicMock()
    pool.initialize = AsyncMock()
    pool.close = AsyncMock()
    manager = MagicMock()
    manager.rounds.get_rounds_for_user = AsyncMock(return_value=newest_first)

    monkeypatch.setattr(charts_from_db, "DatabasePool", MagicMock(return_value=pool))
    monkeypatch.setattr(charts_from_db, "DatabaseManager", MagicMock(return_value=manager))
    monkeypatch.setattr(sys, "argv", [
        "golf-charts", "--user-id", "u1", "--outdir", str(tmp_path), "--limit", "50",
    ])

    await charts_from_db.main_async()

    assert (tmp_path / "score_trend.png").exists()
    assert (tmp_path / "metric_trends.png").exists()
    manager.rounds.get_rounds_for_user.assert_awaited_once_with("u1", limit=50)
    pool.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_charts_from_db_without_rounds(monkeypatch, tmp_path):
    pool = MagicMock()
    pool.initialize = AsyncMock()
    pool.close = AsyncMock()
    manager = MagicMock()
    manager.rounds.get_rounds_for_user = AsyncMock(return_value=[])

    monkeypatch.setattr(charts_from_db, "DatabasePool", MagicMock(return_value=pool))
    monkeypatch.setattr(charts_from_db, "DatabaseManager", MagicMock(return_value=manager))
    monkeypatch.setattr(sys, "argv", ["golf-charts", "--user-id", "u1", "--outdir", str(tmp_path)])

    with pytest.raises(RuntimeError):
        await charts_from_db.main_async()
    pool.close.assert_awaited_once()
