from __future__ import annotations

import math
from typing import Optional, Sequence

from models.round import Round


def _load_plt():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for visualizations. Install it with: pip install matplotlib"
        ) from exc
    return plt


def _default_labels(rounds: Sequence[Round]) -> list[str]:
    labels: list[str] = []
    for index, round_obj in enumerate(rounds, start=1):
        if round_obj.round_date:
            labels.append(round_obj.round_date.isoformat())
        else:
            labels.append(f"R{index}")
    return labels


def _apply_sparse_xticks(ax, labels: Sequence[str], max_labels: int = 12) -> None:
    """
    Keep x-axis readable when there are many rounds.

    Shows at most `max_labels` ticks while preserving order.
    """
    count = len(labels)
    if count <= max_labels:
        ax.set_xticks(range(count))
        ax.set_xticklabels(labels, rotation=45, ha="right")
        return

    step = math.ceil(count / max_labels)
    tick_positions = list(range(0, count, step))
    if tick_positions[-1] != count - 1:
        # Always label the latest round without going over the cap
        if len(tick_positions) == max_labels:
            tick_positions[-1] = count - 1
        else:
            tick_positions.append(count - 1)

    tick_labels = [labels[i] for i in tick_positions]
    ax.set_xticks(tick_positions)
    ax.set_xticklabels(tick_labels, rotation=45, ha="right")


def plot_score_trend(rounds: Sequence[Round], labels: Optional[Sequence[str]] = None):
    """
    Line chart of score per round with the running average.

    `rounds` should be in chronological order (oldest first).
    """
    plt = _load_plt()
    x_labels = list(labels) if labels is not None else _default_labels(rounds)
    x = list(range(len(x_labels)))
    scores = [r.score for r in rounds]

    running: list[float] = []
    total = 0
    for i, score in enumerate(scores, start=1):
        total += score
        running.append(total / i)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(x, scores, marker="o", linewidth=1.5, label="Score")
    ax.plot(x, running, linestyle="--", color="gray", label="Running Average")
    ax.set_title("Score Trend")
    ax.set_xlabel("Round")
    ax.set_ylabel("Score")
    _apply_sparse_xticks(ax, x_labels)
    ax.grid(axis="y", alpha=0.2)
    ax.legend(loc="upper right")
    fig.tight_layout()
    return fig, ax


def plot_metric_trends(rounds: Sequence[Round], labels: Optional[Sequence[str]] = None):
    """
    Four panels, one per primary metric: score, fairways hit, GIR and putts.

    Untracked counts are drawn as zero, matching how they are averaged.
    """
    plt = _load_plt()
    x_labels = list(labels) if labels is not None else _default_labels(rounds)
    x = list(range(len(x_labels)))
    panels = [
        ("Score", [r.score for r in rounds]),
        ("Fairways Hit", [r.fairways_hit_or_zero() for r in rounds]),
        ("Greens in Regulation", [r.greens_in_regulation_or_zero() for r in rounds]),
        ("Putts", [r.putts_or_zero() for r in rounds]),
    ]

    fig, axes = plt.subplots(2, 2, figsize=(12, 8), sharex=True)
    for ax, (title, values) in zip(axes.flat, panels):
        ax.plot(x, values, marker="o", linewidth=1.5)
        ax.set_title(title)
        ax.grid(axis="y", alpha=0.2)
    for ax in axes[1]:
        _apply_sparse_xticks(ax, x_labels)
        ax.set_xlabel("Round")

    fig.suptitle("Performance Trends")
    fig.tight_layout()
    return fig, axes
