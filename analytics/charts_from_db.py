from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import List

from analytics.visualizations import plot_metric_trends, plot_score_trend
from database.connection import DatabasePool
from database.db_manager import DatabaseManager
from models.round import Round

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate performance charts for a golfer from PostgreSQL data."
    )
    parser.add_argument("--user-id", required=True, help="User id (UUID) in golf.rounds")
    parser.add_argument(
        "--outdir",
        default="analytics/output",
        help="Directory where chart PNGs are written",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=200,
        help="Max rounds to load for the golfer",
    )
    parser.add_argument(
        "--dsn",
        default=None,
        help="Optional PostgreSQL DSN. If omitted, uses connection defaults.",
    )
    return parser.parse_args()


async def _load_rounds(user_id: str, dsn: str | None, limit: int) -> List[Round]:
    pool = DatabasePool()
    await pool.initialize(dsn=dsn)
    db = DatabaseManager(pool.pool)
    try:
        rounds = await db.rounds.get_rounds_for_user(user_id, limit=limit)
        if not rounds:
            raise RuntimeError(f"No rounds found for user: {user_id}")
        # Repository order is newest first; charts read left to right.
        rounds.reverse()
        return rounds
    finally:
        await pool.close()


async def main_async() -> None:
    args = _parse_args()
    rounds = await _load_rounds(args.user_id, args.dsn, args.limit)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []

    fig, _ = plot_score_trend(rounds)
    score_path = outdir / "score_trend.png"
    fig.savefig(score_path, dpi=150)
    written.append(score_path)

    if len(rounds) >= 2:
        fig, _ = plot_metric_trends(rounds)
        trends_path = outdir / "metric_trends.png"
        fig.savefig(trends_path, dpi=150)
        written.append(trends_path)
    else:
        logger.info("Skipping metric trends chart: needs at least two rounds.")

    logger.info("Generated %d chart(s) for %s", len(written), args.user_id)
    for path in written:
        print(path.resolve())


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    asyncio.run(main_async())


if __name__ == "__main__":
    main()
