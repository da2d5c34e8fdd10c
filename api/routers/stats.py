"""Stats/dashboard API endpoints."""

from fastapi import APIRouter, Depends, Query
from typing import List

from analytics.metrics import calculate_golf_stats, calculate_performance_metrics
from analytics.narrative import PhraseSelector
from analytics.trends import build_trends, recent_trends, trend_series
from api.dependencies import get_db, get_phrase_selector
from api.schemas import DashboardResponse
from database.db_manager import DatabaseManager
from models import Round

router = APIRouter()

ROUNDS_PAGE_SIZE = 500


async def load_all_rounds(db: DatabaseManager, user_id: str) -> List[Round]:
    """Every round the user has logged, most recent first, read page by page."""
    rounds: List[Round] = []
    offset = 0
    while True:
        page = await db.rounds.get_rounds_for_user(
            user_id, limit=ROUNDS_PAGE_SIZE, offset=offset
        )
        rounds.extend(page)
        if len(page) < ROUNDS_PAGE_SIZE:
            return rounds
        offset += ROUNDS_PAGE_SIZE


@router.get("/dashboard/{user_id}", response_model=DashboardResponse)
async def get_dashboard(
    user_id: str,
    window: int = Query(10, ge=2, le=50),
    db: DatabaseManager = Depends(get_db),
    selector: PhraseSelector = Depends(get_phrase_selector),
):
    all_rounds = await load_all_rounds(db, user_id)
    series = trend_series(all_rounds, window)

    return DashboardResponse(
        stats=calculate_golf_stats(all_rounds, window),
        metrics=calculate_performance_metrics(
            all_rounds, recent_trends=recent_trends(all_rounds, window)
        ),
        trends=build_trends(
            series["scores"], series["fairways"], series["gir"], series["putts"], selector
        ),
        recent_rounds=all_rounds[:5],
    )
