"""Trend analysis endpoint."""

from fastapi import APIRouter, Depends

from analytics.narrative import PhraseSelector
from analytics.trends import build_trends
from api.dependencies import get_phrase_selector
from api.schemas import TrendsRequest, TrendsResponse

router = APIRouter()


@router.post("", response_model=TrendsResponse)
async def analyze_trends(
    req: TrendsRequest,
    selector: PhraseSelector = Depends(get_phrase_selector),
):
    trends = build_trends(req.scores, req.fairways, req.gir, req.putts, selector)
    return TrendsResponse(trends=trends)
