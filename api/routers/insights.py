"""AI insight endpoints: multi-round insights and hole-by-hole analysis."""

import asyncio
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.config import Settings
from api.dependencies import get_llm_client, get_settings
from api.schemas import AnalysisRequest, AnalysisResponse, InsightsRequest, InsightsResponse
from llm.insights_generator import AnalysisError, analyze_hole_by_hole, generate_round_insights

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/insights", response_model=InsightsResponse)
async def generate_insights(
    req: InsightsRequest,
    client=Depends(get_llm_client),
    settings: Settings = Depends(get_settings),
):
    """Insights for the posted rounds; a canned insight when generation fails."""
    # Run the sync Gemini call in the thread pool
    loop = asyncio.get_running_loop()
    insights = await loop.run_in_executor(
        None,
        lambda: generate_round_insights(
            req.rounds,
            client,
            model=settings.gemini_model,
            max_retries=settings.llm_max_retries,
        ),
    )
    return InsightsResponse(success=True, insights=insights)


@router.post(
    "/analysis",
    response_model=AnalysisResponse,
    responses={500: {"description": "Analysis could not be produced"}},
)
async def analyze_holes(
    req: AnalysisRequest,
    client=Depends(get_llm_client),
    settings: Settings = Depends(get_settings),
):
    try:
        loop = asyncio.get_running_loop()
        analysis = await loop.run_in_executor(
            None,
            lambda: analyze_hole_by_hole(
                req.hole_data,
                client,
                model=settings.gemini_model,
                max_retries=settings.llm_max_retries,
            ),
        )
    except AnalysisError as e:
        logger.error("Hole-by-hole analysis failed: %s", e)
        return JSONResponse(status_code=500, content={"error": str(e)})
    return AnalysisResponse(analysis=analysis)
