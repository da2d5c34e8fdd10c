"""AI-written insights about a user's rounds and a single round's holes."""

import logging
from typing import List, Sequence

from models import HoleAnalysis, HoleRecord, Insight, InsightPriority, Round
from llm.client import DEFAULT_MAX_RETRIES, GEMINI_MODEL, RETRY_DELAY_SECONDS, generate_text
from llm.parsing import parse_response
from llm.prompts import (
    RawHoleAnalysis,
    RawInsight,
    RawInsights,
    build_hole_analysis_prompt,
    build_insights_prompt,
)

logger = logging.getLogger(__name__)

FALLBACK_INSIGHT = Insight(
    title="Performance Analysis",
    description="Unable to generate detailed insights at this time. Please try again later.",
    recommendation="Review your recent rounds manually and focus on consistent patterns.",
    priority=InsightPriority.MEDIUM,
)


class AnalysisError(RuntimeError):
    """Hole-by-hole analysis could not be produced."""


def normalize_insight(raw: RawInsight) -> Insight:
    """Fill blanks with defaults and coerce unknown priorities to medium."""
    priority = (raw.priority or "").strip().lower()
    if priority not in {p.value for p in InsightPriority}:
        priority = InsightPriority.MEDIUM.value
    return Insight(
        title=(raw.title or "").strip() or "Performance Insight",
        description=(raw.description or "").strip() or "No description provided",
        recommendation=(raw.recommendation or "").strip() or "No recommendation provided",
        priority=InsightPriority(priority),
    )


def generate_round_insights(
    rounds: Sequence[Round],
    client,
    *,
    model: str = GEMINI_MODEL,
    max_retries: int = DEFAULT_MAX_RETRIES,
    retry_delay: float = RETRY_DELAY_SECONDS,
) -> List[Insight]:
    """Insights for ``rounds``. Falls back to a single canned insight on any failure."""
    try:
        text = generate_text(
            client,
            build_insights_prompt(rounds),
            model=model,
            max_retries=max_retries,
            retry_delay=retry_delay,
        )
    except Exception as e:
        logger.warning("Insight generation failed, returning fallback insight: %s", e)
        return [FALLBACK_INSIGHT]

    result = parse_response(text, RawInsights)
    if not result.ok:
        logger.warning("Unusable insights response: %s", result.error)
        return [FALLBACK_INSIGHT]

    return [normalize_insight(raw) for raw in result.value.insights]


def analyze_hole_by_hole(
    holes: Sequence[HoleRecord],
    client,
    *,
    model: str = GEMINI_MODEL,
    max_retries: int = DEFAULT_MAX_RETRIES,
    retry_delay: float = RETRY_DELAY_SECONDS,
) -> HoleAnalysis:
    """Narrative analysis of one round. Raises AnalysisError on any failure."""
    try:
        text = generate_text(
            client,
            build_hole_analysis_prompt(holes),
            model=model,
            max_retries=max_retries,
            retry_delay=retry_delay,
        )
    except Exception as e:
        raise AnalysisError(f"Failed to analyze performance: {e}") from e

    result = parse_response(text, RawHoleAnalysis)
    if not result.ok:
        raise AnalysisError(f"Failed to parse analysis: {result.error}")
    return result.value.analysis
