import json
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Sequence

from models import HoleAnalysis, HoleRecord, PerformanceMetrics, Round


# ================================================================
# Shared prompt fragments
# ================================================================

_PREAMBLE = "You are an experienced golf coach reviewing a golfer's statistics."

_JSON_ONLY_INSTRUCTIONS = """
IMPORTANT:
- Return ONLY valid JSON, no other text
- Do not use markdown formatting"""

_PERSONA_JSON_SCHEMA = """{
  "persona_name": "Creative name based on their playing style",
  "strengths": ["3 specific strengths based on their metrics"],
  "weaknesses": ["3 specific weaknesses based on their metrics"],
  "recommendations": ["3 specific recommendations for improvement"],
  "playStyle": "Description of their playing style and approach to the game",
  "mentalGame": "Analysis of their mental approach and potential areas for improvement",
  "practiceFocus": ["3 specific areas to focus on in practice"]
}"""

_INSIGHTS_JSON_SCHEMA = """{
  "insights": [
    {
      "title": "Clear, specific title",
      "description": "Detailed description of the insight",
      "recommendation": "Specific, actionable recommendation",
      "priority": "high|medium|low"
    }
  ]
}"""

_ANALYSIS_JSON_SCHEMA = """{
  "analysis": {
    "scoringPatterns": ["..."],
    "strengths": ["..."],
    "weaknesses": ["..."],
    "recommendations": ["..."]
  }
}"""


# ================================================================
# Persona
# ================================================================

def _format_metrics(metrics: PerformanceMetrics) -> str:
    lines = [
        "Performance Metrics:",
        f"- Average Score: {metrics.avg_score:.1f}",
        f"- Fairways Hit (per round): {metrics.avg_fairways_hit:.1f}",
        f"- Greens in Regulation (per round): {metrics.avg_greens_in_regulation:.1f}",
        f"- Average Putts: {metrics.avg_putts:.1f}",
        f"- Scrambling Percentage: {metrics.scrambling_percentage:.0f}%",
        f"- Rounds Analyzed: {metrics.rounds_analyzed}",
    ]
    trends = metrics.recent_trends
    if trends:
        lines += [
            "",
            "Recent Trends:",
            f"- Score: {trends.score_trend.value}",
            f"- Fairways: {trends.fairway_trend.value}",
            f"- Greens: {trends.green_trend.value}",
            f"- Putting: {trends.putting_trend.value}",
        ]
    return "\n".join(lines)


def build_persona_prompt(metrics: PerformanceMetrics) -> str:
    """Prompt asking for a golfer persona in the stored Persona shape."""
    return (
        _PREAMBLE
        + " Analyze the following golf performance metrics and generate a detailed golfer persona.\n\n"
        + _format_metrics(metrics)
        + "\n\nGenerate the persona as a JSON object with this exact structure:\n"
        + _PERSONA_JSON_SCHEMA
        + "\n\nThe persona should be:"
        + "\n1. Based on their actual performance metrics"
        + "\n2. Specific and actionable"
        + "\n3. Informed by their recent trends if available"
        + "\n4. Encouraging while highlighting areas for improvement"
        + "\n5. Written with golf-specific terminology"
        + _JSON_ONLY_INSTRUCTIONS
    )


# ================================================================
# Round insights
# ================================================================

def build_insights_prompt(rounds: Sequence[Round]) -> str:
    """Prompt asking for 4-6 prioritized insights about a set of rounds."""
    rounds_json = json.dumps(
        [r.model_dump(mode="json", exclude={"id", "user_id"}, exclude_none=True) for r in rounds],
        indent=2,
    )
    return (
        _PREAMBLE
        + " Based on the following golf rounds data, generate exactly 4-6 specific "
        + "insights and recommendations.\n\n"
        + "Golf Rounds Data:\n"
        + rounds_json
        + "\n\nFor each insight, provide:"
        + "\n1. A clear, specific title about one aspect of performance"
        + "\n2. A detailed description of what the data shows"
        + "\n3. A specific, actionable recommendation"
        + "\n4. A priority level (high, medium, or low)"
        + "\n\nFormat your response as a JSON object with this exact structure:\n"
        + _INSIGHTS_JSON_SCHEMA
        + _JSON_ONLY_INSTRUCTIONS
        + "\n- Each insight should focus on one specific aspect"
        + "\n- Make recommendations specific and actionable"
    )


# ================================================================
# Hole-by-hole analysis
# ================================================================

def _format_holes(holes: Sequence[HoleRecord]) -> str:
    blocks = []
    for number, hole in enumerate(holes, start=1):
        blocks.append(
            f"Hole {number}:\n"
            f"- Strokes: {hole.strokes}\n"
            f"- Putts: {hole.putts}\n"
            f"- Fairway: {hole.fairway.value}\n"
            f"- GIR: {hole.green.value}"
        )
    return "\n\n".join(blocks)


def build_hole_analysis_prompt(holes: Sequence[HoleRecord]) -> str:
    """Prompt asking for patterns across one round's holes."""
    return (
        _PREAMBLE
        + " Analyze this hole-by-hole performance data and provide specific insights "
        + "about patterns and areas for improvement:\n\n"
        + _format_holes(holes)
        + "\n\nPlease provide specific insights about:"
        + "\n1. Scoring patterns (which holes are consistently better/worse)"
        + "\n2. Putting performance"
        + "\n3. Driving accuracy"
        + "\n4. Greens in regulation"
        + "\n5. Any noticeable trends or patterns"
        + "\n\nFormat the response as a JSON object with the following structure:\n"
        + _ANALYSIS_JSON_SCHEMA
        + _JSON_ONLY_INSTRUCTIONS
    )


# ================================================================
# Pydantic models for parsing raw LLM JSON responses
# ================================================================

class RawPersona(BaseModel):
    """Persona fields as the model returns them."""
    model_config = ConfigDict(populate_by_name=True)

    persona_name: str = Field(..., min_length=1)
    strengths: List[str] = Field(..., min_length=1)
    weaknesses: List[str] = Field(..., min_length=1)
    recommendations: List[str] = Field(..., min_length=1)
    play_style: str = Field(..., alias="playStyle")
    mental_game: str = Field(..., alias="mentalGame")
    practice_focus: List[str] = Field(..., alias="practiceFocus")


class RawInsight(BaseModel):
    """One insight before clean-up; every field may be missing."""
    title: Optional[str] = None
    description: Optional[str] = None
    recommendation: Optional[str] = None
    priority: Optional[str] = None


class RawInsights(BaseModel):
    insights: List[RawInsight]


class RawHoleAnalysis(BaseModel):
    analysis: HoleAnalysis
