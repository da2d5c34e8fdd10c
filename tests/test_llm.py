import json
from unittest.mock import MagicMock

import httpx
import pytest

from llm.client import LLMUnavailableError, create_client, generate_text, is_transient
from llm.insights_generator import (
    FALLBACK_INSIGHT,
    AnalysisError,
    analyze_hole_by_hole,
    generate_round_insights,
)
from llm.parsing import parse_response, sanitize_response_text
from llm.persona_generator import GeminiPersonaClassifier
from llm.prompts import RawInsights, RawPersona, build_hole_analysis_prompt, build_persona_prompt
from models import HoleRecord, InsightPriority, PerformanceMetrics, PersonaSource, RecentTrends, Round


PERSONA_JSON = {
    "persona_name": "The Grinder",
    "strengths": ["Short game", "Patience", "Course management"],
    "weaknesses": ["Driving distance", "Long irons", "Par 5 scoring"],
    "recommendations": ["Range sessions", "Speed training", "Lag putting"],
    "playStyle": "Conservative",
    "mentalGame": "Resilient",
    "practiceFocus": ["Driver", "Long irons", "Wedges"],
}


def _fake_client(*responses):
    """Helper: a client whose generate_content returns or raises each item in turn."""
    client = MagicMock()
    side_effects = []
    for item in responses:
        if isinstance(item, BaseException):
            side_effects.append(item)
        else:
            side_effects.append(MagicMock(text=item))
    client.models.generate_content.side_effect = side_effects
    return client


def _metrics():
    return PerformanceMetrics(
        avg_score=78,
        avg_fairways_hit=9,
        avg_greens_in_regulation=13,
        avg_putts=28,
        scrambling_percentage=50,
        rounds_analyzed=4,
        recent_trends=RecentTrends(),
    )


# ================================================================
# Parsing
# ================================================================

def test_sanitize_strips_fences_and_prose():
    text = 'Here you go:\n```json\n{"a": 1}\n```\nHope that helps!'
    assert sanitize_response_text(text) == '{"a": 1}'


def test_sanitize_replaces_smart_quotes():
    assert sanitize_response_text("{“a”: “b”}") == '{"a": "b"}'


def test_parse_response_success():
    result = parse_response(json.dumps(PERSONA_JSON), RawPersona)
    assert result.ok
    assert result.value.play_style == "Conservative"


@pytest.mark.parametrize("text", ["", "   ", None])
def test_parse_response_empty(text):
    result = parse_response(text, RawPersona)
    assert not result.ok
    assert result.error == "empty response"


def test_parse_response_invalid_json_never_raises():
    result = parse_response("not json at all", RawInsights)
    assert not result.ok
    assert result.error.startswith("RawInsights validation failed")


def test_parse_response_missing_fields():
    data = dict(PERSONA_JSON)
    del data["strengths"]
    result = parse_response(json.dumps(data), RawPersona)
    assert not result.ok


# ================================================================
# Client
# ================================================================

def test_create_client_without_key(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    with pytest.raises(LLMUnavailableError):
        create_client(None)


def test_generate_text_without_client():
    with pytest.raises(LLMUnavailableError):
        generate_text(None, "prompt")


def test_generate_text_retries_transient_failure_once():
    client = _fake_client(httpx.ReadTimeout("timed out"), "ok")
    assert generate_text(client, "prompt", max_retries=1, retry_delay=0) == "ok"
    assert client.models.generate_content.call_count == 2


def test_generate_text_gives_up_after_retries():
    client = _fake_client(httpx.ReadTimeout("timed out"), httpx.ReadTimeout("timed out again"))
    with pytest.raises(httpx.ReadTimeout):
        generate_text(client, "prompt", max_retries=1, retry_delay=0)
    assert client.models.generate_content.call_count == 2


def test_generate_text_does_not_retry_permanent_failure():
    client = _fake_client(ValueError("bad request"), "unused")
    with pytest.raises(ValueError):
        generate_text(client, "prompt", max_retries=1, retry_delay=0)
    assert client.models.generate_content.call_count == 1


def test_is_transient():
    assert is_transient(httpx.ConnectError("refused"))
    assert not is_transient(ValueError("nope"))


# ================================================================
# Persona generation
# ================================================================

def test_persona_prompt_includes_metrics():
    prompt = build_persona_prompt(_metrics())
    assert "Average Score: 78.0" in prompt
    assert "Recent Trends:" in prompt
    assert '"practiceFocus"' in prompt


def test_gemini_persona_success():
    client = _fake_client("```json\n" + json.dumps(PERSONA_JSON) + "\n```")
    persona = GeminiPersonaClassifier(client, retry_delay=0).classify(_metrics(), "u1")

    assert persona.persona_name == "The Grinder"
    assert persona.user_id == "u1"
    assert persona.source == PersonaSource.AI
    assert persona.practice_focus == ["Driver", "Long irons", "Wedges"]


def test_gemini_persona_falls_back_without_client():
    persona = GeminiPersonaClassifier(None).classify(_metrics(), "u1")
    assert persona.persona_name == "Elite Ball Striker"
    assert persona.source == PersonaSource.RULES


def test_gemini_persona_falls_back_on_service_error():
    client = _fake_client(RuntimeError("quota exceeded"))
    persona = GeminiPersonaClassifier(client, retry_delay=0).classify(_metrics(), "u1")
    assert persona.persona_name == "Elite Ball Striker"
    assert persona.source == PersonaSource.RULES


def test_gemini_persona_falls_back_on_malformed_json():
    client = _fake_client('{"persona_name": "Half a persona"')
    persona = GeminiPersonaClassifier(client, retry_delay=0).classify(_metrics(), "u1")
    assert persona.source == PersonaSource.RULES


def test_gemini_persona_uses_custom_fallback():
    fallback = MagicMock()
    GeminiPersonaClassifier(None, fallback=fallback).classify(_metrics(), "u1")
    fallback.classify.assert_called_once()


# ================================================================
# Round insights
# ================================================================

ROUNDS = [
    Round(score=84, fairways_hit=7, greens_in_regulation=8, putts=31, course_name="Pebble"),
    Round(score=88, fairways_hit=5, greens_in_regulation=6, putts=33),
]


def test_insights_are_normalized():
    payload = {"insights": [
        {"title": " Putting ", "description": "Too many 3-putts", "recommendation": "Lag drills", "priority": "HIGH"},
        {"title": "", "priority": "urgent"},
    ]}
    client = _fake_client(json.dumps(payload))
    insights = generate_round_insights(ROUNDS, client, retry_delay=0)

    assert len(insights) == 2
    assert insights[0].title == "Putting"
    assert insights[0].priority == InsightPriority.HIGH
    assert insights[1].title == "Performance Insight"
    assert insights[1].description == "No description provided"
    assert insights[1].recommendation == "No recommendation provided"
    assert insights[1].priority == InsightPriority.MEDIUM


def test_insights_fallback_on_unparseable_response():
    client = _fake_client("Sorry, I can't help with that.")
    assert generate_round_insights(ROUNDS, client, retry_delay=0) == [FALLBACK_INSIGHT]


def test_insights_fallback_on_service_error():
    client = _fake_client(RuntimeError("boom"))
    assert generate_round_insights(ROUNDS, client, retry_delay=0) == [FALLBACK_INSIGHT]


def test_insights_fallback_without_client():
    insights = generate_round_insights(ROUNDS, None)
    assert len(insights) == 1
    assert insights[0].title == "Performance Analysis"


# ================================================================
# Hole-by-hole analysis
# ================================================================

HOLES = [
    HoleRecord(strokes=4, putts=2, fairway="hit", green="hit"),
    HoleRecord(strokes=3, putts=1, fairway="n/a", green="miss"),
]


def test_hole_prompt_lists_each_hole():
    prompt = build_hole_analysis_prompt(HOLES)
    assert "Hole 1:" in prompt
    assert "Hole 2:" in prompt
    assert "- Fairway: n/a" in prompt


def test_analysis_success():
    payload = {"analysis": {
        "scoringPatterns": ["Strong on par 3s"],
        "strengths": ["Iron play"],
        "weaknesses": ["Lag putting"],
        "recommendations": ["Practice 30-foot putts"],
    }}
    client = _fake_client(json.dumps(payload))
    analysis = analyze_hole_by_hole(HOLES, client, retry_delay=0)
    assert analysis.scoring_patterns == ["Strong on par 3s"]
    assert analysis.recommendations == ["Practice 30-foot putts"]


def test_analysis_raises_on_service_error():
    client = _fake_client(RuntimeError("boom"))
    with pytest.raises(AnalysisError):
        analyze_hole_by_hole(HOLES, client, retry_delay=0)


def test_analysis_raises_on_bad_response():
    client = _fake_client("[1, 2, 3]")
    with pytest.raises(AnalysisError):
        analyze_hole_by_hole(HOLES, client, retry_delay=0)
