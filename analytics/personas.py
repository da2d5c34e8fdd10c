"""Rule-based golfer personas derived from aggregate metrics."""

from __future__ import annotations

from typing import Any, Dict

from models.metrics import PerformanceMetrics
from models.persona import Persona, PersonaSource

ELITE_BALL_STRIKER = "Elite Ball Striker"
SCRAMBLER = "Scrambler"
PUTTING_MACHINE = "Putting Machine"
FAIRWAY_FINDER = "Fairway Finder"
DEVELOPING_PLAYER = "Developing Player"
IMPROVING_BEGINNER = "Improving Beginner"

PERSONA_PROFILES: Dict[str, Dict[str, Any]] = {
    ELITE_BALL_STRIKER: {
        "strengths": [
            "Elite ball striking",
            "Consistent approach play",
            "Strong course management",
        ],
        "weaknesses": [
            "Occasional putting lapses",
            "Mental game under pressure",
            "Complacency on scoring holes",
        ],
        "recommendations": [
            "Focus on pressure putting",
            "Work on pre-shot routine",
            "Consider tournament play",
        ],
        "play_style": "Aggressive but calculated, with strong fundamentals",
        "mental_game": "Generally strong but can improve under tournament pressure",
        "practice_focus": ["Pressure putting", "Course strategy", "Mental preparation"],
    },
    SCRAMBLER: {
        "strengths": [
            "Exceptional short game",
            "Creative shot-making",
            "Resilience after mistakes",
        ],
        "weaknesses": [
            "Inconsistent approach shots",
            "Distance control",
            "Too many recovery situations",
        ],
        "recommendations": [
            "Practice approach distance control",
            "Aim for the middle of greens",
            "Maintain short game focus",
        ],
        "play_style": "Creative and adaptable, excels in recovery situations",
        "mental_game": "Strong under pressure, good at managing expectations",
        "practice_focus": ["Approach play", "Distance control", "Short game maintenance"],
    },
    PUTTING_MACHINE: {
        "strengths": [
            "Excellent putting",
            "Good course management",
            "Consistent short game",
        ],
        "weaknesses": [
            "Ball striking consistency",
            "Distance control",
            "Greens in regulation",
        ],
        "recommendations": [
            "Focus on ball striking drills",
            "Work on distance control",
            "Maintain putting practice",
        ],
        "play_style": "Strategic and patient, relies on strong putting",
        "mental_game": "Good at staying patient and managing expectations",
        "practice_focus": ["Ball striking", "Distance control", "Putting maintenance"],
    },
    FAIRWAY_FINDER: {
        "strengths": [
            "Accurate driving",
            "Good course management",
            "Consistent ball striking",
        ],
        "weaknesses": [
            "Short game",
            "Putting under pressure",
            "Converting good drives into scores",
        ],
        "recommendations": [
            "Focus on short game practice",
            "Work on putting consistency",
            "Develop a pre-shot routine",
        ],
        "play_style": "Conservative and accurate, focuses on fairways and greens",
        "mental_game": "Good at managing expectations, can improve under pressure",
        "practice_focus": ["Short game", "Putting", "Pre-shot routine"],
    },
    DEVELOPING_PLAYER: {
        "strengths": [
            "Improving consistency",
            "Good course management",
            "Solid fundamentals",
        ],
        "weaknesses": [
            "Overall consistency",
            "Short game",
            "Putting",
        ],
        "recommendations": [
            "Focus on short game practice",
            "Work on putting consistency",
            "Develop a pre-shot routine",
        ],
        "play_style": "Learning and improving, focusing on fundamentals",
        "mental_game": "Developing confidence and consistency",
        "practice_focus": ["Short game", "Putting", "Fundamentals"],
    },
    IMPROVING_BEGINNER: {
        "strengths": [
            "Enthusiasm for improvement",
            "Basic fundamentals",
            "Willingness to learn",
        ],
        "weaknesses": [
            "Consistency",
            "Short game",
            "Course management",
        ],
        "recommendations": [
            "Focus on fundamentals",
            "Take lessons with a pro",
            "Practice short game regularly",
        ],
        "play_style": "Learning the basics, developing consistency",
        "mental_game": "Building confidence and understanding",
        "practice_focus": ["Fundamentals", "Short game", "Course management"],
    },
}


def select_persona_name(metrics: PerformanceMetrics) -> str:
    """
    Pick the persona for a set of metrics. The first matching check wins,
    so the order of the checks is part of the classification.
    """
    score = metrics.avg_score
    if score < 80 and metrics.avg_greens_in_regulation > 12 and metrics.avg_putts < 30:
        return ELITE_BALL_STRIKER
    if score < 85 and metrics.scrambling_percentage > 60:
        return SCRAMBLER
    if score < 85 and metrics.avg_putts < 30:
        return PUTTING_MACHINE
    if score < 90 and metrics.avg_fairways_hit > 8:
        return FAIRWAY_FINDER
    if score < 95:
        return DEVELOPING_PLAYER
    return IMPROVING_BEGINNER


def classify_persona(metrics: PerformanceMetrics, user_id: str) -> Persona:
    """Build the canned persona matching ``metrics``. Deterministic."""
    name = select_persona_name(metrics)
    profile = PERSONA_PROFILES[name]
    return Persona(
        user_id=user_id,
        persona_name=name,
        strengths=list(profile["strengths"]),
        weaknesses=list(profile["weaknesses"]),
        recommendations=list(profile["recommendations"]),
        play_style=profile["play_style"],
        mental_game=profile["mental_game"],
        practice_focus=list(profile["practice_focus"]),
        source=PersonaSource.RULES,
    )


class RuleBasedPersonaClassifier:
    """PersonaClassifier backed by the fixed threshold ladder."""

    def classify(self, metrics: PerformanceMetrics, user_id: str) -> Persona:
        return classify_persona(metrics, user_id)
