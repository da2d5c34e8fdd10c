from .client import GEMINI_MODEL, LLMUnavailableError, create_client, generate_text
from .insights_generator import (
    FALLBACK_INSIGHT,
    AnalysisError,
    analyze_hole_by_hole,
    generate_round_insights,
)
from .parsing import ParseResult, parse_response, sanitize_response_text
from .persona_generator import GeminiPersonaClassifier
from .strategies import PersonaClassifier

__all__ = [
    "GEMINI_MODEL",
    "LLMUnavailableError",
    "create_client",
    "generate_text",
    "FALLBACK_INSIGHT",
    "AnalysisError",
    "analyze_hole_by_hole",
    "generate_round_insights",
    "ParseResult",
    "parse_response",
    "sanitize_response_text",
    "GeminiPersonaClassifier",
    "PersonaClassifier",
]
