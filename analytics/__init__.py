from .metrics import calculate_golf_stats, calculate_performance_metrics, scrambling_percentage
from .narrative import FirstPhraseSelector, PhraseSelector, RandomPhraseSelector, generate_insight
from .personas import RuleBasedPersonaClassifier, classify_persona, select_persona_name
from .trends import build_trends, calculate_trend, recent_trends, trend_series

__all__ = [
    "calculate_golf_stats",
    "calculate_performance_metrics",
    "scrambling_percentage",
    "FirstPhraseSelector",
    "PhraseSelector",
    "RandomPhraseSelector",
    "generate_insight",
    "RuleBasedPersonaClassifier",
    "classify_persona",
    "select_persona_name",
    "build_trends",
    "calculate_trend",
    "recent_trends",
    "trend_series",
]
