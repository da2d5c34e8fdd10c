from .base import BaseGolfModel
from .club import Club
from .hole_record import FairwayOutcome, GreenOutcome, HoleRecord
from .insight import HoleAnalysis, Insight, InsightPriority
from .metrics import GolfStats, PerformanceMetrics, RecentTrends
from .persona import Persona, PersonaSource
from .round import Round
from .trend import Trend, TrendDirection, TrendResult

__all__ = [
    "BaseGolfModel",
    "Club",
    "FairwayOutcome",
    "GolfStats",
    "GreenOutcome",
    "HoleAnalysis",
    "HoleRecord",
    "Insight",
    "InsightPriority",
    "PerformanceMetrics",
    "Persona",
    "PersonaSource",
    "RecentTrends",
    "Round",
    "Trend",
    "TrendDirection",
    "TrendResult",
]
