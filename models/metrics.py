from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from .trend import TrendDirection


class RecentTrends(BaseModel):
    """Trend labels for the four primary metrics."""
    model_config = ConfigDict(populate_by_name=True)

    score_trend: TrendDirection = Field(TrendDirection.STABLE, alias="scoreTrend")
    fairway_trend: TrendDirection = Field(TrendDirection.STABLE, alias="fairwayTrend")
    green_trend: TrendDirection = Field(TrendDirection.STABLE, alias="greenTrend")
    putting_trend: TrendDirection = Field(TrendDirection.STABLE, alias="puttingTrend")


class PerformanceMetrics(BaseModel):
    """Aggregate of a window of rounds. Derived on every request, never stored."""
    model_config = ConfigDict(populate_by_name=True)

    avg_score: float = Field(0.0, alias="avgScore")
    avg_fairways_hit: float = Field(0.0, alias="avgFairwaysHit")
    avg_greens_in_regulation: float = Field(0.0, alias="avgGreensInRegulation")
    avg_putts: float = Field(0.0, alias="avgPutts")
    scrambling_percentage: float = Field(0.0, alias="scramblingPercentage")
    rounds_analyzed: int = Field(0, alias="roundsAnalyzed")
    recent_trends: Optional[RecentTrends] = Field(None, alias="recentTrends")


class GolfStats(BaseModel):
    """Dashboard summary of a user's rounds."""
    model_config = ConfigDict(populate_by_name=True)

    average_score: int = Field(0, alias="averageScore")
    rounds_played: int = Field(0, alias="roundsPlayed")
    fairways_hit_percentage: int = Field(0, alias="fairwaysHitPercentage")
    greens_in_regulation_percentage: int = Field(0, alias="greensInRegulationPercentage")
    average_putts: float = Field(0.0, alias="averagePutts")
    best_score: Optional[int] = Field(None, alias="bestScore")
    worst_score: Optional[int] = Field(None, alias="worstScore")
    score_trend: List[int] = Field(default_factory=list, alias="scoreTrend")
    fairways_trend: List[int] = Field(default_factory=list, alias="fairwaysTrend")
    gir_trend: List[int] = Field(default_factory=list, alias="girTrend")
    putts_trend: List[int] = Field(default_factory=list, alias="puttsTrend")
