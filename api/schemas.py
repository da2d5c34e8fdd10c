"""Request and response bodies for the HTTP API."""

from datetime import date
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from models import GolfStats, HoleAnalysis, HoleRecord, Insight, PerformanceMetrics, Persona, Round, Trend


class TrendsRequest(BaseModel):
    """Chronological (oldest first) series for the four primary metrics."""
    scores: List[float] = Field(default_factory=list)
    fairways: List[float] = Field(default_factory=list)
    gir: List[float] = Field(default_factory=list)
    putts: List[float] = Field(default_factory=list)


class TrendsResponse(BaseModel):
    trends: List[Trend]


class InsightsRequest(BaseModel):
    rounds: List[Round]


class InsightsResponse(BaseModel):
    success: bool = True
    insights: List[Insight]


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hole_data: List[HoleRecord] = Field(..., alias="holeData", min_length=1)


class AnalysisResponse(BaseModel):
    analysis: HoleAnalysis


class PersonaResponse(BaseModel):
    """``persona`` is null when the user has too few rounds."""
    persona: Optional[Persona] = None
    message: Optional[str] = None


class CreateRoundRequest(BaseModel):
    course_name: Optional[str] = None
    score: int = Field(..., ge=1)
    fairways_hit: Optional[int] = Field(None, ge=0)
    greens_in_regulation: Optional[int] = Field(None, ge=0)
    putts: Optional[int] = Field(None, ge=0)
    round_date: Optional[date] = None
    tee_position: Optional[str] = None
    hole_by_hole_data: Optional[List[HoleRecord]] = None


class UpdateRoundRequest(BaseModel):
    course_name: Optional[str] = None
    score: Optional[int] = Field(None, ge=1)
    fairways_hit: Optional[int] = Field(None, ge=0)
    greens_in_regulation: Optional[int] = Field(None, ge=0)
    putts: Optional[int] = Field(None, ge=0)
    round_date: Optional[date] = None
    tee_position: Optional[str] = None
    hole_by_hole_data: Optional[List[HoleRecord]] = None


class DashboardResponse(BaseModel):
    """Aggregated stats for the dashboard page."""
    stats: GolfStats
    metrics: PerformanceMetrics
    trends: List[Trend]
    recent_rounds: List[Round]


class CreateClubRequest(BaseModel):
    name: str = Field(..., min_length=1)
    brand: Optional[str] = None
    model: Optional[str] = None
    loft: Optional[float] = Field(None, ge=0, le=90)
    typical_distance: Optional[float] = Field(None, ge=0)


class UpdateClubRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    brand: Optional[str] = None
    model: Optional[str] = None
    loft: Optional[float] = Field(None, ge=0, le=90)
    typical_distance: Optional[float] = Field(None, ge=0)
