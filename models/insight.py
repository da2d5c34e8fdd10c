from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List


class InsightPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Insight(BaseModel):
    """One AI-written observation about a set of rounds."""
    title: str
    description: str
    recommendation: str
    priority: InsightPriority = InsightPriority.MEDIUM


class HoleAnalysis(BaseModel):
    """Narrative breakdown of a single round's holes."""
    model_config = ConfigDict(populate_by_name=True)

    scoring_patterns: List[str] = Field(default_factory=list, alias="scoringPatterns")
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
