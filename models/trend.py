from enum import Enum
from pydantic import BaseModel


class TrendDirection(str, Enum):
    """Direction of a metric over recent rounds, from the golfer's point of view."""
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class TrendResult(BaseModel):
    """Raw output of the trend calculation for one metric."""
    trend: TrendDirection
    percentage: int


class Trend(BaseModel):
    """A labelled trend with its display sentence. Computed per request."""
    label: str
    trend: TrendDirection
    percentage: int
    insight: str
