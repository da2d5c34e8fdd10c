from datetime import date
from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel
from .hole_record import HoleRecord


class Round(BaseGolfModel):
    """A round of golf logged by a user.

    The summary counts (fairways, greens, putts) are optional because many
    golfers only track their score. Aggregation reads them through the
    ``*_or_zero`` helpers, so an untracked count lowers an average exactly
    like a recorded zero would.
    """
    id: Optional[str] = None
    user_id: Optional[str] = None
    course_name: Optional[str] = None
    score: int = Field(..., ge=1)
    fairways_hit: Optional[int] = Field(None, ge=0)
    greens_in_regulation: Optional[int] = Field(None, ge=0)
    putts: Optional[int] = Field(None, ge=0)
    round_date: Optional[date] = None
    tee_position: Optional[str] = None
    hole_by_hole_data: Optional[List[HoleRecord]] = None

    def fairways_hit_or_zero(self) -> int:
        return self.fairways_hit or 0

    def greens_in_regulation_or_zero(self) -> int:
        return self.greens_in_regulation or 0

    def putts_or_zero(self) -> int:
        return self.putts or 0

    def has_hole_data(self) -> bool:
        return bool(self.hole_by_hole_data)

    def holes(self) -> List[HoleRecord]:
        """Hole records, empty when the round was logged without a breakdown."""
        return list(self.hole_by_hole_data or [])
