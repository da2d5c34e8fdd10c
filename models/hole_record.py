from enum import Enum
from pydantic import Field, model_validator

from .base import BaseGolfModel


class FairwayOutcome(str, Enum):
    """Tee shot result. Par 3s are recorded as not applicable."""
    HIT = "hit"
    MISS = "miss"
    NOT_APPLICABLE = "n/a"


class GreenOutcome(str, Enum):
    """Whether the green was reached in regulation."""
    HIT = "hit"
    MISS = "miss"


# Largest stroke count on a missed-green hole that still counts as a save.
SCRAMBLE_MAX_STROKES = 2


class HoleRecord(BaseGolfModel):
    """One hole of a round's hole-by-hole breakdown."""
    strokes: int = Field(..., ge=1)
    putts: int = Field(0, ge=0)
    fairway: FairwayOutcome = FairwayOutcome.NOT_APPLICABLE
    green: GreenOutcome

    @model_validator(mode='after')
    def validate_putts_within_strokes(self):
        if self.putts > self.strokes:
            raise ValueError(f"Putts ({self.putts}) cannot exceed strokes ({self.strokes})")
        return self

    @property
    def missed_green(self) -> bool:
        return self.green == GreenOutcome.MISS

    def is_scramble_chance(self) -> bool:
        """A missed green is an opportunity to scramble."""
        return self.missed_green

    def is_successful_scramble(self) -> bool:
        return self.missed_green and self.strokes <= SCRAMBLE_MAX_STROKES
