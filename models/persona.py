from datetime import datetime
from enum import Enum
from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel


class PersonaSource(str, Enum):
    """Which classifier produced a persona."""
    AI = "ai"
    RULES = "rules"


class Persona(BaseGolfModel):
    """Narrative classification of a golfer. At most one is stored per user."""
    user_id: str
    persona_name: str
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    play_style: str = Field("", alias="playStyle")
    mental_game: str = Field("", alias="mentalGame")
    practice_focus: List[str] = Field(default_factory=list, alias="practiceFocus")
    source: PersonaSource = PersonaSource.RULES
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
