from datetime import datetime
from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class Club(BaseGolfModel):
    """A club in a user's bag."""
    id: Optional[str] = None
    user_id: Optional[str] = None
    name: str = Field(..., min_length=1)
    brand: Optional[str] = None
    model: Optional[str] = None
    loft: Optional[float] = Field(None, ge=0, le=90)
    typical_distance: Optional[float] = Field(None, ge=0)
    created_at: Optional[datetime] = None
