"""Feed and swipe request/response schemas."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class FeedCard(BaseModel):
    """A scored venue or event card."""
    card_type: str = Field(description="'venue' or 'event'")
    id: str
    match_score: int = Field(ge=0, le=100)
    match_label: str
    match_color: str
    score_breakdown: Dict[str, float] = Field(default_factory=dict)
    attributes: Dict[str, Any] = Field(default_factory=dict, description="Display attributes of the source record")


class FeedResponse(BaseModel):
    """Ranked feed for a city."""
    feed: List[FeedCard] = Field(default_factory=list)
    venues: List[FeedCard] = Field(default_factory=list)
    events: List[FeedCard] = Field(default_factory=list)
    city: str = ""
    count: int = 0
    message: Optional[str] = None


class SwipeRequest(BaseModel):
    """Swipe on a venue and/or event card."""
    user_id: Optional[int] = None
    venue_card_id: Optional[str] = None
    event_card_id: Optional[str] = None
    action: Optional[str] = None
