"""Alert request schemas."""
from typing import Optional

from pydantic import BaseModel


class AlertCreate(BaseModel):
    """Subscribe to alerts of a type, optionally narrowed to a city, genre, artist or card."""
    user_id: Optional[int] = None
    alert_type: Optional[str] = None
    target_city: Optional[str] = None
    target_genre: Optional[str] = None
    target_artist: Optional[str] = None
    venue_card_id: Optional[str] = None
    event_card_id: Optional[str] = None
