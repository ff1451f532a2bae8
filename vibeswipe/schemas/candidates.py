"""Scoring inputs built from stored venue and event cards."""
import math
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .preferences import decode_tag_list


def finite_or_zero(value: Any) -> Any:
    """Replace NaN and infinite numbers with 0 so scores stay computable."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isfinite(value):
        return 0.0
    return value


class VenueCandidate(BaseModel):
    """Venue attributes read by the venue scorer."""
    venue_type: str = "bar"
    price_level: str = "$$"
    rating: float = 0.0
    vibe_score: float = 0.0
    tags: List[str] = Field(default_factory=list)
    best_nights: List[str] = Field(default_factory=list)
    music_genres: List[str] = Field(default_factory=list)
    has_dance_floor: bool = False
    has_live_music: bool = False
    has_outdoor: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator('tags', 'best_nights', 'music_genres', mode='before')
    @classmethod
    def default_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator('rating', 'vibe_score', mode='before')
    @classmethod
    def finite_numbers(cls, v: Any) -> Any:
        return finite_or_zero(v)

    @classmethod
    def from_card(cls, card) -> "VenueCandidate":
        """Build a candidate from a ``VenueCard`` row."""
        return cls(
            venue_type=card.venue_type or "bar",
            price_level=card.price_level or "$$",
            rating=card.rating or 0.0,
            vibe_score=card.vibe_score or 0,
            tags=decode_tag_list(card.tags),
            best_nights=decode_tag_list(card.best_nights),
            music_genres=decode_tag_list(card.music_genres),
            has_dance_floor=bool(card.has_dance_floor),
            has_live_music=bool(card.has_live_music),
            has_outdoor=bool(card.has_outdoor)
        )


class EventCandidate(BaseModel):
    """Event attributes read by the event scorer."""
    event_type: str = "party"
    hype_score: float = 0.0
    price_min: float = 0.0
    price_max: float = 0.0
    is_free: bool = False
    day_of_week: str = ""
    genre: str = ""
    music_genres: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    artists: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator('music_genres', 'tags', 'artists', mode='before')
    @classmethod
    def default_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator('hype_score', 'price_min', 'price_max', mode='before')
    @classmethod
    def finite_numbers(cls, v: Any) -> Any:
        return finite_or_zero(v)

    @classmethod
    def from_card(cls, card) -> "EventCandidate":
        """Build a candidate from an ``EventCard`` row."""
        return cls(
            event_type=card.event_type or "party",
            hype_score=card.hype_score or 0,
            price_min=card.price_min or 0.0,
            price_max=card.price_max or 0.0,
            is_free=bool(card.is_free),
            day_of_week=card.day_of_week or "",
            genre=card.genre or "",
            music_genres=decode_tag_list(card.music_genres),
            tags=decode_tag_list(card.tags),
            artists=decode_tag_list(card.artists)
        )
