"""Venue card model."""
from datetime import datetime
from typing import Optional
from sqlalchemy import String, Text, Boolean, DateTime, Float, Integer
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from vibeswipe.database import Base


class VenueCard(Base):
    """A bar, club, rooftop or similar place shown in the feed."""
    __tablename__ = "venue_cards"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    venue_type: Mapped[str] = mapped_column(String, default="bar")
    neighborhood: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    city: Mapped[str] = mapped_column(String, nullable=False, index=True)
    country: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    website_url: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    # Scoring attributes
    price_level: Mapped[str] = mapped_column(String, default="$$")
    rating: Mapped[float] = mapped_column(Float, default=0.0)
    review_count: Mapped[int] = mapped_column(Integer, default=0)
    vibe_score: Mapped[int] = mapped_column(Integer, default=0)  # 0-100 popularity
    tags: Mapped[Optional[str]] = mapped_column(Text, default="[]")
    best_nights: Mapped[Optional[str]] = mapped_column(Text, default="[]")
    music_genres: Mapped[Optional[str]] = mapped_column(Text, default="[]")

    # Amenities
    has_outdoor: Mapped[bool] = mapped_column(Boolean, default=False)
    has_food: Mapped[bool] = mapped_column(Boolean, default=False)
    has_dance_floor: Mapped[bool] = mapped_column(Boolean, default=False)
    has_live_music: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    swipes = relationship("Swipe", back_populates="venue_card")
    alerts = relationship("Alert", back_populates="venue_card")

    def to_dict(self) -> dict:
        """Display attributes, with tag columns left encoded."""
        return {
            'id': self.id,
            'name': self.name,
            'venue_type': self.venue_type,
            'neighborhood': self.neighborhood,
            'city': self.city,
            'country': self.country,
            'description': self.description,
            'image_url': self.image_url,
            'website_url': self.website_url,
            'price_level': self.price_level,
            'rating': self.rating,
            'review_count': self.review_count,
            'vibe_score': self.vibe_score,
            'has_outdoor': self.has_outdoor,
            'has_food': self.has_food,
            'has_dance_floor': self.has_dance_floor,
            'has_live_music': self.has_live_music
        }
