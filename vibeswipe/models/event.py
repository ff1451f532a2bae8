"""Event card model."""
from datetime import datetime
from typing import Optional
from sqlalchemy import String, Text, Boolean, DateTime, Float, Integer
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from vibeswipe.database import Base, UTCDateTime


class EventCard(Base):
    """A dated event (concert, party, meetup) shown in the feed."""
    __tablename__ = "event_cards"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    event_type: Mapped[str] = mapped_column(String, default="party")
    category: Mapped[str] = mapped_column(String, default="nightlife", index=True)  # nightlife, social, arts, ...
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    venue_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    city: Mapped[str] = mapped_column(String, nullable=False, index=True)
    country: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    start_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    day_of_week: Mapped[str] = mapped_column(String, default="")
    image_url: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    ticket_url: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    # Scoring attributes
    genre: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    music_genres: Mapped[Optional[str]] = mapped_column(Text, default="[]")
    tags: Mapped[Optional[str]] = mapped_column(Text, default="[]")
    artists: Mapped[Optional[str]] = mapped_column(Text, default="[]")
    price_min: Mapped[float] = mapped_column(Float, default=0.0)
    price_max: Mapped[float] = mapped_column(Float, default=0.0)
    is_free: Mapped[bool] = mapped_column(Boolean, default=False)
    currency: Mapped[str] = mapped_column(String, default="EUR")
    hype_score: Mapped[int] = mapped_column(Integer, default=0)  # 0-100

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    swipes = relationship("Swipe", back_populates="event_card")
    alerts = relationship("Alert", back_populates="event_card")

    def to_dict(self) -> dict:
        """Display attributes, with tag columns left encoded."""
        return {
            'id': self.id,
            'title': self.title,
            'event_type': self.event_type,
            'category': self.category,
            'description': self.description,
            'venue_name': self.venue_name,
            'city': self.city,
            'country': self.country,
            'start_date': self.start_date.isoformat() if self.start_date else None,
            'day_of_week': self.day_of_week,
            'image_url': self.image_url,
            'ticket_url': self.ticket_url,
            'genre': self.genre,
            'price_min': self.price_min,
            'price_max': self.price_max,
            'is_free': self.is_free,
            'currency': self.currency,
            'hype_score': self.hype_score
        }
