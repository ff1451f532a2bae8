"""Alert model."""
from datetime import datetime
from typing import Optional
from sqlalchemy import String, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from vibeswipe.database import Base
from vibeswipe.schemas.preferences import decode_tag_list


class Alert(Base):
    """A user's alert subscription or notice; delivery happens elsewhere."""
    __tablename__ = "alerts"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    venue_card_id: Mapped[Optional[str]] = mapped_column(ForeignKey("venue_cards.id", ondelete="SET NULL"), nullable=True)
    event_card_id: Mapped[Optional[str]] = mapped_column(ForeignKey("event_cards.id", ondelete="SET NULL"), nullable=True)
    alert_type: Mapped[str] = mapped_column(String, nullable=False)  # new_event, price_drop, artist_in_town, ...
    message: Mapped[str] = mapped_column(String, nullable=False)
    target_city: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    target_genre: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    target_artist: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    triggered: Mapped[bool] = mapped_column(Boolean, default=False)
    triggered_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="alerts")
    venue_card = relationship("VenueCard", back_populates="alerts")
    event_card = relationship("EventCard", back_populates="alerts")

    def venue_summary(self) -> Optional[dict]:
        if self.venue_card is None:
            return None
        venue = self.venue_card
        return {
            'id': venue.id,
            'name': venue.name,
            'venue_type': venue.venue_type,
            'image_url': venue.image_url,
            'neighborhood': venue.neighborhood
        }

    def event_summary(self) -> Optional[dict]:
        if self.event_card is None:
            return None
        event = self.event_card
        return {
            'id': event.id,
            'title': event.title,
            'event_type': event.event_type,
            'image_url': event.image_url,
            'start_date': event.start_date.isoformat() if event.start_date else None,
            'venue_name': event.venue_name,
            'artists': decode_tag_list(event.artists)
        }

    def to_dict(self) -> dict:
        """Convert alert to dictionary, with summaries of the linked cards."""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'venue_card_id': self.venue_card_id,
            'event_card_id': self.event_card_id,
            'alert_type': self.alert_type,
            'message': self.message,
            'target_city': self.target_city,
            'target_genre': self.target_genre,
            'target_artist': self.target_artist,
            'triggered': self.triggered,
            'triggered_at': self.triggered_at.isoformat() if self.triggered_at else None,
            'is_read': self.is_read,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'venue': self.venue_summary(),
            'event': self.event_summary()
        }
