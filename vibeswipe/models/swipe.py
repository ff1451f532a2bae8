"""Swipe model recording a user's reaction to a card."""
from datetime import datetime
from enum import Enum
from typing import Optional
from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from vibeswipe.database import Base


class SwipeAction(str, Enum):
    LIKE = "like"
    SUPERLIKE = "superlike"
    PASS = "pass"


LIKE_ACTIONS = (SwipeAction.LIKE.value, SwipeAction.SUPERLIKE.value)


class Swipe(Base):
    """One swipe per user and card; re-swiping updates the action."""
    __tablename__ = "swipes"
    __table_args__ = (
        UniqueConstraint("user_id", "venue_card_id", name="uq_swipes_user_venue"),
        UniqueConstraint("user_id", "event_card_id", name="uq_swipes_user_event"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    venue_card_id: Mapped[Optional[str]] = mapped_column(ForeignKey("venue_cards.id", ondelete="CASCADE"), nullable=True)
    event_card_id: Mapped[Optional[str]] = mapped_column(ForeignKey("event_cards.id", ondelete="CASCADE"), nullable=True)
    action: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="swipes")
    venue_card = relationship("VenueCard", back_populates="swipes")
    event_card = relationship("EventCard", back_populates="swipes")
