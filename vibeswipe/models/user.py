"""User and profile models."""
from datetime import datetime
from typing import Optional
from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from vibeswipe.database import Base


class User(Base):
    """Account keyed by email. There is no password or session."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    profile = relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")
    swipes = relationship("Swipe", back_populates="user", cascade="all, delete-orphan")
    alerts = relationship("Alert", back_populates="user", cascade="all, delete-orphan")


class Profile(Base):
    """Taste profile of a user.

    Tag collections are stored as JSON-encoded text; use
    ``vibeswipe.schemas.preferences`` to decode them.
    """
    __tablename__ = "profiles"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    current_city: Mapped[str] = mapped_column(String, nullable=False)
    current_country: Mapped[str] = mapped_column(String, nullable=False)
    is_visitor: Mapped[bool] = mapped_column(Boolean, default=False)

    vibe_styles: Mapped[Optional[str]] = mapped_column(Text, default="[]")
    go_out_days: Mapped[Optional[str]] = mapped_column(Text, default='["friday", "saturday"]')
    budget_level: Mapped[str] = mapped_column(String, default="medium")
    music_genres: Mapped[Optional[str]] = mapped_column(Text, default="[]")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="profile")
