"""Test configuration and fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vibeswipe.database import Base, get_db
from vibeswipe.main import app
from vibeswipe.models import User, Profile, VenueCard, EventCard
from vibeswipe.schemas.preferences import encode_tag_list

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_db(engine):
    """Create a fresh test database session for each test."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(test_db):
    """Create a test client bound to the test database."""
    def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def now():
    return datetime.now(timezone.utc)


@pytest.fixture
def make_user(test_db):
    """Create a user with a profile."""
    def _make_user(
        email="dancer@example.com",
        city="Berlin",
        vibe_styles=None,
        go_out_days=None,
        budget_level="medium",
        music_genres=None
    ):
        user = User(email=email)
        test_db.add(user)
        test_db.flush()
        test_db.add(Profile(
            user_id=user.id,
            current_city=city,
            current_country="Germany",
            vibe_styles=encode_tag_list(vibe_styles),
            go_out_days=encode_tag_list(go_out_days if go_out_days is not None else ["friday", "saturday"]),
            budget_level=budget_level,
            music_genres=encode_tag_list(music_genres)
        ))
        test_db.commit()
        return user
    return _make_user


@pytest.fixture
def make_venue(test_db):
    def _make_venue(venue_id, city="Berlin", tags=None, best_nights=None, music_genres=None, **fields):
        venue = VenueCard(
            id=venue_id,
            name=fields.pop("name", venue_id.replace("_", " ").title()),
            city=city,
            tags=encode_tag_list(tags),
            best_nights=encode_tag_list(best_nights),
            music_genres=encode_tag_list(music_genres),
            **fields
        )
        test_db.add(venue)
        test_db.commit()
        return venue
    return _make_venue


@pytest.fixture
def make_event(test_db, now):
    def _make_event(event_id, city="Berlin", days_ahead=3, tags=None, music_genres=None, artists=None, **fields):
        start = fields.pop("start_date", None) or now + timedelta(days=days_ahead)
        fields.setdefault("day_of_week", WEEKDAYS[start.weekday()])
        event = EventCard(
            id=event_id,
            title=fields.pop("title", event_id.replace("_", " ").title()),
            city=city,
            start_date=start,
            tags=encode_tag_list(tags),
            music_genres=encode_tag_list(music_genres),
            artists=encode_tag_list(artists),
            **fields
        )
        test_db.add(event)
        test_db.commit()
        return event
    return _make_event
