"""Service for assembling the personalized swipe feed."""
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Set, Tuple
import logging

from sqlalchemy.orm import Session

from vibeswipe.core.config import Settings, get_settings
from vibeswipe.models.event import EventCard
from vibeswipe.models.swipe import Swipe
from vibeswipe.models.user import Profile
from vibeswipe.models.venue import VenueCard
from vibeswipe.schemas.candidates import EventCandidate, VenueCandidate
from vibeswipe.schemas.feed import FeedCard, FeedResponse
from vibeswipe.schemas.preferences import UserPreferences
from vibeswipe.scoring import event_breakdown, event_match_label, venue_breakdown, venue_match_label

logger = logging.getLogger(__name__)

FEED_TYPES = ('venues', 'events', 'all')
NO_CITY_MESSAGE = "Set your city first"


def rank_cards(*groups: Iterable[FeedCard]) -> List[FeedCard]:
    """Merge card groups into one list ordered by descending match score.

    The sort is stable: equal scores keep their fetch order, and earlier
    groups come before later ones.
    """
    merged = [card for group in groups for card in group]
    return sorted(merged, key=lambda card: card.match_score, reverse=True)


class FeedService:
    """Builds a ranked venue and event feed for a city and user."""

    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()

    def default_preferences(self) -> UserPreferences:
        return UserPreferences(
            vibe_styles=[],
            go_out_days=list(self.settings.DEFAULT_GO_OUT_DAYS),
            budget_level=self.settings.DEFAULT_BUDGET_LEVEL,
            music_genres=[]
        )

    def load_preferences(self, user_id: Optional[int]) -> Tuple[UserPreferences, Optional[Profile]]:
        """Preferences of a user, or the anonymous defaults."""
        if user_id is None:
            return self.default_preferences(), None
        profile = self.db.query(Profile).filter(Profile.user_id == user_id).first()
        if not profile:
            logger.debug(f"No profile for user {user_id}, using default preferences")
            return self.default_preferences(), None
        return UserPreferences.from_profile(profile), profile

    def swiped_ids(self, user_id: Optional[int]) -> Tuple[Set[str], Set[str]]:
        """Venue and event ids the user has already swiped on."""
        if user_id is None:
            return set(), set()
        rows = self.db.query(Swipe.venue_card_id, Swipe.event_card_id).filter(
            Swipe.user_id == user_id
        ).all()
        venue_ids = {venue_id for venue_id, _ in rows if venue_id is not None}
        event_ids = {event_id for _, event_id in rows if event_id is not None}
        return venue_ids, event_ids

    def fetch_venues(self, city: str, exclude_ids: Set[str]) -> List[VenueCard]:
        query = self.db.query(VenueCard).filter(VenueCard.city == city)
        if exclude_ids:
            query = query.filter(VenueCard.id.notin_(exclude_ids))
        return query.order_by(
            VenueCard.vibe_score.desc(), VenueCard.id
        ).limit(self.settings.FEED_CANDIDATE_LIMIT).all()

    def fetch_events(
        self,
        city: str,
        exclude_ids: Set[str],
        category: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> List[EventCard]:
        now = now or datetime.now(timezone.utc)
        query = self.db.query(EventCard).filter(
            EventCard.city == city,
            EventCard.start_date >= now
        )
        if exclude_ids:
            query = query.filter(EventCard.id.notin_(exclude_ids))
        if category:
            query = query.filter(EventCard.category == category)
        return query.order_by(
            EventCard.start_date.asc(), EventCard.id
        ).limit(self.settings.FEED_CANDIDATE_LIMIT).all()

    def venue_card(self, venue: VenueCard, prefs: UserPreferences) -> FeedCard:
        candidate = VenueCandidate.from_card(venue)
        breakdown = venue_breakdown(candidate, prefs, self.settings.SCORING_NORMALIZE_TAGS)
        score = breakdown.total
        label = venue_match_label(score)
        attributes = venue.to_dict()
        attributes.update(
            tags=candidate.tags,
            best_nights=candidate.best_nights,
            music_genres=candidate.music_genres
        )
        return FeedCard(
            card_type='venue',
            id=venue.id,
            match_score=score,
            match_label=label.label,
            match_color=label.color,
            score_breakdown=breakdown.to_dict(),
            attributes=attributes
        )

    def event_card(self, event: EventCard, prefs: UserPreferences) -> FeedCard:
        candidate = EventCandidate.from_card(event)
        breakdown = event_breakdown(candidate, prefs, self.settings.SCORING_NORMALIZE_TAGS)
        score = breakdown.total
        label = event_match_label(score)
        attributes = event.to_dict()
        attributes.update(
            tags=candidate.tags,
            music_genres=candidate.music_genres,
            artists=candidate.artists
        )
        return FeedCard(
            card_type='event',
            id=event.id,
            match_score=score,
            match_label=label.label,
            match_color=label.color,
            score_breakdown=breakdown.to_dict(),
            attributes=attributes
        )

    def build_feed(
        self,
        city: Optional[str] = None,
        user_id: Optional[int] = None,
        feed_type: str = 'all',
        category: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> FeedResponse:
        """
        Build the ranked feed.

        Args:
            city: City to show; falls back to the user's profile city
            user_id: Optional user whose preferences and swipes apply
            feed_type: 'venues', 'events' or 'all' (unknown values mean 'all')
            category: Optional event category filter
            now: Reference time for upcoming events

        Returns:
            FeedResponse with the merged feed and the per-type lists
        """
        if feed_type not in FEED_TYPES:
            logger.debug(f"Unknown feed type {feed_type!r}, using 'all'")
            feed_type = 'all'

        prefs, profile = self.load_preferences(user_id)
        resolved_city = city or (profile.current_city if profile else '')
        if not resolved_city:
            return FeedResponse(city='', message=NO_CITY_MESSAGE)

        swiped_venues, swiped_events = self.swiped_ids(user_id)

        venues: List[FeedCard] = []
        if feed_type in ('venues', 'all'):
            venues = [self.venue_card(v, prefs) for v in self.fetch_venues(resolved_city, swiped_venues)]

        events: List[FeedCard] = []
        if feed_type in ('events', 'all'):
            events = [
                self.event_card(e, prefs)
                for e in self.fetch_events(resolved_city, swiped_events, category, now)
            ]

        feed = rank_cards(venues, events)
        logger.debug(
            f"Feed for {resolved_city}: {len(venues)} venues, {len(events)} events "
            f"(excluded {len(swiped_venues)} + {len(swiped_events)} swiped)"
        )

        return FeedResponse(
            feed=feed,
            venues=venues,
            events=events,
            city=resolved_city,
            count=len(feed)
        )
