"""Service for recording swipes and listing saved cards."""
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy.orm import Session

from vibeswipe.models.alert import Alert
from vibeswipe.models.event import EventCard
from vibeswipe.models.swipe import LIKE_ACTIONS, Swipe, SwipeAction
from vibeswipe.models.user import User
from vibeswipe.models.venue import VenueCard
from vibeswipe.schemas.candidates import EventCandidate, VenueCandidate

logger = logging.getLogger(__name__)

NEW_EVENT_ALERT = "new_event"


class SwipeError(Exception):
    """Raised when a swipe request cannot be recorded."""
    pass


class SwipeValidationError(SwipeError):
    """Required swipe fields are missing or invalid."""
    pass


class UnknownUserError(SwipeError):
    """The swiping user does not exist."""
    pass


class SwipeService:
    def __init__(self, db: Session):
        self.db = db

    def _upsert(self, user_id: int, action: str, **card: str) -> Swipe:
        swipe = self.db.query(Swipe).filter_by(user_id=user_id, **card).first()
        if swipe:
            swipe.action = action
        else:
            swipe = Swipe(user_id=user_id, action=action, **card)
            self.db.add(swipe)
        return swipe

    def _alert_saved_event(self, user_id: int, event_card_id: str) -> Optional[Alert]:
        event = self.db.get(EventCard, event_card_id)
        if not event:
            logger.warning(f"Liked event {event_card_id} not found, skipping alert")
            return None
        existing = self.db.query(Alert).filter_by(
            user_id=user_id, event_card_id=event_card_id, alert_type=NEW_EVENT_ALERT
        ).first()
        if existing:
            return existing
        alert = Alert(
            user_id=user_id,
            event_card_id=event_card_id,
            alert_type=NEW_EVENT_ALERT,
            message=f"Saved: {event.title}",
            target_city=event.city,
            target_genre=event.genre
        )
        self.db.add(alert)
        return alert

    def record_swipe(
        self,
        user_id: Optional[int],
        action: Optional[str],
        venue_card_id: Optional[str] = None,
        event_card_id: Optional[str] = None
    ) -> str:
        """
        Record a swipe on a venue and/or event card.

        Re-swiping a card replaces the earlier action. Liking an event also
        creates a ``new_event`` alert for it.

        Returns:
            The recorded action
        """
        if user_id is None or not action:
            raise SwipeValidationError("Missing required fields")
        if not venue_card_id and not event_card_id:
            raise SwipeValidationError("Must provide venue_card_id or event_card_id")
        if action not in {a.value for a in SwipeAction}:
            raise SwipeValidationError(f"Unknown swipe action: {action}")
        if not self.db.get(User, user_id):
            raise UnknownUserError(f"User {user_id} not found")

        try:
            if venue_card_id:
                self._upsert(user_id, action, venue_card_id=venue_card_id)
            if event_card_id:
                self._upsert(user_id, action, event_card_id=event_card_id)
                if action in LIKE_ACTIONS:
                    self._alert_saved_event(user_id, event_card_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"User {user_id} swiped {action} on venue={venue_card_id} event={event_card_id}")
        return action

    def saved_items(self, user_id: int) -> Dict[str, Any]:
        """Venues and events the user liked, newest swipe first."""
        swipes = self.db.query(Swipe).filter(
            Swipe.user_id == user_id,
            Swipe.action.in_(LIKE_ACTIONS)
        ).order_by(Swipe.created_at.desc(), Swipe.id.desc()).all()

        venues: List[Dict[str, Any]] = []
        events: List[Dict[str, Any]] = []
        for swipe in swipes:
            if swipe.venue_card is not None:
                venue = VenueCandidate.from_card(swipe.venue_card)
                venues.append({
                    **swipe.venue_card.to_dict(),
                    'tags': venue.tags,
                    'best_nights': venue.best_nights,
                    'music_genres': venue.music_genres,
                    'swipe_action': swipe.action,
                    'swiped_at': swipe.created_at.isoformat() if swipe.created_at else None,
                    'card_type': 'venue'
                })
            if swipe.event_card is not None:
                event = EventCandidate.from_card(swipe.event_card)
                events.append({
                    **swipe.event_card.to_dict(),
                    'tags': event.tags,
                    'music_genres': event.music_genres,
                    'artists': event.artists,
                    'swipe_action': swipe.action,
                    'swiped_at': swipe.created_at.isoformat() if swipe.created_at else None,
                    'card_type': 'event'
                })

        return {
            'venues': venues,
            'events': events,
            'total': len(venues) + len(events)
        }
