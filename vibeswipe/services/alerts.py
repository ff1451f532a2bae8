"""Service for alert subscriptions and in-app alerts."""
from typing import List
import logging

from sqlalchemy.orm import Session, joinedload

from vibeswipe.models.alert import Alert
from vibeswipe.models.event import EventCard
from vibeswipe.models.user import User
from vibeswipe.models.venue import VenueCard
from vibeswipe.schemas.alerts import AlertCreate
from vibeswipe.services.swipe import UnknownUserError

logger = logging.getLogger(__name__)

ALERT_LIST_LIMIT = 50


class AlertError(Exception):
    """Raised when an alert cannot be created or updated."""
    pass


class AlertValidationError(AlertError):
    """Required alert fields are missing or reference unknown records."""
    pass


class AlertNotFoundError(AlertError):
    pass


class AlertService:
    def __init__(self, db: Session):
        self.db = db

    def list_alerts(self, user_id: int, unread_only: bool = False) -> List[Alert]:
        """The user's newest alerts, at most ``ALERT_LIST_LIMIT`` of them."""
        query = self.db.query(Alert).options(
            joinedload(Alert.venue_card),
            joinedload(Alert.event_card)
        ).filter(Alert.user_id == user_id)
        if unread_only:
            query = query.filter(Alert.is_read.is_(False))
        return query.order_by(
            Alert.created_at.desc(), Alert.id.desc()
        ).limit(ALERT_LIST_LIMIT).all()

    def create_alert(self, request: AlertCreate) -> Alert:
        """
        Store an alert subscription for a user.

        Raises:
            AlertValidationError: user_id or alert_type is missing, or a card id is unknown
            UnknownUserError: the user does not exist
        """
        if request.user_id is None or not request.alert_type:
            raise AlertValidationError("Missing required fields")
        if not self.db.get(User, request.user_id):
            raise UnknownUserError(f"User {request.user_id} not found")
        if request.venue_card_id and not self.db.get(VenueCard, request.venue_card_id):
            raise AlertValidationError(f"Unknown venue card: {request.venue_card_id}")
        if request.event_card_id and not self.db.get(EventCard, request.event_card_id):
            raise AlertValidationError(f"Unknown event card: {request.event_card_id}")

        alert = Alert(
            user_id=request.user_id,
            alert_type=request.alert_type,
            target_city=request.target_city or "",
            target_genre=request.target_genre or "",
            target_artist=request.target_artist or "",
            venue_card_id=request.venue_card_id,
            event_card_id=request.event_card_id,
            message=f"Alert set for {request.alert_type.replace('_', ' ', 1)}"
        )
        self.db.add(alert)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(alert)
        logger.info(f"User {request.user_id} subscribed to {request.alert_type} alerts")
        return alert

    def mark_read(self, alert_id: int) -> Alert:
        alert = self.db.get(Alert, alert_id)
        if not alert:
            raise AlertNotFoundError(f"Alert {alert_id} not found")
        alert.is_read = True
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return alert
