"""Service layer between the API routers and the database."""

from .feed import FeedService, rank_cards
from .swipe import SwipeService, SwipeError, SwipeValidationError, UnknownUserError
from .profile import ProfileService, ProfileNotFoundError, OnboardingError, profile_to_dict
from .alerts import AlertService, AlertError, AlertValidationError, AlertNotFoundError, ALERT_LIST_LIMIT

__all__ = [
    'FeedService',
    'rank_cards',
    'SwipeService',
    'SwipeError',
    'SwipeValidationError',
    'UnknownUserError',
    'ProfileService',
    'ProfileNotFoundError',
    'OnboardingError',
    'profile_to_dict',
    'AlertService',
    'AlertError',
    'AlertValidationError',
    'AlertNotFoundError',
    'ALERT_LIST_LIMIT'
]
