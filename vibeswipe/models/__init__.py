"""Models package initialization."""

from vibeswipe.database import Base
from vibeswipe.models.user import User, Profile
from vibeswipe.models.venue import VenueCard
from vibeswipe.models.event import EventCard
from vibeswipe.models.swipe import Swipe, SwipeAction, LIKE_ACTIONS
from vibeswipe.models.alert import Alert

__all__ = [
    'Base',
    'User',
    'Profile',
    'VenueCard',
    'EventCard',
    'Swipe',
    'SwipeAction',
    'LIKE_ACTIONS',
    'Alert'
]

# Register models with Base
Base.registry.configure()
