"""Schemas package initialization."""

from .preferences import (
    UserPreferences,
    PreferencesUpdate,
    OnboardingRequest,
    decode_tag_list,
    encode_tag_list
)
from .candidates import VenueCandidate, EventCandidate
from .feed import FeedCard, FeedResponse, SwipeRequest
from .alerts import AlertCreate

__all__ = [
    'UserPreferences',
    'PreferencesUpdate',
    'OnboardingRequest',
    'decode_tag_list',
    'encode_tag_list',
    'VenueCandidate',
    'EventCandidate',
    'FeedCard',
    'FeedResponse',
    'SwipeRequest',
    'AlertCreate'
]
