"""Match scoring of venues and events against a user's taste profile."""

from .matching import ScoreBreakdown, tag_overlap, scaled_overlap
from .venue import score_venue, venue_breakdown
from .event import score_event, event_breakdown
from .labels import MatchLabel, venue_match_label, event_match_label

__all__ = [
    'ScoreBreakdown',
    'tag_overlap',
    'scaled_overlap',
    'score_venue',
    'venue_breakdown',
    'score_event',
    'event_breakdown',
    'MatchLabel',
    'venue_match_label',
    'event_match_label'
]
