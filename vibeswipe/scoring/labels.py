"""Short recommendation labels for match scores."""
from typing import NamedTuple, Sequence, Tuple


class MatchLabel(NamedTuple):
    label: str
    color: str


# (inclusive lower bound, label), highest first
VENUE_LABELS: Sequence[Tuple[int, MatchLabel]] = (
    (85, MatchLabel('Perfect Match', 'emerald')),
    (70, MatchLabel('Great Fit', 'violet')),
    (50, MatchLabel('Worth Trying', 'amber')),
)
VENUE_FALLBACK = MatchLabel('Explore', 'slate')

EVENT_LABELS: Sequence[Tuple[int, MatchLabel]] = (
    (85, MatchLabel('Must Go', 'rose')),
    (70, MatchLabel('Hot Pick', 'violet')),
    (50, MatchLabel('Check It Out', 'amber')),
)
EVENT_FALLBACK = MatchLabel('Discover', 'slate')


def _lookup(score: float, table: Sequence[Tuple[int, MatchLabel]], fallback: MatchLabel) -> MatchLabel:
    for threshold, label in table:
        if score >= threshold:
            return label
    return fallback


def venue_match_label(score: float) -> MatchLabel:
    """Label for a venue score."""
    return _lookup(score, VENUE_LABELS, VENUE_FALLBACK)


def event_match_label(score: float) -> MatchLabel:
    """Label for an event score."""
    return _lookup(score, EVENT_LABELS, EVENT_FALLBACK)
