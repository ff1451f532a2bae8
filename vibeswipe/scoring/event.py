"""Event match scoring."""
from vibeswipe.schemas.candidates import EventCandidate
from vibeswipe.schemas.preferences import UserPreferences
from .matching import ScoreBreakdown, scaled_overlap, tag_set

GENRE_WEIGHT = 30
GENRE_NEUTRAL = 15
DAY_WEIGHT = 20
DAY_NEUTRAL = 10
VIBE_WEIGHT = 20
VIBE_NEUTRAL = 10
BUDGET_WEIGHT = 15
BUDGET_PARTIAL = 8
HYPE_WEIGHT = 15
MAX_HYPE = 100.0

# Highest ticket price (in the event's currency) each budget accepts
BUDGET_CEILINGS = {
    'budget': 20,
    'medium': 50,
    'premium': 200,
    'any': 999,
}
DEFAULT_CEILING = 999


def _genre_points(event: EventCandidate, prefs: UserPreferences, normalize: bool) -> float:
    if prefs.music_genres and event.music_genres:
        return scaled_overlap(event.music_genres, prefs.music_genres, GENRE_WEIGHT, normalize)
    return GENRE_NEUTRAL


def _day_points(event: EventCandidate, prefs: UserPreferences, normalize: bool) -> float:
    if not prefs.go_out_days:
        return DAY_NEUTRAL
    day = event.day_of_week.strip().lower() if normalize else event.day_of_week
    return DAY_WEIGHT if day in tag_set(prefs.go_out_days, normalize) else 0


def _vibe_points(event: EventCandidate, prefs: UserPreferences, normalize: bool) -> float:
    # Neutral only when the user has no vibe styles; untagged events get 0
    if not prefs.vibe_styles:
        return VIBE_NEUTRAL
    return scaled_overlap(event.tags, prefs.vibe_styles, VIBE_WEIGHT, normalize)


def _budget_points(event: EventCandidate, prefs: UserPreferences) -> float:
    if event.is_free:
        return BUDGET_WEIGHT
    ceiling = BUDGET_CEILINGS.get(prefs.budget_level, DEFAULT_CEILING)
    if event.price_max <= ceiling:
        return BUDGET_WEIGHT
    if event.price_min <= ceiling:
        return BUDGET_PARTIAL
    return 0


def event_breakdown(
    event: EventCandidate,
    prefs: UserPreferences,
    normalize_tags: bool = False
) -> ScoreBreakdown:
    """Per-component points for an event.

    Args:
        event: Event attributes
        prefs: User taste profile
        normalize_tags: Lowercase and trim tags and weekday names before matching

    Returns:
        Breakdown with ``genres``, ``day``, ``vibe``, ``budget`` and ``hype`` points
    """
    breakdown = ScoreBreakdown()
    breakdown.add('genres', _genre_points(event, prefs, normalize_tags))
    breakdown.add('day', _day_points(event, prefs, normalize_tags))
    breakdown.add('vibe', _vibe_points(event, prefs, normalize_tags))
    breakdown.add('budget', _budget_points(event, prefs))
    breakdown.add('hype', min(HYPE_WEIGHT, event.hype_score / MAX_HYPE * HYPE_WEIGHT))
    return breakdown


def score_event(event: EventCandidate, prefs: UserPreferences, normalize_tags: bool = False) -> int:
    """Score an event against user preferences (0-100)."""
    return event_breakdown(event, prefs, normalize_tags).total
