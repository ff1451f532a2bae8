"""Venue match scoring.

A venue earns up to 100 points from five components:

- vibe: 40 for covering every preferred vibe style (neutral 20)
- nights: 20 for being best on every preferred go-out day (neutral 10)
- budget: 15 when the price tier fits the budget, 5 otherwise
- genres: 15 for covering every preferred music genre (neutral 7)
- rating: up to 10, linear in the 0-5 rating

Neutral values apply when either side of an overlap is empty.
"""
from vibeswipe.schemas.candidates import VenueCandidate
from vibeswipe.schemas.preferences import UserPreferences
from .matching import ScoreBreakdown, scaled_overlap

VIBE_WEIGHT = 40
VIBE_NEUTRAL = 20
NIGHTS_WEIGHT = 20
NIGHTS_NEUTRAL = 10
BUDGET_WEIGHT = 15
BUDGET_MISS = 5
GENRE_WEIGHT = 15
GENRE_NEUTRAL = 7
RATING_WEIGHT = 10
MAX_RATING = 5.0

PRICE_TIERS = {'$': 1, '$$': 2, '$$$': 3, '$$$$': 4}
ALL_TIERS = frozenset({1, 2, 3, 4})
BUDGET_TIERS = {
    'budget': frozenset({1, 2}),
    'medium': frozenset({2, 3}),
    'premium': frozenset({3, 4}),
    'any': ALL_TIERS,
}


def _overlap_points(candidate_tags, preferred_tags, weight, neutral, normalize):
    if preferred_tags and candidate_tags:
        return scaled_overlap(candidate_tags, preferred_tags, weight, normalize)
    return neutral


def budget_fits(price_level: str, budget_level: str) -> bool:
    """Whether a ``$``-style price level is inside a budget's tier range.

    Unknown budget levels allow every tier and unknown price levels fit
    every budget.
    """
    tier = PRICE_TIERS.get(price_level)
    if tier is None:
        return True
    return tier in BUDGET_TIERS.get(budget_level, ALL_TIERS)


def venue_breakdown(
    venue: VenueCandidate,
    prefs: UserPreferences,
    normalize_tags: bool = False
) -> ScoreBreakdown:
    """Per-component points for a venue."""
    breakdown = ScoreBreakdown()
    breakdown.add('vibe', _overlap_points(
        venue.tags, prefs.vibe_styles, VIBE_WEIGHT, VIBE_NEUTRAL, normalize_tags
    ))
    breakdown.add('nights', _overlap_points(
        venue.best_nights, prefs.go_out_days, NIGHTS_WEIGHT, NIGHTS_NEUTRAL, normalize_tags
    ))
    breakdown.add('budget', BUDGET_WEIGHT if budget_fits(venue.price_level, prefs.budget_level) else BUDGET_MISS)
    breakdown.add('genres', _overlap_points(
        venue.music_genres, prefs.music_genres, GENRE_WEIGHT, GENRE_NEUTRAL, normalize_tags
    ))
    breakdown.add('rating', min(RATING_WEIGHT, venue.rating / MAX_RATING * RATING_WEIGHT))
    return breakdown


def score_venue(venue: VenueCandidate, prefs: UserPreferences, normalize_tags: bool = False) -> int:
    """Score a venue against user preferences (0-100)."""
    return venue_breakdown(venue, prefs, normalize_tags).total
