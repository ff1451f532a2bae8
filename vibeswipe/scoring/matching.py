"""Shared helpers for the venue and event scorers."""
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Set

MIN_SCORE = 0
MAX_SCORE = 100


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (builtin round() is banker's)."""
    return int(math.floor(value + 0.5))


def tag_set(tags: Iterable[str], normalize: bool = False) -> Set[str]:
    """Collect tags into a set, optionally lowercased and trimmed."""
    if normalize:
        return {tag.strip().lower() for tag in tags}
    return set(tags)


def tag_overlap(candidate_tags: Iterable[str], preferred_tags: Iterable[str], normalize: bool = False) -> int:
    """Number of distinct tags present in both collections."""
    return len(tag_set(candidate_tags, normalize) & tag_set(preferred_tags, normalize))


def scaled_overlap(
    candidate_tags: Iterable[str],
    preferred_tags: Iterable[str],
    weight: float,
    normalize: bool = False
) -> float:
    """Share of the preferred tags the candidate covers, scaled to ``weight``.

    Callers decide what an empty collection is worth; an empty preference
    set here yields 0.
    """
    preferred = tag_set(preferred_tags, normalize)
    if not preferred:
        return 0.0
    overlap = len(tag_set(candidate_tags, normalize) & preferred)
    return min(weight, overlap / len(preferred) * weight)


@dataclass
class ScoreBreakdown:
    """Points awarded per scoring component."""
    components: Dict[str, float] = field(default_factory=dict)

    def add(self, name: str, points: float) -> None:
        self.components[name] = points

    @property
    def raw(self) -> float:
        return sum(self.components.values())

    @property
    def total(self) -> int:
        """Final 0-100 match score.

        Component weights always sum to 100, so the raw sum is already on
        the 100-point scale. A non-finite sum scores the minimum.
        """
        raw = self.raw
        if not math.isfinite(raw):
            return MIN_SCORE
        return max(MIN_SCORE, min(MAX_SCORE, round_half_up(raw)))

    def to_dict(self) -> Dict[str, float]:
        return {name: round(points, 2) for name, points in self.components.items()}
