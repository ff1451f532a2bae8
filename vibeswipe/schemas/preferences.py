"""User preference schemas and the JSON text decoding used by profiles."""
import json
import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


def decode_tag_list(raw: Any) -> List[str]:
    """Decode a JSON-encoded text column into a list of strings.

    Null, empty or malformed values decode to an empty list. Non-string
    items are dropped.
    """
    if raw is None or raw == "":
        return []
    if isinstance(raw, (list, tuple, set)):
        value = list(raw)
    else:
        try:
            value = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Could not decode tag list: {raw!r}")
            return []
    if not isinstance(value, list):
        logger.warning(f"Expected a JSON list, got {type(value).__name__}")
        return []
    return [item for item in value if isinstance(item, str)]


def encode_tag_list(values: Optional[List[str]]) -> str:
    """Encode a list of strings for storage in a text column."""
    return json.dumps(list(values or []))


class UserPreferences(BaseModel):
    """Taste profile passed unchanged into the scorers."""
    vibe_styles: List[str] = Field(default_factory=list, description="Vibe tags such as 'cocktail' or 'underground'")
    go_out_days: List[str] = Field(default_factory=list, description="Lowercase weekday names")
    budget_level: str = Field(default="any", description="One of budget, medium, premium, any")
    music_genres: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator('vibe_styles', 'go_out_days', 'music_genres', mode='before')
    @classmethod
    def default_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator('budget_level', mode='before')
    @classmethod
    def default_budget_level(cls, v: Any) -> Any:
        return "any" if v is None else v

    @classmethod
    def from_profile(cls, profile) -> "UserPreferences":
        """Build preferences from a stored ``Profile`` row."""
        return cls(
            vibe_styles=decode_tag_list(profile.vibe_styles),
            go_out_days=decode_tag_list(profile.go_out_days),
            budget_level=profile.budget_level,
            music_genres=decode_tag_list(profile.music_genres)
        )


class PreferencesUpdate(BaseModel):
    """Partial update of a profile; omitted fields are left untouched."""
    user_id: Optional[int] = None
    vibe_styles: Optional[List[str]] = None
    go_out_days: Optional[List[str]] = None
    budget_level: Optional[str] = None
    music_genres: Optional[List[str]] = None
    current_city: Optional[str] = None
    current_country: Optional[str] = None
    is_visitor: Optional[bool] = None


class OnboardingRequest(BaseModel):
    """First-run profile creation."""
    email: Optional[str] = None
    current_city: Optional[str] = None
    current_country: Optional[str] = None
    is_visitor: bool = False
    vibe_styles: List[str] = Field(default_factory=list)
    go_out_days: List[str] = Field(default_factory=lambda: ["friday", "saturday"])
    budget_level: str = "medium"
    music_genres: List[str] = Field(default_factory=list)
