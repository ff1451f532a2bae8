"""Service for onboarding users and editing their taste profile."""
from typing import Any, Dict, Optional
import logging

from sqlalchemy.orm import Session

from vibeswipe.models.user import Profile, User
from vibeswipe.schemas.preferences import (
    OnboardingRequest,
    PreferencesUpdate,
    decode_tag_list,
    encode_tag_list
)

logger = logging.getLogger(__name__)

TAG_FIELDS = ('vibe_styles', 'go_out_days', 'music_genres')
PLAIN_FIELDS = ('budget_level', 'current_city', 'current_country', 'is_visitor')


class ProfileNotFoundError(Exception):
    """Raised when a user has no profile yet."""
    pass


class OnboardingError(ValueError):
    """Raised when onboarding data is incomplete."""
    pass


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Profile with tag columns decoded."""
    return {
        'user_id': profile.user_id,
        'current_city': profile.current_city,
        'current_country': profile.current_country,
        'is_visitor': profile.is_visitor,
        'vibe_styles': decode_tag_list(profile.vibe_styles),
        'go_out_days': decode_tag_list(profile.go_out_days),
        'budget_level': profile.budget_level,
        'music_genres': decode_tag_list(profile.music_genres),
        'updated_at': profile.updated_at.isoformat() if profile.updated_at else None
    }


class ProfileService:
    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, user_id: int) -> Profile:
        profile = self.db.query(Profile).filter(Profile.user_id == user_id).first()
        if not profile:
            raise ProfileNotFoundError(f"Profile not found for user {user_id}")
        return profile

    def update_preferences(self, update: PreferencesUpdate) -> Profile:
        """Apply the fields present in ``update``; tag lists are stored as JSON text."""
        profile = self.get_profile(update.user_id)
        provided = update.model_dump(exclude_unset=True, exclude={'user_id'})

        for key, value in provided.items():
            if key in TAG_FIELDS:
                setattr(profile, key, encode_tag_list(value))
            elif key in PLAIN_FIELDS and value is not None:
                setattr(profile, key, value)

        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(profile)
        logger.debug(f"Updated preferences for user {update.user_id}: {sorted(provided)}")
        return profile

    def onboard(self, request: OnboardingRequest) -> User:
        """Create or update the user for ``request.email`` and its profile."""
        if not request.email or not request.current_city or not request.current_country:
            raise OnboardingError("Missing required fields")

        fields = {
            'current_city': request.current_city,
            'current_country': request.current_country,
            'is_visitor': request.is_visitor,
            'vibe_styles': encode_tag_list(request.vibe_styles),
            'go_out_days': encode_tag_list(request.go_out_days),
            'budget_level': request.budget_level,
            'music_genres': encode_tag_list(request.music_genres)
        }

        try:
            user = self.db.query(User).filter(User.email == request.email).first()
            if not user:
                user = User(email=request.email)
                self.db.add(user)
                self.db.flush()
                logger.info(f"Created user {user.id}")

            profile: Optional[Profile] = self.db.get(Profile, user.id)
            if profile:
                for key, value in fields.items():
                    setattr(profile, key, value)
            else:
                self.db.add(Profile(user_id=user.id, **fields))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        return user
