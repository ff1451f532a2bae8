"""Preference and onboarding endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from vibeswipe.database import get_db
from vibeswipe.schemas.preferences import OnboardingRequest, PreferencesUpdate
from vibeswipe.services.profile import (
    OnboardingError,
    ProfileNotFoundError,
    ProfileService,
    profile_to_dict
)
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/preferences")
async def get_preferences(user_id: Optional[int] = None, db: Session = Depends(get_db)):
    """Get the decoded preference profile of a user."""
    if user_id is None:
        raise HTTPException(status_code=400, detail="Missing user_id")
    try:
        profile = ProfileService(db).get_profile(user_id)
        return {"profile": profile_to_dict(profile)}
    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")
    except Exception as e:
        logger.error(f"Preferences GET error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load preferences")


@router.put("/preferences")
async def update_preferences(update: PreferencesUpdate, db: Session = Depends(get_db)):
    """Update only the preference fields present in the request."""
    if update.user_id is None:
        raise HTTPException(status_code=400, detail="Missing user_id")
    try:
        profile = ProfileService(db).update_preferences(update)
        return {"success": True, "profile": profile_to_dict(profile)}
    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")
    except Exception as e:
        logger.error(f"Preferences PUT error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update preferences")


@router.post("/onboarding")
async def onboarding(request: OnboardingRequest, db: Session = Depends(get_db)):
    """Create a user by email together with their first profile."""
    try:
        user = ProfileService(db).onboard(request)
        return {"user_id": user.id, "success": True}
    except OnboardingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Onboarding error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create profile")
