"""Swipe and saved-item endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from vibeswipe.database import get_db
from vibeswipe.schemas.feed import SwipeRequest
from vibeswipe.services.swipe import SwipeService, SwipeValidationError, UnknownUserError
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/swipe")
async def swipe(request: SwipeRequest, db: Session = Depends(get_db)):
    """Record a like, superlike or pass on a card."""
    try:
        action = SwipeService(db).record_swipe(
            user_id=request.user_id,
            action=request.action,
            venue_card_id=request.venue_card_id,
            event_card_id=request.event_card_id
        )
        return {"success": True, "action": action}
    except SwipeValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnknownUserError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Swipe error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save swipe")


@router.get("/saved")
async def get_saved(user_id: Optional[int] = None, db: Session = Depends(get_db)):
    """Liked venues and events of a user."""
    if user_id is None:
        raise HTTPException(status_code=400, detail="Missing user_id")
    try:
        return SwipeService(db).saved_items(user_id)
    except Exception as e:
        logger.error(f"Saved error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load saved items")
