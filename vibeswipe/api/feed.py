from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session
from vibeswipe.database import get_db
from vibeswipe.schemas.feed import FeedResponse
from vibeswipe.services.feed import FeedService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/feed", response_model=FeedResponse)
async def get_feed(
    city: Optional[str] = None,
    user_id: Optional[int] = None,
    feed_type: str = Query("all", alias="type"),
    category: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Get the ranked venue and event feed for a city.
    """
    try:
        return FeedService(db).build_feed(
            city=city,
            user_id=user_id,
            feed_type=feed_type,
            category=category or None
        )
    except Exception as e:
        logger.error(f"Feed error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail="Failed to load feed"
        )
