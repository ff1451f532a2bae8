"""Alert endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from vibeswipe.database import get_db
from vibeswipe.schemas.alerts import AlertCreate
from vibeswipe.services.alerts import AlertNotFoundError, AlertService, AlertValidationError
from vibeswipe.services.swipe import UnknownUserError
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def list_alerts(user_id: Optional[int] = None, unread_only: bool = False, db: Session = Depends(get_db)):
    """Newest alerts of a user with summaries of the linked venue or event."""
    if user_id is None:
        raise HTTPException(status_code=400, detail="Missing user_id")
    try:
        alerts = AlertService(db).list_alerts(user_id, unread_only=unread_only)
        return {"alerts": [alert.to_dict() for alert in alerts], "count": len(alerts)}
    except Exception as e:
        logger.error(f"Alerts error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load alerts")


@router.post("")
async def create_alert(request: AlertCreate, db: Session = Depends(get_db)):
    """Subscribe a user to an alert type."""
    try:
        alert = AlertService(db).create_alert(request)
        return {"success": True, "alert": alert.to_dict()}
    except AlertValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnknownUserError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Create alert error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create alert")


@router.post("/{alert_id}/read")
async def mark_alert_read(alert_id: int, db: Session = Depends(get_db)):
    try:
        alert = AlertService(db).mark_read(alert_id)
        return {"success": True, "alert": alert.to_dict()}
    except AlertNotFoundError:
        raise HTTPException(status_code=404, detail="Alert not found")
    except Exception as e:
        logger.error(f"Alert update error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update alert")
