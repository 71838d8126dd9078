from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.auth_dependency import get_db
from app.db.models.event import Event
from app.schemas.listing import EventListResponse, EventResponse
from app.services.listing_service import list_items

router = APIRouter(prefix="/api/events", tags=["Events"])


@router.get("", response_model=EventListResponse)
def list_events(
    search: Optional[str] = Query(None, description="Search in title, organizer and location"),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db)
):
    events, total = list_items(db, Event, search=search, page=page, page_size=page_size)
    return EventListResponse(
        items=[EventResponse.model_validate(event) for event in events],
        total=total,
        page=page,
        page_size=page_size,
    )
