"""
Read-only listing queries for jobs, courses and events.
"""
from typing import Optional, Tuple, List

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.db.models.job import Job
from app.db.models.course import Course
from app.db.models.event import Event

# model -> (columns searched by ?search=, column for newest-first ordering)
LISTINGS = {
    Job: ((Job.title, Job.company, Job.location), Job.posted_at),
    Course: ((Course.title, Course.provider), Course.created_at),
    Event: ((Event.title, Event.organizer, Event.location), Event.created_at),
}


def list_items(
    db: Session,
    model,
    search: Optional[str] = None,
    page: int = 1,
    page_size: int = 20,
) -> Tuple[List, int]:
    """
    Page through one listing, newest first.
    
    Returns:
        (items on the requested page, total matching rows)
    """
    search_columns, order_column = LISTINGS[model]
    query = db.query(model)
    
    if search:
        term = f"%{search}%"
        query = query.filter(or_(*(column.ilike(term) for column in search_columns)))
    
    total = query.count()
    offset = (page - 1) * page_size
    items = (
        query.order_by(order_column.desc(), model.id.desc())
        .offset(offset)
        .limit(page_size)
        .all()
    )
    return items, total
