from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.auth_dependency import get_db
from app.db.models.course import Course
from app.schemas.listing import CourseListResponse, CourseResponse
from app.services.listing_service import list_items

router = APIRouter(prefix="/api/courses", tags=["Courses"])


@router.get("", response_model=CourseListResponse)
def list_courses(
    search: Optional[str] = Query(None, description="Search in title and provider"),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db)
):
    courses, total = list_items(db, Course, search=search, page=page, page_size=page_size)
    return CourseListResponse(
        items=[CourseResponse.model_validate(course) for course in courses],
        total=total,
        page=page,
        page_size=page_size,
    )
