"""
Pydantic schemas for the job, course and event listings.
"""
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field


class JobResponse(BaseModel):
    id: int
    title: str
    company: str
    location: Optional[str] = None
    job_type: Optional[str] = None
    description: Optional[str] = None
    apply_url: Optional[str] = None
    posted_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True


class CourseResponse(BaseModel):
    id: int
    title: str
    provider: str
    level: Optional[str] = None
    duration: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True


class EventResponse(BaseModel):
    id: int
    title: str
    organizer: str
    location: Optional[str] = None
    starts_at: Optional[datetime] = None
    url: Optional[str] = None
    created_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True


class JobListResponse(BaseModel):
    items: List[JobResponse] = Field(..., description="Jobs on this page")
    total: int = Field(..., description="Total number of matching jobs")
    page: int = Field(1, description="Current page number")
    page_size: int = Field(20, description="Number of items per page")


class CourseListResponse(BaseModel):
    items: List[CourseResponse]
    total: int
    page: int = 1
    page_size: int = 20


class EventListResponse(BaseModel):
    items: List[EventResponse]
    total: int
    page: int = 1
    page_size: int = 20
