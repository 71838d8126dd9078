"""
Database models module.

Imports every model so it is registered with Base.metadata before table creation.
"""
from app.db.models.user import User
from app.db.models.user_profile import UserProfile
from app.db.models.job import Job
from app.db.models.course import Course
from app.db.models.event import Event

__all__ = [
    "User",
    "UserProfile",
    "Job",
    "Course",
    "Event",
]
