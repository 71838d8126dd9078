"""
UserProfile model - the per-user profile document written at signup.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.db.base import Base


class UserProfile(Base):
    """
    Profile document keyed by the identity uid.
    
    Kept apart from User so that a failed profile write never blocks signup.
    """
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, index=True)
    uid = Column(String(64), ForeignKey("users.uid"), unique=True, index=True, nullable=False)
    email = Column(String, nullable=False)
    
    # Profile fields
    first_name = Column(String, nullable=False, default="")
    last_name = Column(String, nullable=False, default="")
    phone = Column(String, nullable=False, default="")
    user_type = Column(String, nullable=False, default="job_seeker")  # "job_seeker", "employer"
    profile_complete = Column(Boolean, nullable=False, default=False)
    email_verified = Column(Boolean, nullable=False, default=False)
    
    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<UserProfile(uid='{self.uid}', user_type='{self.user_type}')>"
