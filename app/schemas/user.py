"""
Pydantic schemas for user profile endpoints.
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class UserOut(BaseModel):
    """Identity fields merged with the profile document."""
    uid: str
    email: str
    displayName: str
    emailVerified: bool = False
    firstName: str = ""
    lastName: str = ""
    phone: str = ""
    userType: str = "job_seeker"
    profileComplete: bool = False
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class ProfileUpdate(BaseModel):
    """Editable profile fields; omitted fields are cleared."""
    firstName: Optional[str] = Field(default=None, max_length=100)
    lastName: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)


class ProfileResponse(BaseModel):
    message: Optional[str] = None
    user: UserOut


def build_user_out(user, profile=None) -> UserOut:
    """Merge a User row with its (possibly missing) UserProfile row."""
    fields = {
        "uid": user.uid,
        "email": user.email,
        "displayName": user.display_name or user.email.split("@")[0],
        "emailVerified": bool(user.email_verified),
        "createdAt": user.created_at,
    }
    if profile is not None:
        fields.update(
            firstName=profile.first_name,
            lastName=profile.last_name,
            phone=profile.phone,
            userType=profile.user_type,
            profileComplete=bool(profile.profile_complete),
            createdAt=profile.created_at,
            updatedAt=profile.updated_at,
        )
    return UserOut(**fields)
