"""
User profile endpoints.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from app.core.auth_dependency import get_current_user_obj, get_profile_store
from app.db.models.user import User
from app.schemas.user import ProfileUpdate, ProfileResponse, UserOut, build_user_out
from app.services.profile_service import ProfileStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


@router.get("/user/profile", response_model=ProfileResponse)
def get_profile(
    user: User = Depends(get_current_user_obj),
    profiles: ProfileStore = Depends(get_profile_store),
):
    return ProfileResponse(user=build_user_out(user, profiles.get(user.uid)))


@router.put("/user/profile", response_model=ProfileResponse)
def update_profile(
    update: ProfileUpdate,
    user: User = Depends(get_current_user_obj),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """
    Update the caller's profile and mark it complete.
    """
    try:
        profile = profiles.update(
            user.uid,
            user.email,
            first_name=update.firstName,
            last_name=update.lastName,
            phone=update.phone,
        )
    except SQLAlchemyError as e:
        logger.error(f"Profile update failed for uid={user.uid}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile"
        )
    
    logger.info(f"Profile updated: uid={user.uid}")
    return ProfileResponse(message="Profile updated successfully", user=build_user_out(user, profile))


@router.get("/users", response_model=List[UserOut])
def list_users(
    _: User = Depends(get_current_user_obj),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """List every profile document. Requires authentication."""
    return [
        UserOut(
            uid=profile.uid,
            email=profile.email,
            displayName=f"{profile.first_name} {profile.last_name}".strip() or profile.email.split("@")[0],
            emailVerified=bool(profile.email_verified),
            firstName=profile.first_name,
            lastName=profile.last_name,
            phone=profile.phone,
            userType=profile.user_type,
            profileComplete=bool(profile.profile_complete),
            createdAt=profile.created_at,
            updatedAt=profile.updated_at,
        )
        for profile in profiles.list_all()
    ]
