"""
Profile store: the profile document kept next to each identity record.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.db.models.user_profile import UserProfile

logger = logging.getLogger(__name__)


class ProfileStore:
    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        uid: str,
        email: str,
        first_name: str = "",
        last_name: str = "",
        phone: str = "",
        user_type: str = "job_seeker",
    ) -> UserProfile:
        profile = UserProfile(
            uid=uid,
            email=email,
            first_name=first_name or "",
            last_name=last_name or "",
            phone=phone or "",
            user_type=user_type,
            profile_complete=False,
            email_verified=False,
        )
        self.db.add(profile)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(profile)
        return profile

    def get(self, uid: str) -> Optional[UserProfile]:
        return self.db.query(UserProfile).filter(UserProfile.uid == uid).first()

    def update(
        self,
        uid: str,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> UserProfile:
        """
        Overwrite the editable fields and mark the profile complete.
        
        A missing profile (signup's profile write failed) is created here.
        """
        profile = self.get(uid)
        if profile is None:
            logger.info(f"No profile for uid={uid}, creating one on update")
            profile = UserProfile(uid=uid, email=email)
            self.db.add(profile)
        
        profile.first_name = first_name or ""
        profile.last_name = last_name or ""
        profile.phone = phone or ""
        profile.profile_complete = True
        
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(profile)
        return profile

    def list_all(self) -> List[UserProfile]:
        return self.db.query(UserProfile).order_by(UserProfile.id).all()
