from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from app.core.security import decode_access_token
from app.db.session import SessionLocal
from app.db.models.user import User
from app.services.identity_service import IdentityClient, IdentityError
from app.services.profile_service import ProfileStore

bearer_scheme = HTTPBearer(auto_error=False)


def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_identity_client(db: Session = Depends(get_db)) -> IdentityClient:
    return IdentityClient(db)


def get_profile_store(db: Session = Depends(get_db)) -> ProfileStore:
    return ProfileStore(db)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """Get the current user's uid from the bearer token."""
    if credentials is None:
        raise HTTPException(status_code=401, detail="Access token required")

    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    return payload["sub"]


def get_current_user_obj(
    uid: str = Depends(get_current_user),
    identity: IdentityClient = Depends(get_identity_client),
) -> User:
    """Get current User object from the bearer token."""
    try:
        return identity.get_user(uid)
    except IdentityError:
        raise HTTPException(status_code=401, detail="Invalid authentication")
