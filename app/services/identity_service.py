"""
Identity client: user accounts and credential checks.

Callers build one IdentityClient per request from a database session and
handle IdentityError by its kind, never by message text.
"""
import enum
import logging
import uuid
from typing import Optional

from email_validator import validate_email, EmailNotValidError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import hash_password, verify_password
from app.db.models.user import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class IdentityErrorKind(str, enum.Enum):
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    INVALID_EMAIL = "invalid_email"
    WEAK_PASSWORD = "weak_password"
    USER_NOT_FOUND = "user_not_found"
    INVALID_CREDENTIALS = "invalid_credentials"


class IdentityError(Exception):
    def __init__(self, kind: IdentityErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)


def normalize_email(email: str) -> str:
    """Validate an address and return its normalized form."""
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError as e:
        raise IdentityError(IdentityErrorKind.INVALID_EMAIL, str(e)) from e


class IdentityClient:
    """Account operations bound to a single database session."""

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, email: str, password: str, display_name: Optional[str] = None) -> User:
        email = normalize_email(email)
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise IdentityError(IdentityErrorKind.WEAK_PASSWORD)
        if self.db.query(User).filter(User.email == email).first():
            raise IdentityError(IdentityErrorKind.EMAIL_ALREADY_EXISTS)
        
        user = User(
            uid=uuid.uuid4().hex,
            email=email,
            password_hash=hash_password(password),
            display_name=display_name or None,
            email_verified=False,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same address
            self.db.rollback()
            raise IdentityError(IdentityErrorKind.EMAIL_ALREADY_EXISTS) from e
        self.db.refresh(user)
        
        logger.info(f"User created: uid={user.uid}")
        return user

    def get_user(self, uid: str) -> User:
        user = self.db.query(User).filter(User.uid == uid).first()
        if not user:
            raise IdentityError(IdentityErrorKind.USER_NOT_FOUND)
        return user

    def get_user_by_email(self, email: str) -> User:
        user = self.db.query(User).filter(User.email == normalize_email(email)).first()
        if not user:
            raise IdentityError(IdentityErrorKind.USER_NOT_FOUND)
        return user

    def verify_credentials(self, email: str, password: str) -> User:
        """Return the user for a matching email/password pair."""
        try:
            user = self.get_user_by_email(email)
        except IdentityError as e:
            raise IdentityError(IdentityErrorKind.INVALID_CREDENTIALS) from e
        
        if not verify_password(password, user.password_hash):
            logger.info(f"Password mismatch for uid={user.uid}")
            raise IdentityError(IdentityErrorKind.INVALID_CREDENTIALS)
        return user
