import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from app.core.auth_dependency import (
    get_identity_client,
    get_profile_store,
    get_current_user_obj,
)
from app.core.logging_config import sanitize_log_data
from app.core.rate_limit import auth_rate_limit
from app.core.security import create_access_token
from app.db.models.user import User
from app.schemas.auth import SignupRequest, LoginRequest, AuthResponse, AuthCheckResponse
from app.schemas.user import build_user_out
from app.services.identity_service import IdentityClient, IdentityError, IdentityErrorKind
from app.services.profile_service import ProfileStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"])

INVALID_LOGIN = (status.HTTP_401_UNAUTHORIZED, "Invalid email or password")

# The one place identity failures become HTTP responses
IDENTITY_ERROR_RESPONSES = {
    IdentityErrorKind.EMAIL_ALREADY_EXISTS: (
        status.HTTP_400_BAD_REQUEST,
        "This email is already registered. Please use a different email or try logging in.",
    ),
    IdentityErrorKind.INVALID_EMAIL: (status.HTTP_400_BAD_REQUEST, "The email address is not valid."),
    IdentityErrorKind.WEAK_PASSWORD: (status.HTTP_400_BAD_REQUEST, "Password must be at least 6 characters"),
    IdentityErrorKind.USER_NOT_FOUND: INVALID_LOGIN,
    IdentityErrorKind.INVALID_CREDENTIALS: INVALID_LOGIN,
}


def identity_http_error(error: IdentityError) -> HTTPException:
    status_code, detail = IDENTITY_ERROR_RESPONSES[error.kind]
    return HTTPException(status_code=status_code, detail=detail)


def issue_token(user: User, user_type: str) -> str:
    return create_access_token({"sub": user.uid, "email": user.email, "userType": user_type})


# ✅ USER SIGNUP
@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    dependencies=[Depends(auth_rate_limit)],
)
def signup(
    payload: SignupRequest,
    identity: IdentityClient = Depends(get_identity_client),
    profiles: ProfileStore = Depends(get_profile_store),
):
    logger.info(f"Signup attempt: {sanitize_log_data(payload.model_dump())}")
    
    display_name = f"{payload.firstName or ''} {payload.lastName or ''}".strip()
    try:
        user = identity.create_user(payload.email, payload.password, display_name)
    except IdentityError as e:
        logger.info(f"Signup rejected: {e.kind.value}")
        raise identity_http_error(e)
    
    profile = None
    try:
        profile = profiles.create(
            uid=user.uid,
            email=user.email,
            first_name=payload.firstName,
            last_name=payload.lastName,
            phone=payload.phone,
            user_type=payload.userType,
        )
    except SQLAlchemyError as e:
        # The account exists; the profile is created on first update
        logger.warning(f"Profile write failed for uid={user.uid}: {e}", exc_info=True)
    
    return AuthResponse(
        message="User created successfully!",
        user=build_user_out(user, profile),
        token=issue_token(user, payload.userType),
    )


# ✅ LOGIN
@router.post("/login", response_model=AuthResponse, dependencies=[Depends(auth_rate_limit)])
def login(
    payload: LoginRequest,
    identity: IdentityClient = Depends(get_identity_client),
    profiles: ProfileStore = Depends(get_profile_store),
):
    try:
        user = identity.verify_credentials(payload.email, payload.password)
    except IdentityError as e:
        raise identity_http_error(e)
    
    profile = profiles.get(user.uid)
    user_out = build_user_out(user, profile)
    
    logger.info(f"Login success: uid={user.uid}")
    return AuthResponse(
        message="Login successful",
        user=user_out,
        token=issue_token(user, user_out.userType),
    )


# ✅ TOKEN CHECK
@router.get("/auth/check", response_model=AuthCheckResponse)
def auth_check(
    user: User = Depends(get_current_user_obj),
    profiles: ProfileStore = Depends(get_profile_store),
):
    return AuthCheckResponse(authenticated=True, user=build_user_out(user, profiles.get(user.uid)))
