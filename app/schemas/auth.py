"""
Pydantic schemas for authentication endpoints.
"""
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from app.schemas.user import UserOut


class SignupRequest(BaseModel):
    """Request schema for user signup."""
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's password (min 6 characters)")
    firstName: Optional[str] = Field(default=None, max_length=100)
    lastName: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)
    userType: str = Field(default="job_seeker", pattern="^(job_seeker|employer)$")
    
    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        """bcrypt ignores everything past 72 bytes, so reject longer passwords."""
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password must be 72 bytes or fewer")
        return v
    
    class Config:
        json_schema_extra = {
            "example": {
                "email": "jane.doe@example.com",
                "password": "SecurePass123",
                "firstName": "Jane",
                "lastName": "Doe",
                "phone": "+1 555 0100",
                "userType": "job_seeker"
            }
        }


class LoginRequest(BaseModel):
    """Request schema for user login."""
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's password")
    
    class Config:
        json_schema_extra = {
            "example": {
                "email": "jane.doe@example.com",
                "password": "SecurePass123"
            }
        }


class AuthResponse(BaseModel):
    """Returned by signup and login."""
    message: str
    user: UserOut
    token: str


class AuthCheckResponse(BaseModel):
    authenticated: bool = True
    user: UserOut
