"""
Pydantic schemas for authentication
"""
from pydantic import Field, EmailStr, ValidationInfo, field_validator
from typing import Optional, Literal

from storefront.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    """Schema for registering a new user"""
    username: str = Field(..., min_length=1, max_length=255, description="Unique username")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., min_length=6, max_length=128, description="Password")
    confirm_password: str = Field(..., min_length=6, max_length=128, description="Password confirmation")
    role: Optional[Literal['user', 'admin']] = Field(None, description="Role, defaults to user")
    
    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and value != password:
            raise ValueError("Passwords don't match")
        return value


class LoginRequest(CamelModel):
    """Schema for logging in"""
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)


class UserResponse(CamelModel):
    """Public user representation"""
    id: str
    username: str
    email: str
    role: str


class AuthResponse(CamelModel):
    """User plus a freshly issued bearer token"""
    user: UserResponse
    token: str


class CurrentUserResponse(CamelModel):
    user: UserResponse
