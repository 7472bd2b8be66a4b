"""
Authentication API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status

from storefront.api.deps import get_auth_service, get_current_user
from storefront.exceptions import ConflictError, InvalidCredentialsError
from storefront.models.user import User
from storefront.services.auth_service import AuthService
from storefront.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    AuthResponse,
    CurrentUserResponse,
    UserResponse
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, summary="Register")
def register(
    data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """
    Register a new user and return a token for them
    
    - **username**, **email**: must be unused (email is checked first)
    - **password**, **confirmPassword**: must match
    - **role**: optional, defaults to user
    """
    try:
        return service.register(data)
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.post("/login", response_model=AuthResponse, summary="Log in")
def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Exchange email and password for a token"""
    try:
        return service.login(data)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials"
        )


@router.get("/me", response_model=CurrentUserResponse, summary="Current user")
def me(user: User = Depends(get_current_user)):
    return CurrentUserResponse(user=UserResponse.model_validate(user))
