"""
Shared dependencies: settings, Auth Gate and role gate
"""
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from storefront.config import Settings
from storefront.database import get_db
from storefront.exceptions import InvalidTokenError
from storefront.models.user import User
from storefront.services.auth_service import AuthService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the application was built with"""
    return request.app.state.settings


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
) -> AuthService:
    """Dependency to get AuthService instance"""
    return AuthService(db, settings)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service)
) -> User:
    """
    Resolve the bearer token to a user before the route runs
    
    - no token: 401
    - malformed, expired, badly signed or orphaned token: 403
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"}
        )
    
    try:
        return auth_service.resolve_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token"
        )


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Role gate; runs only after authentication succeeded"""
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return user
