"""
Auth Service - registration, login and token resolution
"""
import logging

from sqlalchemy.orm import Session

from storefront.config import Settings
from storefront.exceptions import (
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidTokenError
)
from storefront.models.user import User
from storefront.repositories.user_repository import UserRepository
from storefront.schemas.auth import RegisterRequest, LoginRequest, AuthResponse, UserResponse
from storefront.services.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token
)

logger = logging.getLogger(__name__)


class AuthService:
    """Service layer for credentials and bearer tokens"""
    
    def __init__(self, db: Session, settings: Settings):
        self.repository = UserRepository(db)
        self.settings = settings
    
    def _issue(self, user: User) -> AuthResponse:
        token = create_access_token(user.id, self.settings)
        return AuthResponse(user=UserResponse.model_validate(user), token=token)
    
    def create_user(self, username: str, email: str, password: str, role: str = "user") -> User:
        """Create a user, always hashing the password first"""
        password_hash = hash_password(password, self.settings.BCRYPT_ROUNDS)
        return self.repository.create(username, email, password_hash, role)
    
    def register(self, data: RegisterRequest) -> AuthResponse:
        """
        Register a new user and log them in
        
        Email uniqueness is checked before username uniqueness, so a request
        clashing on both reports the email.
        
        Raises:
            DuplicateEmailError: If the email is taken
            DuplicateUsernameError: If the username is taken
        """
        if self.repository.get_by_email(data.email):
            raise DuplicateEmailError("User already exists")
        
        if self.repository.get_by_username(data.username):
            raise DuplicateUsernameError("Username already taken")
        
        user = self.create_user(data.username, data.email, data.password, data.role or "user")
        logger.info("Registered user %s with role %s", user.id, user.role)
        return self._issue(user)
    
    def login(self, data: LoginRequest) -> AuthResponse:
        """
        Verify credentials and issue a token
        
        Raises:
            InvalidCredentialsError: Same error for unknown email and wrong password
        """
        user = self.repository.get_by_email(data.email)
        if not user or not verify_password(data.password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError("Invalid credentials")
        
        logger.info("User %s logged in", user.id)
        return self._issue(user)
    
    def resolve_token(self, token: str) -> User:
        """
        Resolve a bearer token to its user
        
        Raises:
            InvalidTokenError: If the token does not verify or its user is gone
        """
        user_id = decode_access_token(token, self.settings)
        user = self.repository.get_by_id(user_id)
        if not user:
            raise InvalidTokenError(f"No user for token subject {user_id}")
        return user
