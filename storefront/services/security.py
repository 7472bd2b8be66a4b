"""
Password hashing and bearer token primitives
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from storefront.config import Settings
from storefront.exceptions import InvalidTokenError

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a raw password with bcrypt at the given work factor"""
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a raw password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(
    user_id: str,
    settings: Settings,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Issue a signed token carrying only the user id and an expiry
    
    Args:
        user_id: ID of the authenticated user
        settings: Application settings holding the signing secret
        expires_delta: Lifetime override, defaults to ACCESS_TOKEN_EXPIRE_DAYS
    
    Returns:
        Encoded JWT
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta if expires_delta is not None
        else timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    )
    payload = {"sub": user_id, "exp": expire}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> str:
    """
    Verify a token and return the user id it was issued for
    
    Raises:
        InvalidTokenError: If the token is malformed, expired or badly signed
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]}
        )
    except jwt.PyJWTError as e:
        raise InvalidTokenError(str(e))
    
    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise InvalidTokenError("Token subject missing")
    return user_id
