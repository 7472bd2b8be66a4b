"""
Domain exceptions raised by the service layer
"""


class StorefrontError(Exception):
    """Base exception for storefront domain errors"""
    pass


class ConflictError(StorefrontError):
    """A unique value is already taken"""
    pass


class DuplicateEmailError(ConflictError):
    """Email already registered"""
    pass


class DuplicateUsernameError(ConflictError):
    """Username already registered"""
    pass


class DuplicateCategoryError(ConflictError):
    """Category name already in use"""
    pass


class InvalidCredentialsError(StorefrontError):
    """Email unknown or password mismatch; callers must not tell which"""
    pass


class InvalidTokenError(StorefrontError):
    """Bearer token malformed, expired, badly signed or orphaned"""
    pass


class InvalidStatusTransitionError(StorefrontError):
    """Order status change not permitted from the current status"""
    
    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot change order status from {current} to {target}")


class UploadRejectedError(StorefrontError):
    """Uploaded file missing, too large or not an image"""
    pass
