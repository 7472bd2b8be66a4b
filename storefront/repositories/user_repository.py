"""
User Repository - Data Access Layer
"""
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.exceptions import DuplicateEmailError, DuplicateUsernameError
from storefront.models.user import User


class UserRepository:
    """Repository for user credential records"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        return self.db.query(User).filter(User.id == user_id).first()
    
    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.db.query(User).filter(User.email == email).first()
    
    def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        return self.db.query(User).filter(User.username == username).first()
    
    def create(self, username: str, email: str, password_hash: str, role: str = "user") -> User:
        """
        Create new user
        
        Args:
            username: Unique username
            email: Unique email
            password_hash: bcrypt hash, never the raw password
            role: "user" or "admin"
        
        Returns:
            Created user
        
        Raises:
            DuplicateEmailError: If a concurrent insert took the email
            DuplicateUsernameError: If a concurrent insert took the username
        """
        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            role=role or "user"
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.get_by_email(email):
                raise DuplicateEmailError("User already exists")
            if self.get_by_username(username):
                raise DuplicateUsernameError("Username already taken")
            raise
        self.db.refresh(user)
        return user
