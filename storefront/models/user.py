"""
SQLAlchemy User model
"""
import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from storefront.database import Base


def generate_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """User database model"""
    
    __tablename__ = "users"
    
    id = Column(String(36), primary_key=True, default=generate_id)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    
    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
    
    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
