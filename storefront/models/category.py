"""
SQLAlchemy Category model
"""
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from storefront.database import Base
from storefront.models.user import generate_id

DEFAULT_CATEGORY_ICON = "fas fa-box"


class Category(Base):
    """Category database model"""
    
    __tablename__ = "categories"
    
    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    icon = Column(String(100), nullable=True, default=DEFAULT_CATEGORY_ICON)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    
    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
