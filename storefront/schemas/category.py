"""
Pydantic schemas for categories
"""
from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from storefront.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    """Schema for creating a category"""
    name: str = Field(..., min_length=1, max_length=255, description="Unique category name")
    description: Optional[str] = Field(None, description="Category description")
    icon: Optional[str] = Field(None, max_length=100, description="Icon class name")


class CategoryUpdate(CamelModel):
    """Schema for updating a category (all fields optional)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=100)
    
    @field_validator("name")
    @classmethod
    def name_not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("name cannot be null")
        return value


class CategoryResponse(CamelModel):
    """Schema for category response"""
    id: str
    name: str
    description: Optional[str]
    icon: Optional[str]
    created_at: Optional[datetime] = None
