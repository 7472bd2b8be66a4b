"""
Pydantic schemas for request/response validation
"""
from decimal import Decimal
from pydantic import Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

from storefront.schemas.base import CamelModel


class ProductBase(CamelModel):
    """Base Product schema with common fields"""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Unit price (non-negative)")
    image: str = Field(..., min_length=1, max_length=500, description="Image path or URL")
    category_id: Optional[str] = Field(None, description="Category ID")
    stock: int = Field(0, ge=0, description="Stock quantity (must be non-negative)")


class ProductCreate(ProductBase):
    """
    Schema for creating a new product
    
    Rating, review count and active flag are not accepted here; new
    products always start active and unrated.
    """
    pass


class ProductUpdate(CamelModel):
    """Schema for updating a product (all fields optional)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    image: Optional[str] = Field(None, min_length=1, max_length=500)
    category_id: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None
    
    @field_validator("name", "price", "image", "stock", "is_active")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        # Omitted keys leave the column alone; explicit null is rejected
        if value is None:
            raise ValueError(f"{to_camel(info.field_name)} cannot be null")
        return value


class ProductFilters(CamelModel):
    """Optional listing filters, combined with AND"""
    category_id: Optional[str] = None
    search: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None


class ProductResponse(ProductBase):
    """Schema for product response"""
    id: str
    rating: Decimal
    review_count: int
    is_active: bool
    created_at: Optional[datetime] = None
