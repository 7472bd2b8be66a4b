"""
Pydantic schemas for request/response validation
"""
from decimal import Decimal
from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime

from storefront.models.order import OrderStatus
from storefront.schemas.base import CamelModel


class OrderItemCreate(CamelModel):
    """One line of an order being placed"""
    product_id: str = Field(..., min_length=1, description="Product ID")
    quantity: int = Field(..., ge=1, description="Quantity ordered")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Unit price at purchase time")


class OrderCreate(CamelModel):
    """Schema for placing an order"""
    items: Optional[List[OrderItemCreate]] = Field(None, validate_default=True)
    total_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Order total")
    
    @field_validator("items", mode="before")
    @classmethod
    def items_required(cls, value):
        if not isinstance(value, list) or not value:
            raise ValueError("Order items are required")
        return value


class OrderStatusUpdate(CamelModel):
    """Schema for updating order status"""
    status: OrderStatus = Field(..., description="Order status")


class OrderItemResponse(CamelModel):
    """Schema for order item response"""
    id: str
    order_id: str
    product_id: str
    quantity: int
    price: Decimal


class OrderResponse(CamelModel):
    """Schema for order response"""
    id: str
    user_id: str
    total_price: Decimal
    status: str
    customer_email: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OrderDetailResponse(OrderResponse):
    """Order together with its line items"""
    items: List[OrderItemResponse]
