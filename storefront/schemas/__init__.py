"""
Schemas package
"""
from storefront.schemas.base import CamelModel, MessageResponse
from storefront.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    AuthResponse,
    CurrentUserResponse
)
from storefront.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from storefront.schemas.product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductFilters,
    ProductResponse
)
from storefront.schemas.order import (
    OrderItemCreate,
    OrderCreate,
    OrderStatusUpdate,
    OrderItemResponse,
    OrderResponse,
    OrderDetailResponse
)
from storefront.schemas.upload import UploadResponse

__all__ = [
    "CamelModel",
    "MessageResponse",
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "CurrentUserResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
    "ProductFilters",
    "ProductResponse",
    "OrderItemCreate",
    "OrderCreate",
    "OrderStatusUpdate",
    "OrderItemResponse",
    "OrderResponse",
    "OrderDetailResponse",
    "UploadResponse"
]
