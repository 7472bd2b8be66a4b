"""
Product API endpoints
"""
from decimal import Decimal
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from storefront.api.deps import require_admin
from storefront.database import get_db
from storefront.services.product_service import ProductService
from storefront.schemas.base import MessageResponse
from storefront.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductFilters,
    ProductResponse
)

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency to get ProductService instance"""
    return ProductService(db)


@router.get("", response_model=List[ProductResponse], summary="Get active products")
def get_products(
    category_id: Optional[str] = Query(None, alias="categoryId", description="Exact category ID"),
    search: Optional[str] = Query(None, description="Case-insensitive match on name or description"),
    min_price: Optional[Decimal] = Query(None, alias="minPrice", ge=0, description="Lowest price, inclusive"),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", ge=0, description="Highest price, inclusive"),
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve active products
    
    All provided filters must match; omitted filters are ignored.
    """
    filters = ProductFilters(
        category_id=category_id,
        search=search,
        min_price=min_price,
        max_price=max_price
    )
    return service.get_products(filters)


@router.get("/{product_id}", response_model=ProductResponse, summary="Get product by ID")
def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    product = service.get_product_by_id(product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return product


@router.post(
    "",
    response_model=ProductResponse,
    dependencies=[Depends(require_admin)],
    summary="Create product"
)
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product (admin only)
    
    - **name**: Product name (required)
    - **price**: Unit price (required, non-negative)
    - **image**: Image path or URL (required)
    - **categoryId**, **description**, **stock**: optional
    
    Rating, review count and active flag are always reset for new products.
    """
    return service.create_product(product_data)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    dependencies=[Depends(require_admin)],
    summary="Update product"
)
def update_product(
    product_id: str,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Update an existing product
    
    All fields are optional. Only provided fields will be updated.
    """
    product = service.update_product(product_id, product_data)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return product


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete product"
)
def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Deactivate a product; it disappears from listings but order history keeps it"""
    if not service.delete_product(product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return MessageResponse(message="Product deleted successfully")
