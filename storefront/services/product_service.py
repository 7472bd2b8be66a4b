"""
Product Service - Business Logic Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from storefront.repositories.product_repository import ProductRepository
from storefront.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductFilters,
    ProductResponse
)


class ProductService:
    """Service layer for product business logic"""
    
    def __init__(self, db: Session):
        self.repository = ProductRepository(db)
    
    def get_products(self, filters: Optional[ProductFilters] = None) -> List[ProductResponse]:
        """Get active products, filtered"""
        products = self.repository.get_active(filters)
        return [ProductResponse.model_validate(p) for p in products]
    
    def get_product_by_id(self, product_id: str) -> Optional[ProductResponse]:
        """Get an active product by ID"""
        product = self.repository.get_active_by_id(product_id)
        if not product:
            return None
        return ProductResponse.model_validate(product)
    
    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """Create new product"""
        product = self.repository.create(product_data)
        return ProductResponse.model_validate(product)
    
    def update_product(self, product_id: str, product_data: ProductUpdate) -> Optional[ProductResponse]:
        """Update existing product"""
        product = self.repository.update(product_id, product_data)
        if not product:
            return None
        return ProductResponse.model_validate(product)
    
    def delete_product(self, product_id: str) -> bool:
        """Delete product (soft delete)"""
        return self.repository.deactivate(product_id)
