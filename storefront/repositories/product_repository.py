"""
Product Repository - Data Access Layer
"""
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session

from storefront.models.product import Product
from storefront.schemas.product import ProductCreate, ProductUpdate, ProductFilters


class ProductRepository:
    """Repository for Product CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_active(self, filters: Optional[ProductFilters] = None) -> List[Product]:
        """
        Get active products matching the given filters
        
        Every provided filter narrows the result (logical AND); omitted
        filters are not applied. Search matches name or description,
        case-insensitively.
        """
        query = self.db.query(Product).filter(Product.is_active.is_(True))
        
        if filters is not None:
            if filters.category_id:
                query = query.filter(Product.category_id == filters.category_id)
            
            if filters.search:
                pattern = f"%{filters.search}%"
                query = query.filter(or_(
                    Product.name.ilike(pattern),
                    Product.description.ilike(pattern)
                ))
            
            if filters.min_price is not None:
                query = query.filter(Product.price >= filters.min_price)
            
            if filters.max_price is not None:
                query = query.filter(Product.price <= filters.max_price)
        
        return query.order_by(Product.created_at, Product.name).all()
    
    def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID, active or not"""
        return self.db.query(Product).filter(Product.id == product_id).first()
    
    def get_active_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID if it is still active"""
        return self.db.query(Product).filter(
            Product.id == product_id,
            Product.is_active.is_(True)
        ).first()
    
    def create(self, product_data: ProductCreate) -> Product:
        """Create new product; server-owned fields are always reset"""
        product = Product(
            **product_data.model_dump(),
            rating=Decimal("0.0"),
            review_count=0,
            is_active=True
        )
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product
    
    def update(self, product_id: str, product_data: ProductUpdate) -> Optional[Product]:
        """Update existing product"""
        product = self.get_by_id(product_id)
        if not product:
            return None
        
        # Update only provided fields
        update_data = product_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(product, field, value)
        
        self.db.commit()
        self.db.refresh(product)
        return product
    
    def deactivate(self, product_id: str) -> bool:
        """Soft delete: mark an active product inactive"""
        product = self.get_active_by_id(product_id)
        if not product:
            return False
        
        product.is_active = False
        self.db.commit()
        return True
