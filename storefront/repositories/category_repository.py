"""
Category Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from storefront.models.category import Category, DEFAULT_CATEGORY_ICON
from storefront.models.product import Product
from storefront.schemas.category import CategoryCreate, CategoryUpdate


class CategoryRepository:
    """Repository for Category CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self) -> List[Category]:
        """Get all categories sorted by name"""
        return self.db.query(Category).order_by(Category.name).all()
    
    def get_by_id(self, category_id: str) -> Optional[Category]:
        """Get category by ID"""
        return self.db.query(Category).filter(Category.id == category_id).first()
    
    def get_by_name(self, name: str) -> Optional[Category]:
        """Get category by name"""
        return self.db.query(Category).filter(Category.name == name).first()
    
    def create(self, category_data: CategoryCreate) -> Category:
        """Create new category"""
        data = category_data.model_dump()
        if not data.get("icon"):
            data["icon"] = DEFAULT_CATEGORY_ICON
        category = Category(**data)
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category
    
    def update(self, category_id: str, category_data: CategoryUpdate) -> Optional[Category]:
        """Update existing category"""
        category = self.get_by_id(category_id)
        if not category:
            return None
        
        # Update only provided fields
        update_data = category_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(category, field, value)
        
        self.db.commit()
        self.db.refresh(category)
        return category
    
    def delete(self, category_id: str) -> bool:
        """Delete category, detaching its products first"""
        category = self.get_by_id(category_id)
        if not category:
            return False
        
        self.db.query(Product).filter(
            Product.category_id == category_id
        ).update({Product.category_id: None}, synchronize_session=False)
        self.db.delete(category)
        self.db.commit()
        return True
