"""
Category Service - Business Logic Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from storefront.exceptions import DuplicateCategoryError
from storefront.repositories.category_repository import CategoryRepository
from storefront.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse


class CategoryService:
    """Service layer for category business logic"""
    
    def __init__(self, db: Session):
        self.repository = CategoryRepository(db)
    
    def get_all_categories(self) -> List[CategoryResponse]:
        """Get all categories"""
        return [CategoryResponse.model_validate(c) for c in self.repository.get_all()]
    
    def create_category(self, category_data: CategoryCreate) -> CategoryResponse:
        """Create new category"""
        if self.repository.get_by_name(category_data.name):
            raise DuplicateCategoryError("Category already exists")
        category = self.repository.create(category_data)
        return CategoryResponse.model_validate(category)
    
    def update_category(self, category_id: str, category_data: CategoryUpdate) -> Optional[CategoryResponse]:
        """Update existing category"""
        if category_data.name is not None:
            existing = self.repository.get_by_name(category_data.name)
            if existing and existing.id != category_id:
                raise DuplicateCategoryError("Category already exists")
        
        category = self.repository.update(category_id, category_data)
        if not category:
            return None
        return CategoryResponse.model_validate(category)
    
    def delete_category(self, category_id: str) -> bool:
        """Delete category"""
        return self.repository.delete(category_id)
