"""
Category API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from storefront.api.deps import require_admin
from storefront.database import get_db
from storefront.exceptions import DuplicateCategoryError
from storefront.services.category_service import CategoryService
from storefront.schemas.base import MessageResponse
from storefront.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse

router = APIRouter(prefix="/categories", tags=["categories"])


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    """Dependency to get CategoryService instance"""
    return CategoryService(db)


@router.get("", response_model=List[CategoryResponse], summary="Get all categories")
def get_categories(service: CategoryService = Depends(get_category_service)):
    return service.get_all_categories()


@router.post(
    "",
    response_model=CategoryResponse,
    dependencies=[Depends(require_admin)],
    summary="Create category"
)
def create_category(
    category_data: CategoryCreate,
    service: CategoryService = Depends(get_category_service)
):
    """
    Create a new category (admin only)
    
    - **name**: Unique category name (required)
    - **description**: Optional description
    - **icon**: Optional icon class, defaults to a generic box
    """
    try:
        return service.create_category(category_data)
    except DuplicateCategoryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    dependencies=[Depends(require_admin)],
    summary="Update category"
)
def update_category(
    category_id: str,
    category_data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service)
):
    try:
        category = service.update_category(category_id, category_data)
    except DuplicateCategoryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
    summary="Delete category"
)
def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service)
):
    """Delete a category; its products stay, uncategorised"""
    if not service.delete_category(category_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return MessageResponse(message="Category deleted successfully")
