"""
Services package
"""
from storefront.services.auth_service import AuthService
from storefront.services.category_service import CategoryService
from storefront.services.product_service import ProductService
from storefront.services.order_service import OrderService
from storefront.services.upload_service import UploadService

__all__ = ["AuthService", "CategoryService", "ProductService", "OrderService", "UploadService"]
