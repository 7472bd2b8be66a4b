"""
Repositories package
"""
from storefront.repositories.user_repository import UserRepository
from storefront.repositories.category_repository import CategoryRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.order_repository import OrderRepository

__all__ = ["UserRepository", "CategoryRepository", "ProductRepository", "OrderRepository"]
