"""
Python client for the Storefront API, including the local cart
"""
from storefront.client.cart import Cart, CartItem, CartStore
from storefront.client.api_client import (
    StorefrontClient,
    StorefrontClientError,
    StorefrontAPIError,
    StorefrontUnavailableError
)

__all__ = [
    "Cart",
    "CartItem",
    "CartStore",
    "StorefrontClient",
    "StorefrontClientError",
    "StorefrontAPIError",
    "StorefrontUnavailableError"
]
