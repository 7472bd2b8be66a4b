"""
Storefront API - catalog, authentication and order processing
"""
__version__ = "1.0.0"
