"""API v1 calls."""
from product_admin.api.v1.category import get_category
from product_admin.api.v1.product import create_product

__all__ = ["get_category", "create_product"]
