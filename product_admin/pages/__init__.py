"""Pages of the product admin."""
from product_admin.pages.create_product import CreateProductPage

__all__ = ["CreateProductPage"]
