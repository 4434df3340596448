"""Backend API client."""
from product_admin.api.client import ApiClient

__all__ = ["ApiClient"]
