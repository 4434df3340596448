"""Admin client for creating products against the e-commerce backend."""
from product_admin.api.client import ApiClient
from product_admin.navigation import NavigationHistory
from product_admin.notifications import NotificationKind, NotificationLog
from product_admin.pages.create_product import CreateProductPage
from product_admin.schemas.product import FileHandle

__version__ = "1.0.0"

__all__ = [
    "ApiClient",
    "CreateProductPage",
    "FileHandle",
    "NavigationHistory",
    "NotificationKind",
    "NotificationLog",
]
