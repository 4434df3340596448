"""Core application modules."""
from product_admin.core.config import Settings, settings, get_settings

__all__ = [
    "Settings",
    "settings",
    "get_settings",
]
