"""Custom exceptions raised by the product admin client."""
from typing import Iterable, Optional


class ProductAdminError(Exception):
    """Base exception for product admin errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MissingFieldError(ProductAdminError):
    """Raised when a draft is submitted with required fields left empty."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            message=f"Missing required fields: {', '.join(self.missing)}",
            details={"missing_fields": self.missing}
        )


class ServerRejectionError(ProductAdminError):
    """Raised when the backend answers but reports ``success: false``."""

    def __init__(self, message: Optional[str], endpoint: str = None):
        self.server_message = message
        super().__init__(
            message=message or "Request rejected by server",
            details={"endpoint": endpoint}
        )


class ApiTransportError(ProductAdminError):
    """Raised when a request could not complete or its response is unusable."""

    def __init__(self, message: str, endpoint: str = None, original_error: str = None):
        super().__init__(
            message=message,
            details={"endpoint": endpoint, "original_error": original_error}
        )
