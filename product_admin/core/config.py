"""
Core configuration module using Pydantic Settings.
Supports environment variables and .env files.
"""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Product admin settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="allow"
    )

    # Backend API
    api_base_url: str = Field(default="http://localhost:8080", alias="API_BASE_URL")
    request_timeout: float = Field(default=10.0, alias="REQUEST_TIMEOUT")  # seconds
    category_endpoint: str = Field(
        default="/api/v1/category/get-category",
        alias="CATEGORY_ENDPOINT"
    )
    create_product_endpoint: str = Field(
        default="/api/v1/product/create-product",
        alias="CREATE_PRODUCT_ENDPOINT"
    )

    # Navigation
    products_redirect_path: str = Field(
        default="/dashboard/admin/products",
        alias="PRODUCTS_REDIRECT_PATH"
    )

    # Photo preview object URLs (blob:<origin>/<uuid>)
    preview_origin: str = Field(default="http://localhost:3000", alias="PREVIEW_ORIGIN")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the shared settings instance."""
    return settings
