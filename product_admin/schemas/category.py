"""
Pydantic schemas for categories served by the backend.
"""
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, AliasChoices


class Category(BaseModel):
    """A selectable product category. Immutable once fetched."""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True, extra="ignore")

    id: str = Field(..., validation_alias=AliasChoices("_id", "id"))
    name: str


class CategoryListResponse(BaseModel):
    """Body of ``GET /api/v1/category/get-category``."""
    model_config = ConfigDict(extra="ignore")

    success: bool
    message: Optional[str] = None
    category: Optional[list[Category]] = None
