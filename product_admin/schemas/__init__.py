"""
Pydantic schemas for request/response validation and form state.
"""
from product_admin.schemas.category import Category, CategoryListResponse
from product_admin.schemas.product import (
    NumericInput, ShippingFlag, FileHandle, ProductDraft, ValidDraft,
    MultipartPayload, CreateProductResponse
)
from product_admin.schemas.outcome import (
    Success, RejectedByServer, TransportFailure, SubmissionOutcome
)
from product_admin.schemas.page import (
    SelectOption, SelectView, InputView, PreviewImage, PageView
)

__all__ = [
    # Category schemas
    "Category", "CategoryListResponse",

    # Product schemas
    "NumericInput", "ShippingFlag", "FileHandle", "ProductDraft", "ValidDraft",
    "MultipartPayload", "CreateProductResponse",

    # Submission outcomes
    "Success", "RejectedByServer", "TransportFailure", "SubmissionOutcome",

    # Page view
    "SelectOption", "SelectView", "InputView", "PreviewImage", "PageView",
]
