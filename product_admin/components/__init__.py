"""Building blocks of the create product page."""
from product_admin.components.category_source import CategorySource
from product_admin.components.photo_preview import ObjectUrlRegistry, PhotoPreview
from product_admin.components.form_state import SHIPPING_OPTIONS, ProductFormState
from product_admin.components.submission import (
    REQUIRED_FIELDS,
    SubmissionController,
    SubmissionState,
    build_payload,
    validate_draft,
)

__all__ = [
    "CategorySource",
    "ObjectUrlRegistry",
    "PhotoPreview",
    "SHIPPING_OPTIONS",
    "ProductFormState",
    "REQUIRED_FIELDS",
    "SubmissionController",
    "SubmissionState",
    "build_payload",
    "validate_draft",
]
