"""User-facing notification literals shown by the create product page."""

CATEGORY_FETCH_FAILED = "Something went wrong in getting category"

MISSING_FIELDS = "Please check all fields including photo"
PRODUCT_CREATED = "Product Created Successfully"
SUBMIT_FAILED = "Something went wrong"
