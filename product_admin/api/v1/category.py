"""
Category API calls.
"""
from pydantic import ValidationError

from product_admin.api.client import ApiClient
from product_admin.errors import ApiTransportError, ServerRejectionError
from product_admin.logging_config import get_logger
from product_admin.schemas.category import Category, CategoryListResponse

logger = get_logger("api.category")


async def get_category(client: ApiClient) -> list[Category]:
    """
    Fetch every selectable category.

    Raises:
        ServerRejectionError: the backend answered ``success: false``
        ApiTransportError: the request failed or the body is malformed
    """
    endpoint = client.settings.category_endpoint
    body = await client.get_json(endpoint)

    try:
        result = CategoryListResponse.model_validate(body)
    except ValidationError as e:
        logger.error(f"Unexpected category response shape: {e.error_count()} errors")
        raise ApiTransportError(
            "Malformed category response",
            endpoint=endpoint,
            original_error=str(e)
        ) from e

    if not result.success:
        raise ServerRejectionError(result.message, endpoint=endpoint)

    categories = result.category or []
    logger.info(f"Fetched {len(categories)} categories")
    return categories
