"""
Product API calls.
"""
from pydantic import ValidationError

from product_admin.api.client import ApiClient
from product_admin.errors import ApiTransportError, ServerRejectionError
from product_admin.logging_config import get_logger
from product_admin.schemas.product import CreateProductResponse, MultipartPayload

logger = get_logger("api.product")


async def create_product(client: ApiClient, payload: MultipartPayload) -> CreateProductResponse:
    """
    Create a product from a multipart payload.

    - **name**, **description**, **price**, **quantity**: text parts
    - **category**: category id
    - **shipping**: ``"0"`` or ``"1"``
    - **photo**: file part carrying the original file name

    Raises:
        ServerRejectionError: the backend answered ``success: false``
        ApiTransportError: the request failed or the body is malformed
    """
    endpoint = client.settings.create_product_endpoint
    body = await client.post_multipart(endpoint, data=payload.data, files=payload.files)

    try:
        result = CreateProductResponse.model_validate(body)
    except ValidationError as e:
        logger.error(f"Unexpected create-product response shape: {e.error_count()} errors")
        raise ApiTransportError(
            "Malformed create-product response",
            endpoint=endpoint,
            original_error=str(e)
        ) from e

    if not result.success:
        raise ServerRejectionError(result.message, endpoint=endpoint)

    logger.info(f"Product '{payload.data.get('name')}' created")
    return result
