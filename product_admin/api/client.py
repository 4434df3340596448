"""
Async HTTP client for the e-commerce backend.

Thin wrapper over ``httpx.AsyncClient`` that turns every way a request can
fail to produce a usable JSON body into ``ApiTransportError``.
"""
from typing import Any, Optional
import httpx

from product_admin.core.config import Settings, get_settings
from product_admin.errors import ApiTransportError
from product_admin.logging_config import get_logger

logger = get_logger("api.client")


class ApiClient:
    """
    Backend API client.

    Usage::

        async with ApiClient() as client:
            categories = await get_category(client)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_json(self, endpoint: str) -> Any:
        """GET ``endpoint`` and return the decoded JSON body."""
        return await self._request("GET", endpoint)

    async def post_multipart(
        self,
        endpoint: str,
        data: dict[str, str],
        files: dict[str, tuple[str, bytes, str]],
    ) -> Any:
        """POST a multipart body and return the decoded JSON body."""
        return await self._request("POST", endpoint, data=data, files=files)

    async def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        logger.debug(f"[REQUEST] {method} {endpoint}")

        try:
            response = await self._client.request(method, endpoint, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"[ERROR] {method} {endpoint} - Status: {e.response.status_code}",
                exc_info=True
            )
            raise ApiTransportError(
                f"{method} {endpoint} returned HTTP {e.response.status_code}",
                endpoint=endpoint,
                original_error=str(e)
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL, RuntimeError) as e:
            # RuntimeError covers a closed client and httpx stream errors
            logger.error(f"[ERROR] {method} {endpoint} - Error: {str(e)}", exc_info=True)
            raise ApiTransportError(
                f"{method} {endpoint} failed: {type(e).__name__}",
                endpoint=endpoint,
                original_error=str(e)
            ) from e

        logger.debug(f"[RESPONSE] {method} {endpoint} - Status: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"[ERROR] {method} {endpoint} - Response is not JSON", exc_info=True)
            raise ApiTransportError(
                f"{method} {endpoint} returned a non-JSON body",
                endpoint=endpoint,
                original_error=str(e)
            ) from e
