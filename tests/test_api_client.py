"""Tests for the backend API client."""
import httpx
import pytest

from product_admin.api.client import ApiClient
from product_admin.api.v1 import create_product, get_category
from product_admin.components.submission import build_payload, validate_draft
from product_admin.errors import ApiTransportError, ServerRejectionError
from product_admin.schemas.product import ProductDraft


def valid_payload(photo):
    return build_payload(validate_draft(ProductDraft(
        name="Wireless Headphones",
        description="Noise cancelling",
        price="100",
        quantity="10",
        category_id="1",
        shipping="1",
        photo=photo,
    )))


class TestGetCategory:
    """Tests for the category endpoint."""

    @pytest.mark.asyncio
    async def test_returns_categories(self, api_client, backend):
        categories = await get_category(api_client)

        assert backend.category_calls == 1
        assert [(c.id, c.name) for c in categories] == [("1", "Electronics"), ("2", "Books")]

    @pytest.mark.asyncio
    async def test_missing_list_is_empty(self, api_client, backend):
        backend.category_body = {"success": True}
        assert await get_category(api_client) == []

    @pytest.mark.asyncio
    async def test_unsuccessful_response_raises_rejection(self, api_client, backend):
        backend.category_body = {"success": False, "message": "Failed to get category"}

        with pytest.raises(ServerRejectionError) as exc_info:
            await get_category(api_client)

        assert exc_info.value.server_message == "Failed to get category"

    @pytest.mark.asyncio
    async def test_http_error_status_is_transport_error(self, api_client, backend):
        backend.category_status = 500
        backend.category_body = {"success": False, "message": "Error in getting category"}

        with pytest.raises(ApiTransportError) as exc_info:
            await get_category(api_client)

        assert "500" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_malformed_body_is_transport_error(self, api_client, backend):
        backend.category_body = {"unexpected": True}

        with pytest.raises(ApiTransportError):
            await get_category(api_client)

    @pytest.mark.asyncio
    async def test_connection_failure(self, offline_client):
        with pytest.raises(ApiTransportError) as exc_info:
            await get_category(offline_client)

        assert exc_info.value.details["endpoint"] == "/api/v1/category/get-category"
        assert "Connection refused" in exc_info.value.details["original_error"]

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
        async with ApiClient(transport=transport) as client:
            with pytest.raises(ApiTransportError):
                await get_category(client)


class TestCreateProduct:
    """Tests for the create-product endpoint."""

    @pytest.mark.asyncio
    async def test_sends_multipart_fields(self, api_client, backend, photo):
        result = await create_product(api_client, valid_payload(photo))

        assert result.success is True
        assert len(backend.created) == 1
        sent = backend.created[0]
        assert sent["name"] == "Wireless Headphones"
        assert sent["price"] == "100"
        assert sent["quantity"] == "10"
        assert sent["category"] == "1"
        assert sent["shipping"] == "1"
        assert sent["photo_filename"] == "test.png"
        assert sent["photo_content_type"] == "image/png"
        assert sent["photo_content"] == photo.content

    @pytest.mark.asyncio
    async def test_unsuccessful_response_raises_rejection(self, api_client, backend, photo):
        backend.create_body = {"success": False, "message": "Error creating product"}

        with pytest.raises(ServerRejectionError) as exc_info:
            await create_product(api_client, valid_payload(photo))

        assert exc_info.value.server_message == "Error creating product"

    @pytest.mark.asyncio
    async def test_connection_failure(self, offline_client, photo):
        with pytest.raises(ApiTransportError):
            await create_product(offline_client, valid_payload(photo))


class TestApiClientLifecycle:
    """Tests for client ownership of the underlying httpx client."""

    @pytest.mark.asyncio
    async def test_shared_http_client_is_not_closed(self):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
        async with ApiClient(http_client=http_client):
            pass

        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_http_client_is_closed(self):
        client = ApiClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
        await client.aclose()
        assert client._client.is_closed


class TestClosedClient:
    """Tests for requests sent through a client that was already closed."""

    @pytest.mark.asyncio
    async def test_closed_client_is_transport_error(self, backend):
        client = ApiClient(transport=httpx.ASGITransport(app=backend.app))
        await client.aclose()

        with pytest.raises(ApiTransportError) as exc_info:
            await get_category(client)

        assert "closed" in exc_info.value.details["original_error"]
        assert backend.category_calls == 0

    @pytest.mark.asyncio
    async def test_invalid_url_is_transport_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
        async with ApiClient(transport=transport) as client:
            with pytest.raises(ApiTransportError):
                await client.get_json("http://[invalid")
