"""Shared test fixtures for all tests."""
import io
from typing import Optional

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI, File, Form, UploadFile
from fastapi.responses import JSONResponse
from PIL import Image

from product_admin.api.client import ApiClient
from product_admin.navigation import NavigationHistory
from product_admin.notifications import NotificationLog
from product_admin.pages.create_product import CreateProductPage
from product_admin.schemas.product import FileHandle


SAMPLE_CATEGORIES = [
    {"_id": "1", "name": "Electronics"},
    {"_id": "2", "name": "Books"},
]


class FakeBackend:
    """In-memory stand-in for the e-commerce API, recording what it receives."""

    def __init__(self):
        self.category_status = 200
        self.category_body: dict = {"success": True, "category": SAMPLE_CATEGORIES}
        self.create_status = 201
        self.create_body: dict = {"success": True, "message": "Product Created Successfully"}
        self.category_calls = 0
        self.created: list[dict] = []
        self.app = self._build_app()

    def _build_app(self) -> FastAPI:
        app = FastAPI()

        @app.get("/api/v1/category/get-category")
        async def get_category():
            self.category_calls += 1
            return JSONResponse(status_code=self.category_status, content=self.category_body)

        @app.post("/api/v1/product/create-product")
        async def create_product(
            name: str = Form(...),
            description: str = Form(...),
            price: str = Form(...),
            quantity: str = Form(...),
            category: str = Form(...),
            shipping: str = Form(...),
            photo: UploadFile = File(...),
        ):
            self.created.append({
                "name": name,
                "description": description,
                "price": price,
                "quantity": quantity,
                "category": category,
                "shipping": shipping,
                "photo_filename": photo.filename,
                "photo_content_type": photo.content_type,
                "photo_content": await photo.read(),
            })
            return JSONResponse(status_code=self.create_status, content=self.create_body)

        return app


def connection_refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture
def backend():
    """A fresh fake backend for each test."""
    return FakeBackend()


@pytest_asyncio.fixture
async def api_client(backend):
    """API client talking to the fake backend in-process."""
    async with ApiClient(transport=httpx.ASGITransport(app=backend.app)) as client:
        yield client


@pytest_asyncio.fixture
async def offline_client():
    """API client whose every request fails at the transport level."""
    async with ApiClient(transport=httpx.MockTransport(connection_refused)) as client:
        yield client


@pytest.fixture
def notifier():
    return NotificationLog()


@pytest.fixture
def navigator():
    return NavigationHistory()


@pytest.fixture
def png_bytes() -> bytes:
    """A small real PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color="white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def photo(png_bytes) -> FileHandle:
    return FileHandle(name="test.png", content=png_bytes, content_type="image/png")


@pytest.fixture
def page(api_client, notifier, navigator):
    return CreateProductPage(api_client, notifier, navigator)


def fill_form(page: CreateProductPage, photo: Optional[FileHandle]) -> None:
    """Enter the standard 'Wireless Headphones' product into the form."""
    page.form.set_name("Wireless Headphones")
    page.form.set_description("High-quality wireless headphones with noise cancellation.")
    page.form.set_price("100")
    page.form.set_quantity("10")
    page.form.set_category("1")
    page.form.set_shipping("1")
    if photo is not None:
        page.select_photo(photo)
