"""
Admin "Create Product" page.

Wires the category source, form state, photo preview and submission
controller together and derives what the page shows.
"""
from typing import Optional

from product_admin.api.client import ApiClient
from product_admin.components.category_source import CategorySource
from product_admin.components.form_state import ProductFormState
from product_admin.components.photo_preview import ObjectUrlRegistry, PhotoPreview
from product_admin.components.submission import SubmissionController
from product_admin.core.config import Settings, get_settings
from product_admin.logging_config import get_logger
from product_admin.navigation import Navigator
from product_admin.notifications import Notifier
from product_admin.schemas.outcome import Success, SubmissionOutcome
from product_admin.schemas.page import (
    InputView,
    PageView,
    PreviewImage,
    SelectOption,
    SelectView,
)
from product_admin.schemas.product import FileHandle

logger = get_logger("pages.create_product")

UPLOAD_LABEL = "Upload Photo"


class CreateProductPage:
    """
    One form session.

    Usage::

        async with ApiClient() as client:
            async with CreateProductPage(client, notifier, navigator) as page:
                page.form.set_name("Wireless Headphones")
                ...
                await page.submit()
    """

    def __init__(
        self,
        client: ApiClient,
        notifier: Notifier,
        navigator: Navigator,
        registry: Optional[ObjectUrlRegistry] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.categories = CategorySource(client, notifier)
        self.form = ProductFormState()
        self.preview = PhotoPreview(registry or ObjectUrlRegistry(self.settings.preview_origin))
        self.controller = SubmissionController(
            client,
            notifier,
            navigator,
            redirect_path=self.settings.products_redirect_path,
        )
        self.mounted = False

    async def __aenter__(self) -> "CreateProductPage":
        await self.mount()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.unmount()

    async def mount(self) -> None:
        """Start a form session and load the categories once."""
        self.mounted = True
        self.controller.reset()
        self.categories.activate()
        categories = await self.categories.load()
        if self.mounted:
            self.form.set_categories(categories)

    def unmount(self) -> None:
        if self.mounted:
            logger.debug("Unmounting create product page")
        self.mounted = False
        self.categories.deactivate()
        self.preview.release()

    def select_photo(self, file: Optional[FileHandle]) -> None:
        self.form.set_photo(file)
        self.preview.update(file)

    async def submit(self) -> Optional[SubmissionOutcome]:
        outcome = await self.controller.submit(self.form.snapshot())
        if isinstance(outcome, Success):
            # Navigation away ends the form session
            self.form.reset()
            self.unmount()
        return outcome

    def view(self) -> PageView:
        draft = self.form.draft
        return PageView(
            category=SelectView(
                placeholder="Select a category",
                options=[SelectOption(label=label, value=value) for label, value in self.form.category_options()],
                value=draft.category_id,
            ),
            upload_label=draft.photo.name if draft.photo else UPLOAD_LABEL,
            preview=PreviewImage(src=self.preview.url) if self.preview.url else None,
            name=InputView(placeholder="write a name", value=draft.name),
            description=InputView(placeholder="write a description", value=draft.description),
            price=InputView(placeholder="write a price", value=str(draft.price)),
            quantity=InputView(placeholder="write a quantity", value=str(draft.quantity)),
            shipping=SelectView(
                placeholder="Select Shipping",
                options=[SelectOption(label=label, value=value) for label, value in self.form.shipping_options()],
                value=draft.shipping,
            ),
        )
