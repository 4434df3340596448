"""Loads the selectable categories for the category dropdown."""
from typing import Optional

from product_admin import messages
from product_admin.api.client import ApiClient
from product_admin.api.v1.category import get_category
from product_admin.errors import ApiTransportError, ServerRejectionError
from product_admin.logging_config import get_logger
from product_admin.notifications import NotificationKind, Notifier
from product_admin.schemas.category import Category

logger = get_logger("category_source")


class CategorySource:
    """
    One fetch of the category list per ``load()`` call.

    The collection is replaced wholesale on success and left untouched on
    failure. Results that arrive after ``deactivate()`` are dropped.
    """

    def __init__(self, client: ApiClient, notifier: Notifier):
        self.client = client
        self.notifier = notifier
        self.categories: list[Category] = []
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    async def load(self) -> list[Category]:
        error_message: Optional[str] = None

        try:
            categories = await get_category(self.client)
        except ServerRejectionError as e:
            error_message = e.server_message or messages.CATEGORY_FETCH_FAILED
            logger.warning(f"Category fetch rejected: {e.message}")
        except ApiTransportError as e:
            error_message = messages.CATEGORY_FETCH_FAILED
            logger.error(f"Category fetch failed: {e.message}", extra={"details": e.details})

        if not self._active:
            logger.debug("Category result arrived after deactivation, ignoring")
            return self.categories

        if error_message is not None:
            self.notifier.notify(NotificationKind.ERROR, error_message)
        else:
            self.categories = list(categories)

        return self.categories
