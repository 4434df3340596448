"""Field values of the create product form."""
from typing import Iterable, Optional

from product_admin.schemas.category import Category
from product_admin.schemas.product import FileHandle, NumericInput, ProductDraft

SHIPPING_OPTIONS = (("No", "0"), ("Yes", "1"))


class ProductFormState:
    """
    Single source of truth for the form.

    Each setter replaces exactly one field. Nothing is validated here;
    the submission controller validates a snapshot on submit.
    """

    def __init__(self, categories: Iterable[Category] = ()):
        self.draft = ProductDraft()
        self.categories: list[Category] = list(categories)

    def set_name(self, value: str) -> None:
        self.draft.name = value

    def set_description(self, value: str) -> None:
        self.draft.description = value

    def set_price(self, value: NumericInput) -> None:
        self.draft.price = value

    def set_quantity(self, value: NumericInput) -> None:
        self.draft.quantity = value

    def set_category(self, category_id: Optional[str]) -> None:
        self.draft.category_id = category_id

    def set_shipping(self, value: Optional[str]) -> None:
        self.draft.shipping = value

    def set_photo(self, file: Optional[FileHandle]) -> None:
        self.draft.photo = file

    def set_categories(self, categories: Iterable[Category]) -> None:
        self.categories = list(categories)

    def category_options(self) -> list[tuple[str, str]]:
        return [(c.name, c.id) for c in self.categories]

    def shipping_options(self) -> list[tuple[str, str]]:
        return list(SHIPPING_OPTIONS)

    def snapshot(self) -> ProductDraft:
        """Copy of the current draft, safe to hand to the submission path."""
        return self.draft.model_copy()

    def reset(self) -> None:
        self.draft = ProductDraft()
