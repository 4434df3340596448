"""
Derived rendering state of the create product page.
"""
from typing import Optional
from pydantic import BaseModel


class SelectOption(BaseModel):
    """One ``<option>``: the label shown and the value stored."""
    label: str
    value: str


class SelectView(BaseModel):
    placeholder: str
    options: list[SelectOption]
    value: Optional[str] = None


class InputView(BaseModel):
    placeholder: str
    value: str = ""


class PreviewImage(BaseModel):
    src: str
    alt: str = "product_photo"


class PageView(BaseModel):
    """Everything a front end needs to draw the create product form."""
    heading: str = "Create Product"
    category: SelectView
    upload_label: str
    preview: Optional[PreviewImage] = None
    name: InputView
    description: InputView
    price: InputView
    quantity: InputView
    shipping: SelectView
    submit_label: str = "CREATE PRODUCT"
