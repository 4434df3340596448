"""
Pydantic schemas for the product draft and the create-product call.
"""
import mimetypes
from decimal import Decimal
from pathlib import Path
from typing import Literal, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

# Form values may come from text inputs (str) or programmatic callers (numbers)
NumericInput = Union[str, int, float, Decimal]
ShippingFlag = Literal["0", "1"]

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class FileHandle(BaseModel):
    """Locally selected file waiting to be uploaded."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    content: bytes
    content_type: str = DEFAULT_CONTENT_TYPE

    @classmethod
    def from_path(cls, path: Union[str, Path], content_type: Optional[str] = None) -> "FileHandle":
        """Read a file from disk, guessing the content type from its name."""
        path = Path(path)
        guessed, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            content=path.read_bytes(),
            content_type=content_type or guessed or DEFAULT_CONTENT_TYPE
        )

    @property
    def size(self) -> int:
        return len(self.content)

    def __repr__(self) -> str:
        return f"FileHandle(name={self.name!r}, size={self.size}, content_type={self.content_type!r})"


class ProductDraft(BaseModel):
    """In-progress product record edited by the form. Unvalidated."""

    name: str = ""
    description: str = ""
    price: NumericInput = ""
    quantity: NumericInput = ""
    category_id: Optional[str] = None
    shipping: Optional[ShippingFlag] = None
    photo: Optional[FileHandle] = None


class ValidDraft(BaseModel):
    """A draft with every required field present, ready to be sent."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: str = Field(..., min_length=1)
    quantity: str = Field(..., min_length=1)
    category_id: str = Field(..., min_length=1)
    shipping: str = Field(..., min_length=1)
    photo: FileHandle


class MultipartPayload(BaseModel):
    """Form parts and file parts of the create-product request."""
    model_config = ConfigDict(frozen=True)

    data: dict[str, str]
    files: dict[str, tuple[str, bytes, str]]


class CreateProductResponse(BaseModel):
    """Body of ``POST /api/v1/product/create-product``."""
    model_config = ConfigDict(extra="allow")

    success: bool
    message: Optional[str] = None
