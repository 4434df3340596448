"""
Photo preview handles.

A preview URL is a transient ``blob:`` reference to a local file, the same
kind of handle a browser's ``URL.createObjectURL`` hands out. Every handle
acquired from the registry must be revoked once it is no longer shown.
"""
import uuid
from typing import Optional

from product_admin.core.config import get_settings
from product_admin.logging_config import get_logger
from product_admin.schemas.product import FileHandle

logger = get_logger("photo_preview")


class ObjectUrlRegistry:
    """Issues and revokes ``blob:<origin>/<uuid>`` URLs for local files."""

    def __init__(self, origin: Optional[str] = None):
        self.origin = (origin or get_settings().preview_origin).rstrip("/")
        self._objects: dict[str, FileHandle] = {}

    def create_object_url(self, file: FileHandle) -> str:
        url = f"blob:{self.origin}/{uuid.uuid4()}"
        self._objects[url] = file
        return url

    def revoke_object_url(self, url: str) -> None:
        # Unknown or already revoked URLs are ignored
        self._objects.pop(url, None)

    def resolve(self, url: str) -> Optional[FileHandle]:
        return self._objects.get(url)

    def is_live(self, url: str) -> bool:
        return url in self._objects

    @property
    def live_count(self) -> int:
        return len(self._objects)


class PhotoPreview:
    """Holds at most one preview URL, mirroring the selected photo."""

    def __init__(self, registry: Optional[ObjectUrlRegistry] = None):
        self.registry = registry or ObjectUrlRegistry()
        self._url: Optional[str] = None

    @property
    def url(self) -> Optional[str]:
        return self._url

    def update(self, file: Optional[FileHandle]) -> Optional[str]:
        """Release the current preview, then derive one for ``file``."""
        self.release()
        if file is not None:
            self._url = self.registry.create_object_url(file)
            logger.debug(f"Preview for {file.name} -> {self._url}")
        return self._url

    def release(self) -> None:
        if self._url is not None:
            self.registry.revoke_object_url(self._url)
            logger.debug(f"Released preview {self._url}")
            self._url = None

    def __enter__(self) -> "PhotoPreview":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
