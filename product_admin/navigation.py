"""Client-side navigation port."""
from typing import Callable, Optional, Protocol

from product_admin.logging_config import get_logger

logger = get_logger("navigation")


class Navigator(Protocol):
    def navigate(self, path: str) -> None:
        ...


class NavigationHistory:
    """Navigator that records visited paths; optionally forwards them."""

    def __init__(self, on_navigate: Optional[Callable[[str], None]] = None):
        self.paths: list[str] = []
        self._on_navigate = on_navigate

    def navigate(self, path: str) -> None:
        logger.info(f"Navigating to {path}")
        self.paths.append(path)
        if self._on_navigate is not None:
            self._on_navigate(path)

    @property
    def current(self) -> Optional[str]:
        return self.paths[-1] if self.paths else None
