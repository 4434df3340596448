"""
Notification channel (toast-style one-shot messages).

Components receive a ``Notifier`` instead of reaching for a global toast
object, so a front end can plug its own widget and tests can read the log.
"""
from enum import Enum
from typing import Callable, Protocol

from pydantic import BaseModel, ConfigDict

from product_admin.logging_config import get_logger

logger = get_logger("notifications")


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: NotificationKind
    message: str


class Notifier(Protocol):
    def notify(self, kind: NotificationKind, message: str) -> None:
        ...


class NotificationLog:
    """Notifier that keeps every notification it was given, in order."""

    def __init__(self):
        self.entries: list[Notification] = []

    def notify(self, kind: NotificationKind, message: str) -> None:
        kind = NotificationKind(kind)
        if kind is NotificationKind.ERROR:
            logger.warning(f"[TOAST ERROR] {message}")
        else:
            logger.info(f"[TOAST SUCCESS] {message}")
        self.entries.append(Notification(kind=kind, message=message))

    @property
    def errors(self) -> list[str]:
        return [n.message for n in self.entries if n.kind is NotificationKind.ERROR]

    @property
    def successes(self) -> list[str]:
        return [n.message for n in self.entries if n.kind is NotificationKind.SUCCESS]

    def clear(self) -> None:
        self.entries.clear()


class CallbackNotifier:
    """Forwards notifications to a front-end callable ``fn(kind, message)``."""

    def __init__(self, fn: Callable[[NotificationKind, str], None]):
        self._fn = fn

    def notify(self, kind: NotificationKind, message: str) -> None:
        logger.debug(f"[TOAST {NotificationKind(kind).value.upper()}] {message}")
        self._fn(NotificationKind(kind), message)
