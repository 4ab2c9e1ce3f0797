"""User-facing notifications (flash messages in the web app, stdout in the CLI)."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from core.logger import logger


class Variant(str, Enum):
    """Notification variants."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass
class Notification:
    """Single user-facing message."""

    title: str
    description: Optional[str] = None
    variant: Variant = Variant.DEFAULT

    @property
    def text(self) -> str:
        if self.description:
            return f"{self.title}: {self.description}"
        return self.title


class Notifier:
    """Base notifier. Subclasses decide how a notification reaches the user."""

    def notify(
        self, title: str, description: Optional[str] = None, variant: Variant = Variant.DEFAULT
    ) -> Notification:
        notification = Notification(title=title, description=description, variant=variant)
        self.deliver(notification)
        return notification

    def success(self, message: Tuple[str, Optional[str]]) -> Notification:
        return self.notify(message[0], message[1])

    def error(self, title: str, description: Optional[str] = None) -> Notification:
        return self.notify(title, description, Variant.DESTRUCTIVE)

    def deliver(self, notification: Notification) -> None:
        raise NotImplementedError


class FlashNotifier(Notifier):
    """Deliver notifications as Flask flash messages."""

    def deliver(self, notification: Notification) -> None:
        from flask import flash

        category = "error" if notification.variant == Variant.DESTRUCTIVE else "success"
        flash(notification.text, category)


class ConsoleNotifier(Notifier):
    """Deliver notifications to stdout (CLI)."""

    def deliver(self, notification: Notification) -> None:
        marker = "❌" if notification.variant == Variant.DESTRUCTIVE else "✅"
        logger.debug(f"Notification: {notification.text}")
        print(f"{marker} {notification.text}")
