"""Toast-style notifications shared by HTML pages and the JSON API."""
from __future__ import annotations

from dataclasses import asdict, dataclass

from flask import flash

from ..core.enums import NotificationVariant


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: NotificationVariant

    def to_dict(self) -> dict:
        data = asdict(self)
        data["variant"] = self.variant.value
        return data


def error(description: str) -> Notification:
    return Notification(title="Error", description=description, variant=NotificationVariant.DESTRUCTIVE)


def success(description: str) -> Notification:
    return Notification(title="Success", description=description, variant=NotificationVariant.SUCCESS)


def warning(title: str, description: str) -> Notification:
    return Notification(title=title, description=description, variant=NotificationVariant.WARNING)


def flash_notification(notification: Notification) -> None:
    """Queue for the next rendered page; templates read title/description."""
    flash(
        {"title": notification.title, "description": notification.description},
        notification.variant.value,
    )
