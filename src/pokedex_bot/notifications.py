import logging
from enum import Enum

from telegram.error import TelegramError

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    DANGER = "danger"
    WARNING = "warning"
    SUCCESS = "success"
    INFO = "info"


_PREFIX = {
    Severity.DANGER: "⛔",
    Severity.WARNING: "⚠️",
    Severity.SUCCESS: "✅",
    Severity.INFO: "ℹ️",
}


def format_notification(severity: Severity, message: str) -> str:
    return f"{_PREFIX[Severity(severity)]} {message}"


async def show_notification(target, severity: Severity, message: str) -> None:
    """Reply to ``target`` (a Message) with a one-off notification.

    Fire-and-forget: delivery failures are logged and never raised.
    """
    text = format_notification(severity, message)
    try:
        await target.reply_text(text)
    except TelegramError:
        logger.exception("Failed to deliver notification", extra={"severity": Severity(severity).value})
