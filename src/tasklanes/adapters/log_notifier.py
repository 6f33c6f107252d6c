"""Logging notifier - stands in for e-mail delivery."""

import logging

logger = logging.getLogger(__name__)

MESSAGE_FORMAT = 'Email triggered: Task "{text}" is overdue!'


class LogNotifier:
    """
    Notifier that logs instead of sending mail.

    Implements Notifier protocol. Every message is also kept in `sent`.
    """

    def __init__(self, level: int = logging.WARNING):
        self.level = level
        self.sent: list[str] = []

    def notify(self, text: str) -> None:
        message = MESSAGE_FORMAT.format(text=text)
        self.sent.append(message)
        logger.log(self.level, message)
