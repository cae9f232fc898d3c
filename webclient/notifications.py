import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

Notification = namedtuple("Notification", ["level", "message"])


class Notifier:
    """Collects the transient notifications ("toasts") shown to the user."""

    def __init__(self):
        self.history = []

    def success(self, message):
        logger.info(message)
        self.history.append(Notification("success", message))

    def error(self, message):
        logger.warning(message)
        self.history.append(Notification("error", message))

    @property
    def last(self):
        return self.history[-1] if self.history else None

    def clear(self):
        self.history = []
