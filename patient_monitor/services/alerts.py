"""
Alert delivery for vital-sign deviations.

The medical service only knows the ``SendAlertService`` protocol; transports
(console, log stream, pager, SMS) plug in behind it.
"""

from typing import Protocol

import structlog

logger = structlog.get_logger(__name__)


class SendAlertService(Protocol):
    """
    Protocol for delivering an alert message.

    Fire-and-forget: no acknowledgment is returned and failures propagate
    to the caller untouched.
    """

    def send(self, message: str) -> None: ...


class ConsoleAlertNotifier:
    """Development notifier that prints alerts to stdout."""

    def send(self, message: str) -> None:
        print(message)


class LoggingAlertNotifier:
    """Notifier that emits each alert as a structured warning event."""

    def __init__(self, channel: str = "log") -> None:
        self.channel = channel
        self.logger = logger.bind(component="alert_notifier", channel=channel)

    def send(self, message: str) -> None:
        self.logger.warning("patient_alert", message=message)
