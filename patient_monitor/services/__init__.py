"""
Core services for the application.

This package contains the medical check service and the alert delivery
protocol with its default notifiers.
"""

from .alerts import ConsoleAlertNotifier, LoggingAlertNotifier, SendAlertService
from .medical import MedicalService, PatientInfoRepository, PatientNotFoundError

__all__ = [
    "ConsoleAlertNotifier",
    "LoggingAlertNotifier",
    "MedicalService",
    "PatientInfoRepository",
    "PatientNotFoundError",
    "SendAlertService",
]
