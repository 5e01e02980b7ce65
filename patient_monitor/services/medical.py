"""
Vital-sign checks against a patient's personal baseline.

Key points:
- Protocol-based dependency injection for the record store and the notifier
- Exact decimal arithmetic for temperatures
- Each check is stateless and notifies at most once
- A missing record fails the call before any comparison
"""

from decimal import Decimal, localcontext
from typing import Protocol

import structlog

from patient_monitor.config import MonitoringConfig, get_config
from patient_monitor.domain.models import BloodPressure, PatientInfo, as_decimal
from patient_monitor.services.alerts import SendAlertService

logger = structlog.get_logger(__name__)


def exact_deviation(reading: Decimal, baseline: Decimal) -> Decimal:
    """Absolute difference with enough precision that no digit is rounded away."""
    with localcontext() as ctx:
        if reading.is_finite() and baseline.is_finite():
            exponent = min(reading.as_tuple().exponent, baseline.as_tuple().exponent)
            ctx.prec = max(ctx.prec, max(reading.adjusted(), baseline.adjusted()) - exponent + 2)
        return abs(reading - baseline)


class PatientNotFoundError(RuntimeError):
    """Raised when the record store has no patient with the given id."""

    def __init__(self, patient_id: str | None) -> None:
        super().__init__(f"Patient with id {patient_id!r} not found")
        self.patient_id = patient_id


class PatientInfoRepository(Protocol):
    """
    Protocol for looking up stored patient records.

    Design: single method, exact identifier match, ``None`` when absent.
    """

    def get_by_id(self, patient_id: str) -> PatientInfo | None: ...


class MedicalService:
    """
    Compares vital-sign readings with a patient's baseline and raises alerts.

    Readings are never stored; the baseline comes from the repository on
    every call.
    """

    def __init__(
        self,
        repository: PatientInfoRepository,
        alert_service: SendAlertService,
        config: MonitoringConfig | None = None,
    ) -> None:
        self.repository = repository
        self.alert_service = alert_service
        self.config = config or get_config().monitoring
        self.logger = logger.bind(component="medical_service")

    def get_patient(self, patient_id: str) -> PatientInfo:
        """Fetch a record or raise ``PatientNotFoundError``."""
        patient_info = self.repository.get_by_id(patient_id)
        if patient_info is None:
            self.logger.warning("patient_not_found", patient_id=patient_id)
            raise PatientNotFoundError(patient_id)
        return patient_info

    def check_blood_pressure(self, patient_id: str, blood_pressure: BloodPressure) -> None:
        """Alert when the reading differs from the baseline in either component."""
        baseline = self.get_patient(patient_id).health_info.blood_pressure

        if blood_pressure != baseline:
            self.logger.info(
                "vital_sign_deviation",
                patient_id=patient_id,
                vital_sign="blood_pressure",
                reading=str(blood_pressure),
                baseline=str(baseline),
            )
            self._alert(patient_id)
        else:
            self.logger.debug("vital_sign_normal", patient_id=patient_id, vital_sign="blood_pressure")

    def check_temperature(self, patient_id: str, temperature: Decimal) -> None:
        """
        Alert when the reading is further than the tolerance from the baseline.

        The check is symmetric (fever and hypothermia both alert) and the
        tolerance itself is still normal.
        """
        baseline = self.get_patient(patient_id).health_info.normal_temperature
        deviation = exact_deviation(Decimal(as_decimal(temperature)), baseline)

        if deviation > self.config.temperature_tolerance:
            self.logger.info(
                "vital_sign_deviation",
                patient_id=patient_id,
                vital_sign="temperature",
                reading=str(temperature),
                baseline=str(baseline),
                deviation=str(deviation),
            )
            self._alert(patient_id)
        else:
            self.logger.debug("vital_sign_normal", patient_id=patient_id, vital_sign="temperature")

    def _alert(self, patient_id: str) -> None:
        message = self.config.alert_message_template.format(patient_id=patient_id)
        self.alert_service.send(message)
