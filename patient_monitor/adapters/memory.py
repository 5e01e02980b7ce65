"""
In-memory patient record store.

Implements the ``PatientInfoRepository`` protocol plus the provisioning
operations (add, update) a real store would offer.
"""

import uuid

import structlog

from patient_monitor.domain.models import PatientInfo
from patient_monitor.services.medical import PatientNotFoundError

logger = structlog.get_logger(__name__)


class InMemoryPatientInfoRepository:
    """Dictionary-backed record store keyed by patient id."""

    def __init__(self) -> None:
        self._records: dict[str, PatientInfo] = {}
        self.logger = logger.bind(component="patient_repository", backend="memory")

    def add(self, patient_info: PatientInfo) -> str:
        """Store a record under a fresh id and return that id."""
        patient_id = str(uuid.uuid4())
        self._records[patient_id] = patient_info.with_id(patient_id)
        self.logger.info("patient_added", patient_id=patient_id)
        return patient_id

    def get_by_id(self, patient_id: str) -> PatientInfo | None:
        return self._records.get(patient_id)

    def update(self, patient_info: PatientInfo) -> None:
        """Replace an existing record; the id must already be stored."""
        if patient_info.id is None or patient_info.id not in self._records:
            raise PatientNotFoundError(patient_info.id)
        self._records[patient_info.id] = patient_info
        self.logger.info("patient_updated", patient_id=patient_info.id)

    def __len__(self) -> int:
        return len(self._records)
