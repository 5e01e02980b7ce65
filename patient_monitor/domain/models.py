"""
Domain models for patient vital-sign monitoring.

These models represent the core clinical concepts and are framework-agnostic.
They use Pydantic for validation and are frozen: a baseline never changes
once a record has been provisioned.
"""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BloodPressure(BaseModel):
    """Systolic/diastolic pair. Equality is structural."""

    model_config = ConfigDict(frozen=True)

    high: int = Field(description="Systolic pressure, mmHg")
    low: int = Field(description="Diastolic pressure, mmHg")

    def __str__(self) -> str:
        return f"{self.high}/{self.low}"


def as_decimal(value: Any) -> Any:
    """Convert floats through their shortest repr so 36.6 stays Decimal('36.6')."""
    if isinstance(value, float):
        return Decimal(repr(value))
    return value


class HealthInfo(BaseModel):
    """A patient's personal baseline vital signs."""

    model_config = ConfigDict(frozen=True)

    normal_temperature: Decimal = Field(description="Baseline body temperature, Celsius")
    blood_pressure: BloodPressure

    @field_validator("normal_temperature", mode="before")
    @classmethod
    def exact_temperature(cls, v: Any) -> Any:
        return as_decimal(v)


class PatientInfo(BaseModel):
    """Stored patient record with its baseline health info."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, description="Identifier assigned by the record store")
    name: str
    surname: str
    birthday: date
    health_info: HealthInfo

    def with_id(self, new_id: str) -> "PatientInfo":
        return self.model_copy(update={"id": new_id})

    def __str__(self) -> str:
        return f"{self.name} {self.surname} ({self.id}), born {self.birthday.isoformat()}"
