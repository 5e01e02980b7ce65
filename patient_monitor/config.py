"""
Configuration management with environment variable support and validation.

Design principles:
- Environment-specific configs (dev, staging, prod)
- Validation at startup (fail fast)
- Type safety with Pydantic
- Exact decimal tolerances (no float thresholds)
"""

import os
from decimal import Decimal
from functools import lru_cache
from typing import Literal, cast

import structlog
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

from patient_monitor.domain.models import as_decimal

# Load environment variables from .env file
load_dotenv()

logger = structlog.get_logger(__name__)

DEFAULT_ALERT_MESSAGE = "Warning, patient with id: {patient_id}, need help"


class MonitoringConfig(BaseModel):
    """Vital-sign check configuration."""

    temperature_tolerance: Decimal = Field(
        default=Decimal("0.5"),
        ge=0,
        description="Largest allowed deviation from baseline temperature; beyond it alerts",
    )
    alert_message_template: str = Field(
        default=DEFAULT_ALERT_MESSAGE,
        description="Alert text, formatted with the patient id",
    )

    @field_validator("temperature_tolerance", mode="before")
    @classmethod
    def exact_tolerance(cls, v):
        return as_decimal(v)

    @field_validator("alert_message_template")
    @classmethod
    def template_names_patient(cls, v: str) -> str:
        marker = "\x00patient-id\x00"
        try:
            rendered = v.format(patient_id=marker)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"alert message template may only use the '{{patient_id}}' placeholder: {e!r}"
            ) from e
        if marker not in rendered:
            raise ValueError("alert message template must contain '{patient_id}'")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    format: Literal["json", "console"] = Field(default="json", description="Logging format")


class AppConfig(BaseModel):
    """Main application configuration combining all subsystems."""

    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def debug_only_in_dev(self) -> "AppConfig":
        """Ensure debug mode is only allowed in development environment."""
        if self.debug and self.environment != "development":
            raise ValueError("debug mode is only allowed in development environment")
        return self


def load_config_from_env() -> AppConfig:
    """Load configuration from environment variables with validation."""

    def _env_to_literal(val: str) -> Literal["development", "staging", "production"]:
        v = val.strip().lower()
        if v in {"dev", "development"}:
            return "development"
        if v in {"stage", "staging"}:
            return "staging"
        return "production"

    def _level_to_literal(val: str) -> Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        v = val.strip().upper()
        return cast(
            Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            v if v in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO",
        )

    environment = _env_to_literal(os.getenv("ENVIRONMENT", "development"))
    debug = environment == "development"

    # Tolerance stays a string until pydantic turns it into a Decimal
    monitoring_config = MonitoringConfig(
        temperature_tolerance=os.getenv("TEMPERATURE_TOLERANCE", "0.5"),
        alert_message_template=os.getenv("ALERT_MESSAGE_TEMPLATE", DEFAULT_ALERT_MESSAGE),
    )

    logging_config = LoggingConfig(
        level=_level_to_literal(os.getenv("LOG_LEVEL", "INFO")),
        format="console" if debug else "json",
    )

    return AppConfig(
        environment=environment,
        debug=debug,
        monitoring=monitoring_config,
        logging=logging_config,
    )


@lru_cache
def get_config() -> AppConfig:
    """Get cached application configuration."""
    return load_config_from_env()


def validate_config() -> AppConfig:
    """Validate configuration at startup."""
    try:
        config = get_config()
    except Exception as e:
        logger.error("config_validation_failed", error=str(e))
        raise

    logger.info(
        "config_loaded",
        environment=config.environment,
        temperature_tolerance=str(config.monitoring.temperature_tolerance),
    )
    return config
