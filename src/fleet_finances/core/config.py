#!/usr/bin/env python3
"""
Configuration Management for Fleet Finances

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class StatementConfig:
    """Statement export configuration."""

    output_dir: Path
    company_name: str = "FleetX"
    default_format: str = "html"


@dataclass
class Config:
    """
    Main configuration class for the fleet finances application.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    statement: StatementConfig

    # Business settings
    currency: str = "AED"
    # Platform share of driver earnings used for the "this month's income" figure
    commission_rate: Decimal = Decimal("0.3")
    week_start: str = "monday"

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("FLEET_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_fleet_finances"
            base_dir = Path(os.getenv("FLEET_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("FLEET_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        output_dir = data_dir / "statements"

        for directory in [data_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        statement = StatementConfig(
            output_dir=output_dir,
            company_name=os.getenv("FLEET_COMPANY_NAME", "FleetX"),
            default_format=os.getenv("FLEET_STATEMENT_FORMAT", "html").lower(),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            statement=statement,
            currency=os.getenv("FLEET_CURRENCY", "AED"),
            commission_rate=_parse_decimal(os.getenv("FLEET_COMMISSION_RATE", "0.3")),
            week_start=os.getenv("FLEET_WEEK_START", "monday").strip().lower(),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [("data_dir", self.data_dir), ("output_dir", self.output_dir)]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if self.commission_rate.is_nan():
            errors.append("FLEET_COMMISSION_RATE must be a number")
        elif not Decimal("0") <= self.commission_rate <= Decimal("1"):
            errors.append("FLEET_COMMISSION_RATE must be between 0 and 1")

        if self.week_start not in WEEKDAYS:
            errors.append(f"FLEET_WEEK_START must be a weekday name, got {self.week_start!r}")

        if not self.currency.strip():
            errors.append("FLEET_CURRENCY must not be empty")

        if self.statement.default_format not in ("html", "json"):
            errors.append("FLEET_STATEMENT_FORMAT must be 'html' or 'json'")

        return errors

    @property
    def week_start_index(self) -> int:
        """Weekday number (Monday=0) the reporting week starts on."""
        return WEEKDAYS.index(self.week_start)

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, StatementConfig):
                result[field_name] = {
                    "output_dir": str(field_value.output_dir),
                    "company_name": field_value.company_name,
                    "default_format": field_value.default_format,
                }
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            elif isinstance(field_value, Decimal):
                result[field_name] = str(field_value)
            else:
                result[field_name] = field_value

        return result


def _parse_decimal(value: str) -> Decimal:
    """Parse a decimal setting; NaN marks an unparsable value for validate()."""
    try:
        return Decimal(value.strip())
    except (InvalidOperation, AttributeError):
        return Decimal("NaN")


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
