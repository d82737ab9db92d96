#!/usr/bin/env python3
"""
Configuration Management for Spendwise

Handles environment-based configuration with safe defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class StorageConfig:
    """On-disk store locations."""

    store_dir: Path
    transactions_file: str = "transactions.json"
    subscriptions_file: str = "subscriptions.json"
    budgets_file: str = "budgets.yaml"


@dataclass
class LifecycleConfig:
    """Subscription lifecycle settings."""

    expiry_warning_days: int = 3


@dataclass
class ReportConfig:
    """Dashboard and report settings."""

    trend_months: int = 6
    recent_transactions_limit: int = 5
    currency_symbol: str = "₹"


@dataclass
class NotificationConfig:
    """Budget alert notification settings."""

    alert_email: str | None = None
    enabled: bool = True


@dataclass
class Config:
    """
    Main configuration class for spendwise.

    Loads configuration from environment variables with safe defaults and
    validation for each environment type.
    """

    environment: Environment

    data_dir: Path
    default_user: str

    storage: StorageConfig
    lifecycle: LifecycleConfig
    reports: ReportConfig
    notifications: NotificationConfig

    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("SPENDWISE_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_spendwise"
            data_dir = Path(os.getenv("SPENDWISE_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("SPENDWISE_DATA_DIR", "./data")).expanduser().resolve()

        data_dir.mkdir(parents=True, exist_ok=True)

        storage = StorageConfig(store_dir=data_dir / "store")

        lifecycle = LifecycleConfig(
            expiry_warning_days=int(os.getenv("EXPIRY_WARNING_DAYS", "3")),
        )

        reports = ReportConfig(
            trend_months=int(os.getenv("TREND_MONTHS", "6")),
            recent_transactions_limit=int(os.getenv("RECENT_TRANSACTIONS_LIMIT", "5")),
            currency_symbol=os.getenv("CURRENCY_SYMBOL", "₹"),
        )

        notifications = NotificationConfig(
            alert_email=os.getenv("ALERT_EMAIL") or None,
            enabled=os.getenv("ALERTS_ENABLED", "true").lower() == "true",
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            default_user=os.getenv("SPENDWISE_USER", "default"),
            storage=storage,
            lifecycle=lifecycle,
            reports=reports,
            notifications=notifications,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        if not self.default_user.strip():
            errors.append("SPENDWISE_USER must not be empty")

        if self.lifecycle.expiry_warning_days < 0:
            errors.append("Expiry warning days must be non-negative")
        if self.reports.trend_months <= 0:
            errors.append("Trend months must be positive")
        if self.reports.recent_transactions_limit <= 0:
            errors.append("Recent transactions limit must be positive")

        if self.notifications.alert_email and "@" not in self.notifications.alert_email:
            errors.append(f"ALERT_EMAIL is not an email address: {self.notifications.alert_email}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return ["notifications.alert_email"]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if not include_sensitive and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***"
                    elif isinstance(nested_value, Path):
                        nested_dict[nested_name] = str(nested_value)
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
