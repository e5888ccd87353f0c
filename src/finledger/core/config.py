#!/usr/bin/env python3
"""
Configuration Management for finledger

Handles environment-based configuration with sensible defaults and validation.
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

from .currency import CurrencyCode
from .errors import InvalidCurrencyError

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class ImportConfig:
    """CSV/JSON import settings."""

    max_warnings_logged: int = 50


@dataclass
class ExportConfig:
    """Export output settings."""

    output_dir: Path
    json_indent: int = 2
    json_filename: str = "ledger-snapshot.json"
    csv_filename: str = "transactions.csv"


@dataclass
class RulesConfig:
    """Categorization rule settings."""

    rules_file: Path | None = None


@dataclass
class AnalysisConfig:
    """Analysis and charting configuration."""

    output_dir: Path
    default_currency: str = "USD"
    chart_width: int = 12
    chart_height: int = 8


@dataclass
class Config:
    """
    Main configuration class for finledger.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    # Component configurations
    imports: ImportConfig
    exports: ExportConfig
    rules: RulesConfig
    analysis: AnalysisConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("LEDGER_ENV", "development"))

        # Base directories
        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_finledger"
            base_dir = Path(os.getenv("LEDGER_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("LEDGER_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        output_dir = data_dir / "exports"

        # Ensure directories exist
        for directory in [data_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        rules_file = os.getenv("LEDGER_RULES_FILE")

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            imports=ImportConfig(
                max_warnings_logged=int(os.getenv("LEDGER_MAX_WARNINGS_LOGGED", "50")),
            ),
            exports=ExportConfig(
                output_dir=output_dir,
                json_indent=int(os.getenv("LEDGER_JSON_INDENT", "2")),
            ),
            rules=RulesConfig(
                rules_file=Path(rules_file).expanduser() if rules_file else None,
            ),
            analysis=AnalysisConfig(
                output_dir=data_dir / "charts",
                default_currency=os.getenv("LEDGER_DEFAULT_CURRENCY", "USD"),
                chart_width=int(os.getenv("CHART_WIDTH", "12")),
                chart_height=int(os.getenv("CHART_HEIGHT", "8")),
            ),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [
            ("data_dir", self.data_dir),
            ("output_dir", self.output_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if self.rules.rules_file is not None and not self.rules.rules_file.exists():
            errors.append(f"LEDGER_RULES_FILE does not exist: {self.rules.rules_file}")

        try:
            CurrencyCode(self.analysis.default_currency)
        except InvalidCurrencyError as e:
            errors.append(f"Invalid LEDGER_DEFAULT_CURRENCY: {e}")

        if self.exports.json_indent < 0:
            errors.append("LEDGER_JSON_INDENT must be non-negative")
        if self.imports.max_warnings_logged < 0:
            errors.append("LEDGER_MAX_WARNINGS_LOGGED must be non-negative")
        if self.analysis.chart_width <= 0 or self.analysis.chart_height <= 0:
            errors.append("Chart dimensions must be positive")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Chart rendering is noisy at DEBUG
        logging.getLogger("matplotlib").setLevel(logging.WARNING)

    @property
    def default_currency(self) -> CurrencyCode:
        return CurrencyCode(self.analysis.default_currency)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                # Nested dataclass
                result[field_name] = {
                    nested_name: _plain(nested_value) for nested_name, nested_value in field_value.__dict__.items()
                }
            else:
                result[field_name] = _plain(field_value)

        return result


def _plain(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def get_output_dir() -> Path:
    """Get the export output directory path."""
    return get_config().output_dir


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
