"""Configuration module for the Cheese Directory app.

Loads settings from environment-specific config files:
- APP_ENV=dev  → config_dev.yaml
- APP_ENV=test → config_test.yaml
- Default      → config.yaml

Paths can be overridden from the environment (or a .env file).
Fails fast with clear error messages if configuration is invalid.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from cheesedir/config/ up to project root
    return Path(__file__).parent.parent.parent


def _get_config_filename() -> str:
    """Get config filename based on APP_ENV environment variable."""
    app_env = os.environ.get("APP_ENV", "").lower()

    if app_env == "dev":
        return "config_dev.yaml"
    elif app_env == "test":
        return "config_test.yaml"
    else:
        return "config.yaml"


def _load_yaml_config() -> dict:
    """Load configuration from environment-specific config file."""
    config_filename = _get_config_filename()
    config_path = _get_project_root() / config_filename

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}. "
            f"Set APP_ENV to 'dev' or 'test', or create {config_filename}."
        )

    with open(config_path, "r") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e


def _get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get optional environment variable with default."""
    return os.environ.get(key, default)


@dataclass(frozen=True)
class DataConfig:
    """CSV dataset configuration."""
    csv_path: str
    output_path: str
    record_limit: int


@dataclass(frozen=True)
class DatabaseConfig:
    """Mirror database configuration."""
    path: str
    mirror_enabled: bool


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    data: DataConfig
    database: DatabaseConfig
    logging: LoggingConfig


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If the config file is missing or invalid.
    """
    # Load environment variables from .env file
    load_dotenv()

    yaml_config = _load_yaml_config()

    # Build Data config
    data_section = yaml_config.get("data") or {}
    record_limit = data_section.get("record_limit", 10000)
    if not isinstance(record_limit, int) or record_limit <= 0:
        raise ConfigurationError(
            f"data.record_limit must be a positive integer, got {record_limit!r}"
        )

    data_config = DataConfig(
        csv_path=_get_optional_env(
            "CHEESEDIR_CSV_PATH",
            data_section.get("csv_path", "data/canadianCheeseDirectory.csv"),
        ),
        output_path=_get_optional_env(
            "CHEESEDIR_OUTPUT_PATH",
            data_section.get("output_path", "cheese_directory_output.csv"),
        ),
        record_limit=record_limit,
    )

    # Build Database config
    db_section = yaml_config.get("database") or {}
    mirror_enabled = db_section.get("mirror_enabled", True)
    if not isinstance(mirror_enabled, bool):
        raise ConfigurationError(
            f"database.mirror_enabled must be true or false, got {mirror_enabled!r}"
        )

    database_config = DatabaseConfig(
        path=_get_optional_env("CHEESEDIR_DB_PATH", db_section.get("path", "cheesedir.db")),
        mirror_enabled=mirror_enabled,
    )

    # Build Logging config
    logging_section = yaml_config.get("logging") or {}

    logging_config = LoggingConfig(
        level=logging_section.get("level", "INFO"),
    )

    return AppConfig(
        data=data_config,
        database=database_config,
        logging=logging_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.
    Config file is selected based on APP_ENV environment variable.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_environment() -> str:
    """Get current environment name: 'dev', 'test', or 'default'."""
    app_env = os.environ.get("APP_ENV", "").lower()
    return app_env if app_env in ("dev", "test") else "default"


def reset_config() -> None:
    """Reset the config singleton. Useful for testing."""
    global _config
    _config = None
