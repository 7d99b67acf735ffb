"""
Configuration Management.

Loads settings from config/settings/*.yaml under the project root. The
project root is the nearest directory, searching upward from the working
directory, that contains a .project_root marker file.

Settings (YAML):
    application.yaml   - App identity, status client defaults
    logging.yaml       - Logging configuration

When no project root or settings file is found (for example when the CLI is
installed and run from an arbitrary directory), the schema defaults apply.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from amp_cli.core.config_schema import ApplicationSchema, LoggingSchema


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    try:
        raw = load_yaml_config(filename)
    except (RuntimeError, FileNotFoundError):
        raw = {}
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Unknown fields or wrong types raise a clear error immediately.

    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_client_defaults() -> tuple[str, float]:
    """
    Get the default status service base URL and request timeout.

    Returns:
        Tuple of (base_url, timeout_seconds).
    """
    client = get_app_config().application.client
    return client.base_url, float(client.timeout)
