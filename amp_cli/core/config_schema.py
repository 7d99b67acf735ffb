"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has unknown fields or wrong types, a clear ValidationError is raised
instead of a cryptic KeyError deep in command code.

Every field has a default so the CLI still runs when installed outside a
project checkout and no settings files are present.

Each top-level class corresponds to one file in config/settings/:
    ApplicationSchema  → application.yaml
    LoggingSchema      → logging.yaml
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "http://localhost:32777"
DEFAULT_TIMEOUT = 10.0
DEFAULT_STATUS_PATH = "/api/v1/status"


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ClientSchema(_StrictBase):
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    status_path: str = DEFAULT_STATUS_PATH


class ApplicationSchema(_StrictBase):
    name: str = "AMP CLI"
    version: str = "0.1.0"
    description: str = "Command-line client for the AMP status service"
    client: ClientSchema = Field(default_factory=ClientSchema)


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool = True


class FileHandlerSchema(_StrictBase):
    enabled: bool = False
    path: str = "logs/system.jsonl"
    max_bytes: int = 10485760
    backup_count: int = 5


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema = Field(default_factory=ConsoleHandlerSchema)
    file: FileHandlerSchema = Field(default_factory=FileHandlerSchema)


class LoggingSchema(_StrictBase):
    level: str = "WARNING"
    format: str = "console"
    handlers: HandlersSchema = Field(default_factory=HandlersSchema)
