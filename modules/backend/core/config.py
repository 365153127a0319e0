"""
Configuration Management.

Loads optional overrides from config/.env (or NOTEBOARD_* environment
variables) and settings from config/settings/*.yaml.

Overrides (.env / environment):
    NOTEBOARD_SERVER_HOST, NOTEBOARD_SERVER_PORT, NOTEBOARD_ENVIRONMENT

Settings (YAML):
    application.yaml   - App identity, server, cors, list pagination
    logging.yaml       - Logging configuration
    features.yaml      - Feature flags
    board.yaml         - Note board texts, page size, seed data location
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from modules.backend.core.config_schema import (
    ApplicationSchema,
    BoardSchema,
    FeaturesSchema,
    LoggingSchema,
)


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def validate_project_root() -> Path:
    """
    Validate that the project root can be found.

    Raises SystemExit with a clear message if .project_root is not found.
    Use this in entry scripts before any configuration loading.
    """
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides loaded from config/.env. Every field is optional."""

    server_host: str | None = None
    server_port: int | None = None
    environment: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="NOTEBOARD_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
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
    Missing keys, wrong types, or unknown fields raise a clear error
    immediately instead of causing cryptic KeyErrors later.

    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")
        self._features = _load_validated(FeaturesSchema, "features.yaml")
        self._board = _load_validated(BoardSchema, "board.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging

    @property
    def features(self) -> FeaturesSchema:
        """Feature flags."""
        return self._features

    @property
    def board(self) -> BoardSchema:
        """Note board settings."""
        return self._board


@lru_cache
def get_settings() -> Settings:
    """Get cached overrides instance. Resolves .env path from project root."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_server_address() -> tuple[str, int]:
    """
    Resolve the server bind address.

    Environment overrides win over application.yaml.

    Returns:
        Tuple of (host, port).
    """
    server = get_app_config().application.server
    settings = get_settings()
    return settings.server_host or server.host, settings.server_port or server.port


def get_seed_path() -> Path:
    """Absolute path of the seed notes file named in board.yaml."""
    return find_project_root() / get_app_config().board.seed_path


def get_environment() -> str:
    """Deployment environment name, NOTEBOARD_ENVIRONMENT winning over application.yaml."""
    return get_settings().environment or get_app_config().application.environment
