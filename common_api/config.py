"""
Configuration management for the common API client.

Settings come from ``COMMON_API_*`` environment variables and from a JSON
file stored in the configuration directory (``~/.common-api`` by default,
or ``COMMON_API_CONFIG_DIR``). Environment variables win over the file.
"""

import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://localhost:8080"
DEFAULT_API_PREFIX = "/api"
DEFAULT_CONFIG_DIR = Path.home() / ".common-api"
CONFIG_FILE_NAME = "config.json"


class CommonApiConfig(BaseSettings):
    """Client settings shared by the API client and the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="COMMON_API_",
        extra="ignore",
        validate_assignment=True,
    )

    server_url: str = Field(DEFAULT_SERVER_URL, description="Base URL of the server")
    api_prefix: str = Field(DEFAULT_API_PREFIX, description="Path prefix of every endpoint")
    token: str = Field("", description="Bearer token returned by login")
    token_expires_at: int = Field(0, description="Token expiry as a UNIX timestamp, 0 if unknown")
    app_code: str = Field("", description="Code of the client application")
    timeout: int = Field(30, description="Request timeout in seconds")
    max_retries: int = Field(0, description="Retries for transient errors on idempotent requests")
    verify_ssl: bool = Field(True, description="Verify TLS certificates")
    download_dir: str = Field("", description="Directory for exported files, current directory if empty")
    page_size: int = Field(20, description="Default page size for list commands")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @property
    def base_url(self) -> str:
        """Server URL joined with the API prefix, without a trailing slash."""
        prefix = self.api_prefix.strip("/")
        server = self.server_url.rstrip("/")
        return f"{server}/{prefix}" if prefix else server

    def is_configured(self) -> bool:
        """Check whether a server URL is set."""
        return bool(self.server_url)

    def is_authenticated(self) -> bool:
        """Check whether a token is stored."""
        return bool(self.token)

    def is_token_expired(self) -> bool:
        """Check whether the stored token has a known expiry in the past."""
        if not self.token_expires_at:
            return False
        return time.time() >= self.token_expires_at

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class ConfigManager:
    """Loads and persists ``CommonApiConfig`` as JSON."""

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            env_dir = os.environ.get("COMMON_API_CONFIG_DIR")
            config_dir = Path(env_dir) if env_dir else DEFAULT_CONFIG_DIR
        self.config_dir = Path(config_dir)
        self._config: Optional[CommonApiConfig] = None

    def get_config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def _read_file(self) -> Dict[str, Any]:
        path = self.get_config_path()
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}", details=str(e))
        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid configuration file {path}")
        return data

    def load(self) -> CommonApiConfig:
        """Read the configuration file and apply environment overrides."""
        self._config = CommonApiConfig(**self._read_file())
        logger.debug("Loaded configuration from %s", self.get_config_path())
        return self._config

    def get(self) -> CommonApiConfig:
        if self._config is None:
            return self.load()
        return self._config

    def save(self, config: CommonApiConfig) -> None:
        """Write the configuration file, readable by the owner only."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        path = self.get_config_path()
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2)
        try:
            os.chmod(path, 0o600)
        except OSError as e:
            logger.warning("Could not restrict permissions of %s: %s", path, e)
        self._config = config
        logger.debug("Saved configuration to %s", path)

    def update(self, **kwargs: Any) -> CommonApiConfig:
        """Update some settings and save."""
        config = self.get()
        for key, value in kwargs.items():
            if key not in CommonApiConfig.model_fields:
                raise ConfigurationError(f"Unknown configuration key: {key}")
            setattr(config, key, value)
        self.save(config)
        return config

    def clear(self) -> None:
        """Delete the configuration file."""
        path = self.get_config_path()
        if path.exists():
            path.unlink()
        self._config = None


_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get the shared configuration manager, or a new one for ``config_dir``."""
    global _config_manager
    if config_dir is not None:
        return ConfigManager(config_dir)
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def get_config() -> CommonApiConfig:
    """Get the current configuration."""
    return get_config_manager().get()
