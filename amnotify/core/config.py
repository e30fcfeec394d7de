"""Pydantic settings loaded from YAML configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, model_validator

_settings: Settings | None = None

_DEFAULT_CONFIG_PATH = Path("config/settings.yaml")
_CONFIG_ENV_VAR = "AMNOTIFY_CONFIG"


class AlertmanagerConfig(BaseModel):
    """Alertmanager adapter configuration.

    Frozen: a reload replaces the whole object, it is never edited in place.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    # May embed credentials (userinfo or a token), so it is never logged.
    url: SecretStr = SecretStr("")
    room: str = ""
    # Label/annotation defaults used by the self-test.
    test_label_names: tuple[str, ...] = ()
    test_label_values: tuple[str, ...] = ()
    test_annotation_names: tuple[str, ...] = ()
    test_annotation_values: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_url(self) -> AlertmanagerConfig:
        url = self.url.get_secret_value()
        if self.enabled and not url.startswith(("http://", "https://")):
            raise ValueError("alertmanager url must be an http(s) URL when enabled")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"


class Settings(BaseModel):
    """Root settings container."""

    alertmanager: AlertmanagerConfig = AlertmanagerConfig()
    logging: LoggingConfig = LoggingConfig()


def _config_path(path: str | Path | None) -> Path:
    if path:
        return Path(path)
    env_path = os.environ.get(_CONFIG_ENV_VAR)
    return Path(env_path) if env_path else _DEFAULT_CONFIG_PATH


def _read_yaml(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        raw = yaml.safe_load(f)
    return raw if isinstance(raw, dict) else {}


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from YAML and cache them globally.

    Args:
        path: Path to YAML config. Falls back to ``$AMNOTIFY_CONFIG``, then
            config/settings.yaml. A missing file yields defaults.

    Returns:
        Parsed Settings instance.
    """
    global _settings  # noqa: PLW0603
    _settings = Settings(**_read_yaml(_config_path(path)))
    return _settings


def get_settings() -> Settings:
    """Return the cached settings, loading defaults if not yet loaded."""
    if _settings is None:
        return load_settings()
    return _settings


def reload_alertmanager_config(path: str | Path | None = None) -> list[AlertmanagerConfig]:
    """Re-read the config file and return the reload batch for the adapter.

    The result is what ``AlertmanagerService.update`` expects: a list holding
    the single new config.
    """
    return [load_settings(path).alertmanager]


def reset_settings() -> None:
    """Reset the cached settings (useful for testing)."""
    global _settings  # noqa: PLW0603
    _settings = None
