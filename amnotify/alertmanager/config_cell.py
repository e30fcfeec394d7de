"""Hot-swappable holder for the adapter configuration."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from amnotify.alertmanager.exceptions import ConfigCardinalityError, ConfigTypeError
from amnotify.core.config import AlertmanagerConfig

logger = structlog.get_logger(__name__)


class ConfigCell:
    """Holds the current :class:`AlertmanagerConfig` snapshot.

    Readers call :meth:`current` once per operation and keep using that
    object; writers publish a whole new object with a single reference
    assignment. The config is frozen, so no reader ever sees a partial
    update and nobody takes a lock.
    """

    def __init__(self, config: AlertmanagerConfig) -> None:
        self._config = config

    def current(self) -> AlertmanagerConfig:
        return self._config

    def store(self, config: AlertmanagerConfig) -> None:
        self._config = config

    def update(self, new_configs: Sequence[object]) -> None:
        """Replace the config from a reload batch.

        Raises:
            ConfigCardinalityError: batch does not hold exactly one element.
            ConfigTypeError: the element is not an AlertmanagerConfig.
        """
        if len(new_configs) != 1:
            raise ConfigCardinalityError(len(new_configs))
        config = new_configs[0]
        if not isinstance(config, AlertmanagerConfig):
            raise ConfigTypeError(AlertmanagerConfig, config)
        self.store(config)
        logger.info(
            "alertmanager_config_updated",
            enabled=config.enabled,
            room=config.room,
        )
