"""Per-rule alert handler invoked by the host pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

from amnotify.alertmanager.diagnostics import Diagnostic
from amnotify.alertmanager.exceptions import AlertmanagerError
from amnotify.alertmanager.types import HandlerConfig
from amnotify.core.types import AlertEvent

if TYPE_CHECKING:
    from amnotify.alertmanager.service import AlertmanagerService


class AlertmanagerHandler:
    """Forwards each alert event to Alertmanager using one rule's labels.

    Delivery failures go to the diagnostic and stop there; ``handle`` never
    raises them into the host's event loop.
    """

    def __init__(
        self,
        service: AlertmanagerService,
        config: HandlerConfig,
        diag: Diagnostic,
    ) -> None:
        self._service = service
        self._config = config
        self._diag = diag

    @property
    def config(self) -> HandlerConfig:
        return self._config

    async def handle(self, event: AlertEvent) -> None:
        c = self._config
        try:
            await self._service.alert(
                c.room,
                c.label_names,
                c.label_values,
                c.annotation_names,
                c.annotation_values,
                event.level,
            )
        except AlertmanagerError as exc:
            self._diag.error("failed to handle event", exc)
