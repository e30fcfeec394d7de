"""Alertmanager notification service."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType
from typing import Any

import structlog

from amnotify.alertmanager.builder import build_record
from amnotify.alertmanager.config_cell import ConfigCell
from amnotify.alertmanager.diagnostics import Diagnostic, StructlogDiagnostic
from amnotify.alertmanager.dispatcher import AlertmanagerDispatcher
from amnotify.alertmanager.exceptions import OptionsTypeError
from amnotify.alertmanager.handler import AlertmanagerHandler
from amnotify.alertmanager.types import HandlerConfig, TestOptions
from amnotify.core.config import AlertmanagerConfig
from amnotify.core.types import AlertLevel

logger = structlog.get_logger(__name__)

TEST_MESSAGE = "test alertmanager message"


class AlertmanagerService:
    """Translates alert events into Alertmanager alerts and POSTs them.

    Usage::

        service = AlertmanagerService(settings.alertmanager)
        handler = service.handler(HandlerConfig(room="ops", ...), task="cpu")
        await handler.handle(event)      # errors logged, never raised
        await service.test(service.test_options())  # errors raised
    """

    def __init__(
        self,
        config: AlertmanagerConfig,
        diag: Diagnostic | None = None,
        dispatcher: AlertmanagerDispatcher | None = None,
    ) -> None:
        self._cell = ConfigCell(config)
        self._diag: Diagnostic = diag if diag is not None else StructlogDiagnostic()
        self._dispatcher = dispatcher if dispatcher is not None else AlertmanagerDispatcher()

    # ── Lifecycle ───────────────────────────────────────────────

    async def open(self) -> None:
        """Nothing to start; present for the host's start/stop lifecycle."""

    async def close(self) -> None:
        await self._dispatcher.close()

    async def __aenter__(self) -> AlertmanagerService:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    # ── Configuration ───────────────────────────────────────────

    def config(self) -> AlertmanagerConfig:
        return self._cell.current()

    def update(self, new_configs: Sequence[object]) -> None:
        self._cell.update(new_configs)

    # ── Delivery ────────────────────────────────────────────────

    async def alert(
        self,
        room: str,
        label_names: Sequence[str],
        label_values: Sequence[str],
        annotation_names: Sequence[str],
        annotation_values: Sequence[str],
        level: AlertLevel,
    ) -> None:
        """Build a record for *level* and send it with the current config.

        *room* is only used for log context; Alertmanager has no such field.
        """
        config = self._cell.current()
        record = build_record(
            level, label_names, label_values, annotation_names, annotation_values
        )
        await self._dispatcher.send(config, record)
        logger.info(
            "alertmanager_alert_delivered",
            room=room,
            level=level.name,
            status=record.status.value,
        )

    # ── Handlers ────────────────────────────────────────────────

    def default_handler_config(self) -> HandlerConfig:
        return HandlerConfig(room=self._cell.current().room)

    def handler(self, config: HandlerConfig, **context: Any) -> AlertmanagerHandler:
        return AlertmanagerHandler(self, config, self._diag.with_context(**context))

    # ── Self-test ───────────────────────────────────────────────

    def test_options(self) -> TestOptions:
        c = self._cell.current()
        return TestOptions(
            room=c.room,
            message=TEST_MESSAGE,
            label_names=list(c.test_label_names),
            label_values=list(c.test_label_values),
            annotation_names=list(c.test_annotation_names),
            annotation_values=list(c.test_annotation_values),
        )

    async def test(self, options: object) -> None:
        """Send a CRITICAL test alert; failures propagate to the caller."""
        if not isinstance(options, TestOptions):
            raise OptionsTypeError(options)
        await self.alert(
            options.room,
            options.label_names,
            options.label_values,
            options.annotation_names,
            options.annotation_values,
            AlertLevel.CRITICAL,
        )
