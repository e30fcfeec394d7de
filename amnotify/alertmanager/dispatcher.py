"""HTTP delivery of alert records to Alertmanager."""

from __future__ import annotations

import asyncio

import aiohttp
import structlog

from amnotify.alertmanager.exceptions import (
    AdapterDisabledError,
    TransportError,
    UnexpectedStatusError,
)
from amnotify.alertmanager.types import AlertRecord
from amnotify.core.config import AlertmanagerConfig

logger = structlog.get_logger(__name__)


class AlertmanagerDispatcher:
    """POSTs one-alert batches to the configured Alertmanager URL.

    Single attempt per call. Only HTTP 200 counts as delivered.
    """

    def __init__(self) -> None:
        self._session: aiohttp.ClientSession | None = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def send(self, config: AlertmanagerConfig, record: AlertRecord) -> None:
        """Deliver *record* using the given config snapshot.

        Raises:
            AdapterDisabledError: config.enabled is false (no request made).
            TransportError: the request failed before a response arrived.
            UnexpectedStatusError: the response status was not 200.
        """
        if not config.enabled:
            raise AdapterDisabledError()

        # Alertmanager's API takes a list even for a single alert.
        payload = [record.to_wire()]

        try:
            session = self._get_session()
            async with session.post(config.url.get_secret_value(), json=payload) as resp:
                if resp.status != 200:
                    # Error bodies are not guaranteed to be UTF-8.
                    body = await resp.text(errors="replace")
                    logger.warning(
                        "alertmanager_send_failed",
                        status=resp.status,
                        body=body[:200],
                    )
                    raise UnexpectedStatusError(resp.status)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(
                f"POST to Alertmanager failed: {type(exc).__name__}"
            ) from exc

        logger.debug(
            "alertmanager_alert_sent",
            status=record.status.value,
        )

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
