"""Diagnostics sink used to report delivery failures that are not re-raised."""

from __future__ import annotations

from typing import Any, Protocol

import structlog


class Diagnostic(Protocol):
    def with_context(self, **context: Any) -> Diagnostic: ...

    def error(self, msg: str, err: BaseException) -> None: ...


class StructlogDiagnostic:
    """:class:`Diagnostic` backed by a structlog bound logger."""

    def __init__(self, logger: Any | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("amnotify.alertmanager")

    def with_context(self, **context: Any) -> StructlogDiagnostic:
        return StructlogDiagnostic(self._logger.bind(**context))

    def error(self, msg: str, err: BaseException) -> None:
        self._logger.error(msg, error=str(err), error_type=type(err).__name__)
