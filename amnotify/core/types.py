"""Alert event types produced by the host rules engine."""

from __future__ import annotations

import time
from enum import IntEnum

from pydantic import BaseModel, Field


class AlertLevel(IntEnum):
    """Alert level, ordered so comparisons work naturally."""

    OK = 0
    INFO = 1
    WARNING = 2
    CRITICAL = 3


class AlertEvent(BaseModel):
    """A single alert state change emitted by the rules engine.

    Read-only from the adapter's point of view.
    """

    id: str = ""
    message: str = ""
    details: str = ""
    level: AlertLevel = AlertLevel.OK
    time: float = Field(default_factory=time.time)
