"""Wire and configuration types for the Alertmanager adapter."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AlertStatus(StrEnum):
    """Lifecycle state of an alert as Alertmanager tracks it."""

    FIRING = "firing"
    RESOLVED = "resolved"


class AlertRecord(BaseModel):
    """One alert in Alertmanager's POST body.

    Serialised with capitalised keys (``Status``/``Labels``/``Annotations``).
    """

    status: AlertStatus = Field(serialization_alias="Status")
    labels: dict[str, str] = Field(default_factory=dict, serialization_alias="Labels")
    annotations: dict[str, str] = Field(
        default_factory=dict, serialization_alias="Annotations"
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class HandlerConfig(BaseModel):
    """Per-rule handler settings.

    Names and values are paired by position. Lengths are not checked here;
    a mismatch surfaces when the handler dispatches.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Destination room. Kept for the host's rule definitions; not sent on the wire.
    room: str = ""
    label_names: list[str] = Field(default_factory=list, alias="alertManagerTagName")
    label_values: list[str] = Field(default_factory=list, alias="alertManagerTagValue")
    annotation_names: list[str] = Field(
        default_factory=list, alias="alertManagerAnnotationName"
    )
    annotation_values: list[str] = Field(
        default_factory=list, alias="alertManagerAnnotationValue"
    )


class TestOptions(HandlerConfig):
    """Parameters for an operator-triggered self-test.

    ``message`` is accepted for the operator's benefit only.
    """

    message: str = ""
