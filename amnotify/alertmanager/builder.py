"""Pure translation of an alert level plus label/annotation lists into an AlertRecord."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from amnotify.alertmanager.exceptions import LabelMismatchError
from amnotify.alertmanager.types import AlertRecord, AlertStatus
from amnotify.core.types import AlertLevel

Pair = tuple[str, str]


def status_for(level: AlertLevel) -> AlertStatus:
    """OK resolves the alert; every other level keeps it firing."""
    if level == AlertLevel.OK:
        return AlertStatus.RESOLVED
    return AlertStatus.FIRING


def pair_up(names: Sequence[str], values: Sequence[str], kind: str = "labels") -> list[Pair]:
    """Zip parallel name/value lists, refusing lists of different length."""
    if len(names) != len(values):
        raise LabelMismatchError(kind, len(names), len(values))
    return list(zip(names, values))


def record_from_pairs(
    level: AlertLevel,
    labels: Iterable[Pair] = (),
    annotations: Iterable[Pair] = (),
) -> AlertRecord:
    """Build a record from ``(name, value)`` pairs. Later duplicates win."""
    return AlertRecord(
        status=status_for(level),
        labels=dict(labels),
        annotations=dict(annotations),
    )


def build_record(
    level: AlertLevel,
    label_names: Sequence[str],
    label_values: Sequence[str],
    annotation_names: Sequence[str],
    annotation_values: Sequence[str],
) -> AlertRecord:
    """Build a record from parallel name/value lists.

    Every pair is included, the last one too.

    Raises:
        LabelMismatchError: a names list and its values list differ in length.
    """
    return record_from_pairs(
        level,
        pair_up(label_names, label_values, "labels"),
        pair_up(annotation_names, annotation_values, "annotations"),
    )
