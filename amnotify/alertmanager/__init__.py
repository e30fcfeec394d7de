"""Alertmanager notification adapter."""

from amnotify.alertmanager.builder import build_record, pair_up, record_from_pairs
from amnotify.alertmanager.config_cell import ConfigCell
from amnotify.alertmanager.diagnostics import Diagnostic, StructlogDiagnostic
from amnotify.alertmanager.dispatcher import AlertmanagerDispatcher
from amnotify.alertmanager.exceptions import (
    AdapterDisabledError,
    AlertmanagerError,
    ConfigCardinalityError,
    ConfigTypeError,
    LabelMismatchError,
    OptionsTypeError,
    TransportError,
    UnexpectedStatusError,
)
from amnotify.alertmanager.handler import AlertmanagerHandler
from amnotify.alertmanager.service import AlertmanagerService
from amnotify.alertmanager.types import AlertRecord, AlertStatus, HandlerConfig, TestOptions

__all__ = [
    "AdapterDisabledError",
    "AlertRecord",
    "AlertStatus",
    "AlertmanagerDispatcher",
    "AlertmanagerError",
    "AlertmanagerHandler",
    "AlertmanagerService",
    "ConfigCardinalityError",
    "ConfigCell",
    "ConfigTypeError",
    "Diagnostic",
    "HandlerConfig",
    "LabelMismatchError",
    "OptionsTypeError",
    "StructlogDiagnostic",
    "TestOptions",
    "TransportError",
    "UnexpectedStatusError",
    "build_record",
    "pair_up",
    "record_from_pairs",
]
