"""Exception hierarchy for the Alertmanager adapter."""

from __future__ import annotations


class AlertmanagerError(Exception):
    """Base exception for all Alertmanager adapter errors."""


class ConfigCardinalityError(AlertmanagerError):
    """A config reload carried other than exactly one config object."""

    def __init__(self, count: int) -> None:
        super().__init__(f"expected only one new config object, got {count}")
        self.count = count


class ConfigTypeError(AlertmanagerError):
    """A config reload carried an object of the wrong type."""

    def __init__(self, expected: type, got: object) -> None:
        super().__init__(
            f"expected config object to be of type {expected.__name__}, "
            f"got {type(got).__name__}"
        )


class OptionsTypeError(AlertmanagerError):
    """Self-test invoked with something other than TestOptions."""

    def __init__(self, got: object) -> None:
        super().__init__(f"unexpected options type {type(got).__name__}")


class LabelMismatchError(AlertmanagerError):
    """Label or annotation name/value lists differ in length."""

    def __init__(self, kind: str, names: int, values: int) -> None:
        super().__init__(f"{kind}: got {names} names but {values} values")
        self.kind = kind


class AdapterDisabledError(AlertmanagerError):
    """The adapter is switched off in configuration."""

    def __init__(self) -> None:
        super().__init__("service is not enabled")


class TransportError(AlertmanagerError):
    """The POST never produced an HTTP response (DNS, refused, timeout...)."""


class UnexpectedStatusError(AlertmanagerError):
    """Alertmanager answered with something other than 200."""

    def __init__(self, code: int) -> None:
        super().__init__(f"unexpected response code {code} from Alertmanager service")
        self.code = code
