"""Map wsbright failures to user-facing diagnostics and exit codes."""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum

from wsbright.core.errors import (
    BackendUnavailableError,
    DeviceNotFoundError,
    DeviceOpenError,
    DevicePermissionError,
    InvalidBrightnessError,
    TransferError,
    WsbrightError,
)
from wsbright.core.model import WS170120

_PERMISSION_MARKERS = ("access denied", "permission denied", "exclusive access")
_PERMISSION_ERRNOS = {errno.EACCES, errno.EPERM}


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid-input"
    DEVICE_NOT_FOUND = "device-not-found"
    PERMISSION_DENIED = "permission-denied"
    TRANSFER_FAILED = "transfer-failed"
    BACKEND_UNAVAILABLE = "backend-unavailable"
    DEVICE_ERROR = "device-error"


@dataclass(frozen=True)
class Diagnostic:
    kind: ErrorKind
    message: str
    exit_code: int


_TEMPLATES: dict[ErrorKind, tuple[str, int]] = {
    ErrorKind.INVALID_INPUT: (
        "Invalid brightness {detail}. Expected an integer between 0 and 100.",
        2,
    ),
    ErrorKind.DEVICE_NOT_FOUND: ("{detail}", 1),
    ErrorKind.PERMISSION_DENIED: (
        "Device access denied: {detail}. Try running with elevated privileges (sudo) "
        f"or add a udev rule granting access to hidraw devices {WS170120}.",
        1,
    ),
    ErrorKind.TRANSFER_FAILED: (
        "Failed to send brightness report via feature report and output report: {detail}",
        1,
    ),
    ErrorKind.BACKEND_UNAVAILABLE: ("HID backend unavailable: {detail}", 1),
    ErrorKind.DEVICE_ERROR: ("Opening device failed: {detail}", 1),
}

# Most specific first; DeviceError subclasses must precede any base class.
_KINDS: tuple[tuple[type[WsbrightError], ErrorKind], ...] = (
    (InvalidBrightnessError, ErrorKind.INVALID_INPUT),
    (DeviceNotFoundError, ErrorKind.DEVICE_NOT_FOUND),
    (DevicePermissionError, ErrorKind.PERMISSION_DENIED),
    (DeviceOpenError, ErrorKind.DEVICE_ERROR),
    (TransferError, ErrorKind.TRANSFER_FAILED),
    (BackendUnavailableError, ErrorKind.BACKEND_UNAVAILABLE),
)


def is_permission_error(exc: BaseException) -> bool:
    """Return True when a raw open failure looks like a host access restriction."""
    if isinstance(exc, PermissionError):
        return True
    if isinstance(exc, OSError) and exc.errno in _PERMISSION_ERRNOS:
        return True
    text = str(exc).lower()
    return any(marker in text for marker in _PERMISSION_MARKERS)


def kind_of(exc: WsbrightError) -> ErrorKind | None:
    for error_cls, kind in _KINDS:
        if isinstance(exc, error_cls):
            return kind
    return None


def classify(exc: WsbrightError) -> Diagnostic:
    """Return the diagnostic for `exc`; errors without a kind are re-raised."""
    kind = kind_of(exc)
    if kind is None:
        raise exc
    template, exit_code = _TEMPLATES[kind]
    return Diagnostic(kind=kind, message=template.format(detail=exc), exit_code=exit_code)
