"""Domain-specific errors for wsbright."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wsbright.core.model import TransferOutcome


class WsbrightError(Exception):
    """Base error for wsbright."""


class InvalidBrightnessError(WsbrightError):
    """Raised when a brightness value is not an integer in 0-100."""


class BackendUnavailableError(WsbrightError):
    """Raised when the HID backend cannot be imported or initialised."""


class DeviceError(WsbrightError):
    """Base error for locating and opening the display."""


class DeviceNotFoundError(DeviceError):
    """Raised when no enumerated HID device matches the display identity."""


class DevicePermissionError(DeviceError):
    """Raised when the display is present but the host refuses to open it."""


class DeviceOpenError(DeviceError):
    """Raised when opening the display fails for a non-permission reason."""


class TransferError(WsbrightError):
    """Raised when every transfer mode failed to deliver the report."""

    def __init__(self, outcome: TransferOutcome) -> None:
        self.outcome = outcome
        details = "; ".join(f"{a.mode}: {a.error}" for a in outcome.attempts)
        super().__init__(details or outcome.reason or "communication error")
