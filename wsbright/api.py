"""Stable public API for building tooling on top of wsbright.

This module is the supported integration surface for third-party callers
(tray applets, scripts, services). Avoid importing from the internal modules
unless intentionally depending on non-stable internals.
"""

from __future__ import annotations

from wsbright.core.classify import Diagnostic, ErrorKind, classify
from wsbright.core.errors import (
    BackendUnavailableError,
    DeviceError,
    DeviceNotFoundError,
    DeviceOpenError,
    DevicePermissionError,
    InvalidBrightnessError,
    TransferError,
    WsbrightError,
)
from wsbright.core.model import (
    WS170120,
    BrightnessResult,
    DeviceIdentity,
    HidDeviceInfo,
    TransferAttempt,
    TransferOutcome,
)
from wsbright.core.report import MAX_BRIGHTNESS, MIN_BRIGHTNESS, build_report, parse_brightness
from wsbright.core.service import BrightnessService
from wsbright.transports.base import HidBackend, HidHandle

__all__ = [
    "WsbrightError",
    "InvalidBrightnessError",
    "BackendUnavailableError",
    "DeviceError",
    "DeviceNotFoundError",
    "DevicePermissionError",
    "DeviceOpenError",
    "TransferError",
    "Diagnostic",
    "ErrorKind",
    "classify",
    "WS170120",
    "BrightnessResult",
    "DeviceIdentity",
    "HidDeviceInfo",
    "TransferAttempt",
    "TransferOutcome",
    "MIN_BRIGHTNESS",
    "MAX_BRIGHTNESS",
    "build_report",
    "parse_brightness",
    "HidBackend",
    "HidHandle",
    "Client",
]


class Client:
    """Public client for controlling the WS170120 backlight.

    A `Client` wraps device lookup, report building and delivery behind a
    small API. Pass `backend` to use something other than hidapi.
    """

    def __init__(self, *, backend: HidBackend | None = None) -> None:
        self._service = BrightnessService(backend=backend)

    def list_displays(self) -> list[HidDeviceInfo]:
        return self._service.list_displays()

    def set_brightness(self, brightness: int) -> BrightnessResult:
        return self._service.set_brightness(brightness)
