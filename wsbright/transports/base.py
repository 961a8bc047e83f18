"""HID backend interfaces."""

from __future__ import annotations

from typing import Protocol

from wsbright.core.model import HidDeviceInfo


class HidHandle(Protocol):
    def send_feature_report(self, data: bytes) -> int:
        """Send a feature report over the control endpoint; return bytes sent."""

    def write(self, data: bytes) -> int:
        """Send an output report over the interrupt endpoint; return bytes sent."""

    def close(self) -> None:
        """Release the device."""


class HidBackend(Protocol):
    def enumerate(self) -> list[HidDeviceInfo]:
        """Return every HID interface currently visible to the host."""

    def open_path(self, path: bytes) -> HidHandle:
        """Open the interface at `path` for exclusive use."""
