"""Find and open the display among the host's HID devices."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager

from wsbright.core.classify import is_permission_error
from wsbright.core.errors import DeviceNotFoundError, DeviceOpenError, DevicePermissionError
from wsbright.core.model import DeviceIdentity, HidDeviceInfo
from wsbright.transports.base import HidBackend, HidHandle

LOGGER = logging.getLogger(__name__)


def _node_denied(path: bytes) -> bool:
    # hidapi on Linux reports a bare "open failed"; check the hidraw node itself.
    if not path.startswith(b"/") or not os.path.exists(path):
        return False
    return not os.access(path, os.R_OK | os.W_OK)


class DeviceLocator:
    def __init__(self, backend: HidBackend) -> None:
        self.backend = backend

    def find(self, identity: DeviceIdentity) -> list[HidDeviceInfo]:
        devices = self.backend.enumerate()
        matches = [info for info in devices if identity.matches(info)]
        LOGGER.debug(
            "Enumerated %d HID device(s), %d matching %s", len(devices), len(matches), identity
        )
        return matches

    def locate(self, identity: DeviceIdentity) -> HidDeviceInfo:
        matches = self.find(identity)
        if not matches:
            raise DeviceNotFoundError(f"Waveshare monitor WS170120 ({identity}) is not connected.")
        if len(matches) > 1:
            paths = ", ".join(info.path_str for info in matches)
            LOGGER.warning("Multiple displays match %s (%s); using the first", identity, paths)
        return matches[0]

    @contextmanager
    def open(self, identity: DeviceIdentity) -> Iterator[tuple[HidDeviceInfo, HidHandle]]:
        """Open the first matching display and close it when the block exits."""
        info = self.locate(identity)
        try:
            handle = self.backend.open_path(info.path)
        except OSError as exc:
            if is_permission_error(exc) or _node_denied(info.path):
                raise DevicePermissionError(f"cannot open {info.path_str} ({exc})") from exc
            raise DeviceOpenError(f"{info.path_str}: {exc}") from exc
        LOGGER.debug("Opened %s", info.path_str)

        try:
            yield info, handle
        finally:
            try:
                handle.close()
            except OSError as exc:
                LOGGER.warning("Closing %s failed: %s", info.path_str, exc)
