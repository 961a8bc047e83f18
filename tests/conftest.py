from __future__ import annotations

import pytest

from wsbright.core.model import HidDeviceInfo

DISPLAY = HidDeviceInfo(
    path=b"/dev/hidraw3",
    vendor_id=0x0EEF,
    product_id=0x0005,
    manufacturer="Waveshare",
    product="WS170120",
)
KEYBOARD = HidDeviceInfo(path=b"/dev/hidraw0", vendor_id=0x046D, product_id=0xC31C)


class FakeHandle:
    def __init__(self, feature: int | Exception = 38, output: int | Exception = 38) -> None:
        self.feature = feature
        self.output = output
        self.calls: list[tuple[str, bytes]] = []
        self.closed = 0

    def _respond(self, result: int | Exception) -> int:
        if isinstance(result, Exception):
            raise result
        return result

    def send_feature_report(self, data: bytes) -> int:
        self.calls.append(("feature", bytes(data)))
        return self._respond(self.feature)

    def write(self, data: bytes) -> int:
        self.calls.append(("write", bytes(data)))
        return self._respond(self.output)

    def close(self) -> None:
        self.closed += 1


class FakeBackend:
    def __init__(
        self,
        devices: list[HidDeviceInfo] | None = None,
        handle: FakeHandle | None = None,
        open_error: Exception | None = None,
    ) -> None:
        self.devices = [KEYBOARD, DISPLAY] if devices is None else devices
        self.handle = handle or FakeHandle()
        self.open_error = open_error
        self.enumerations = 0
        self.opened: list[bytes] = []

    def enumerate(self) -> list[HidDeviceInfo]:
        self.enumerations += 1
        return list(self.devices)

    def open_path(self, path: bytes) -> FakeHandle:
        self.opened.append(path)
        if self.open_error is not None:
            raise self.open_error
        return self.handle


@pytest.fixture
def handle() -> FakeHandle:
    return FakeHandle()


@pytest.fixture
def make_backend():
    return FakeBackend


@pytest.fixture
def make_handle():
    return FakeHandle


@pytest.fixture
def display() -> HidDeviceInfo:
    return DISPLAY
