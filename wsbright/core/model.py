"""Core data models used across locator, executor, service, and CLI."""

from __future__ import annotations

from dataclasses import dataclass

COMMUNICATION_ERROR = "communication error"


@dataclass(frozen=True)
class DeviceIdentity:
    vendor_id: int
    product_id: int

    def matches(self, info: HidDeviceInfo) -> bool:
        return info.vendor_id == self.vendor_id and info.product_id == self.product_id

    def __str__(self) -> str:
        return f"{self.vendor_id:04x}:{self.product_id:04x}"


WS170120 = DeviceIdentity(vendor_id=0x0EEF, product_id=0x0005)


@dataclass(frozen=True)
class HidDeviceInfo:
    path: bytes
    vendor_id: int
    product_id: int
    manufacturer: str | None = None
    product: str | None = None
    serial_number: str | None = None
    interface_number: int | None = None

    @property
    def path_str(self) -> str:
        return self.path.decode(errors="replace")


@dataclass(frozen=True)
class TransferAttempt:
    mode: str
    error: str


@dataclass(frozen=True)
class TransferOutcome:
    """Result of delivering one report: success via a mode, or a failure reason."""

    succeeded: bool
    mode: str | None = None
    reason: str | None = None
    attempts: tuple[TransferAttempt, ...] = ()

    @classmethod
    def success(cls, mode: str, attempts: tuple[TransferAttempt, ...] = ()) -> TransferOutcome:
        return cls(succeeded=True, mode=mode, attempts=attempts)

    @classmethod
    def failure(cls, attempts: tuple[TransferAttempt, ...]) -> TransferOutcome:
        return cls(succeeded=False, reason=COMMUNICATION_ERROR, attempts=attempts)


@dataclass(frozen=True)
class BrightnessResult:
    brightness: int
    device: HidDeviceInfo
    mode: str
    report_hex: str
    fallback_used: bool
