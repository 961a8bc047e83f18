"""HID backend implementation using the hidapi bindings."""

from __future__ import annotations

from typing import Any

from wsbright.core.errors import BackendUnavailableError
from wsbright.core.model import HidDeviceInfo


def _load_hid() -> Any:
    try:
        import hid  # type: ignore
    except Exception as exc:  # pragma: no cover - import failure path
        raise BackendUnavailableError(
            "HID access requires 'hidapi'. Install dependency and retry."
        ) from exc
    return hid


def _to_info(entry: dict[str, Any]) -> HidDeviceInfo:
    path = entry.get("path", b"")
    if isinstance(path, str):
        path = path.encode()
    interface = entry.get("interface_number")
    return HidDeviceInfo(
        path=path,
        vendor_id=int(entry.get("vendor_id", 0)),
        product_id=int(entry.get("product_id", 0)),
        manufacturer=entry.get("manufacturer_string") or None,
        product=entry.get("product_string") or None,
        serial_number=entry.get("serial_number") or None,
        interface_number=int(interface) if interface is not None else None,
    )


class HidapiHandle:
    """Thin wrapper over `hid.device` so the executor sees one call shape."""

    def __init__(self, device: Any) -> None:
        self._device = device

    def send_feature_report(self, data: bytes) -> int:
        return self._device.send_feature_report(data)

    def write(self, data: bytes) -> int:
        return self._device.write(data)

    def close(self) -> None:
        self._device.close()


class HidapiBackend:
    def __init__(self) -> None:
        self._hid = _load_hid()

    def enumerate(self) -> list[HidDeviceInfo]:
        try:
            entries = self._hid.enumerate()
        except OSError as exc:
            raise BackendUnavailableError(f"Failed to enumerate HID devices: {exc}") from exc
        return [_to_info(entry) for entry in entries]

    def open_path(self, path: bytes) -> HidapiHandle:
        device = self._hid.device()
        device.open_path(path)
        return HidapiHandle(device)
