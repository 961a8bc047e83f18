"""Service layer used by CLI and the public API."""

from __future__ import annotations

import logging

from wsbright.core.errors import TransferError
from wsbright.core.locator import DeviceLocator
from wsbright.core.model import WS170120, BrightnessResult, DeviceIdentity, HidDeviceInfo
from wsbright.core.report import build_report
from wsbright.core.transfer import TransferExecutor
from wsbright.transports.base import HidBackend
from wsbright.transports.hidapi import HidapiBackend

LOGGER = logging.getLogger(__name__)


class BrightnessService:
    def __init__(
        self,
        *,
        backend: HidBackend | None = None,
        identity: DeviceIdentity = WS170120,
    ) -> None:
        self.identity = identity
        self.locator = DeviceLocator(backend or HidapiBackend())
        self.executor = TransferExecutor()

    def list_displays(self) -> list[HidDeviceInfo]:
        return self.locator.find(self.identity)

    def set_brightness(self, brightness: int) -> BrightnessResult:
        report = build_report(brightness)
        LOGGER.debug("Built report %s", report.hex())

        with self.locator.open(self.identity) as (info, handle):
            outcome = self.executor.deliver(handle, report)

        if not outcome.succeeded or outcome.mode is None:
            raise TransferError(outcome)

        LOGGER.info("Brightness set to %d%% on %s via %s", brightness, info.path_str, outcome.mode)
        return BrightnessResult(
            brightness=brightness,
            device=info,
            mode=outcome.mode,
            report_hex=report.hex(),
            fallback_used=bool(outcome.attempts),
        )
