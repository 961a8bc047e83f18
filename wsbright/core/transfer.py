"""Deliver a report over the primary transfer mode, falling back once."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from wsbright.core.model import TransferAttempt, TransferOutcome
from wsbright.transports.base import HidHandle

LOGGER = logging.getLogger(__name__)

FEATURE_REPORT = "feature-report"
OUTPUT_REPORT = "output-report"


class TransportFailure(Exception):
    """A transfer call returned an error count instead of raising."""


def _transfer_modes(handle: HidHandle) -> Iterator[tuple[str, Callable[[bytes], int]]]:
    # Feature reports travel as SET_REPORT on the control endpoint; output
    # reports use the interrupt OUT endpoint.
    yield FEATURE_REPORT, handle.send_feature_report
    yield OUTPUT_REPORT, handle.write


def _send(send: Callable[[bytes], int], report: bytes) -> None:
    written = send(report)
    if written is None:
        return
    if written < 0:
        raise TransportFailure(f"transport returned {written}")
    if written < len(report):
        raise TransportFailure(f"short write of {written} bytes, expected {len(report)}")


class TransferExecutor:
    def deliver(self, handle: HidHandle, report: bytes) -> TransferOutcome:
        failed: list[TransferAttempt] = []
        for mode, send in _transfer_modes(handle):
            try:
                _send(send, report)
            except (OSError, TransportFailure) as exc:
                LOGGER.info("%s transfer failed: %s", mode, exc)
                failed.append(TransferAttempt(mode=mode, error=str(exc) or type(exc).__name__))
                continue
            LOGGER.debug("Report delivered via %s", mode)
            return TransferOutcome.success(mode, tuple(failed))
        return TransferOutcome.failure(tuple(failed))
