"""Brightness report layout for the WS170120 display firmware."""

from __future__ import annotations

import re

from wsbright.core.errors import InvalidBrightnessError

REPORT_LENGTH = 38
BRIGHTNESS_OFFSET = 6
CONTROL_MAGIC = bytes([0x04, 0xAA, 0x01, 0x00])
MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100

_INT_RE = re.compile(r"^[+-]?\d+$")


def _check_range(brightness: int) -> int:
    if not MIN_BRIGHTNESS <= brightness <= MAX_BRIGHTNESS:
        raise InvalidBrightnessError(
            f"{brightness} is out of range {MIN_BRIGHTNESS}-{MAX_BRIGHTNESS}"
        )
    return brightness


def parse_brightness(text: str) -> int:
    """Parse a decimal brightness percentage from user input."""
    normalized = text.strip()
    if not _INT_RE.match(normalized):
        raise InvalidBrightnessError(f"'{text}' is not an integer")
    return _check_range(int(normalized))


def build_report(brightness: int) -> bytes:
    """Build the 38-byte report that sets the backlight to `brightness` percent.

    Layout: magic `04 aa 01 00`, two reserved zero bytes, the brightness at
    offset 6, then zero padding.
    """
    if isinstance(brightness, bool) or not isinstance(brightness, int):
        raise InvalidBrightnessError(f"{brightness!r} is not an integer")
    _check_range(brightness)

    report = bytearray(REPORT_LENGTH)
    report[: len(CONTROL_MAGIC)] = CONTROL_MAGIC
    report[BRIGHTNESS_OFFSET] = brightness
    return bytes(report)
