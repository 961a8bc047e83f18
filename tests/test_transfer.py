from __future__ import annotations

import pytest

from wsbright.core.model import COMMUNICATION_ERROR
from wsbright.core.report import build_report
from wsbright.core.transfer import FEATURE_REPORT, OUTPUT_REPORT, TransferExecutor


def test_primary_success_skips_fallback(make_handle) -> None:
    handle = make_handle()
    report = build_report(75)

    outcome = TransferExecutor().deliver(handle, report)

    assert outcome.succeeded
    assert outcome.mode == FEATURE_REPORT
    assert outcome.attempts == ()
    assert handle.calls == [("feature", report)]


def test_fallback_sends_identical_bytes_once(make_handle) -> None:
    handle = make_handle(feature=OSError("Broken pipe"))
    report = build_report(0)

    outcome = TransferExecutor().deliver(handle, report)

    assert outcome.succeeded
    assert outcome.mode == OUTPUT_REPORT
    assert [mode for mode, _ in handle.calls] == ["feature", "write"]
    assert handle.calls[0][1] == handle.calls[1][1] == report
    assert outcome.attempts[0].mode == FEATURE_REPORT
    assert "Broken pipe" in outcome.attempts[0].error


@pytest.mark.parametrize("feature", [-1, 12])
def test_error_counts_trigger_fallback(make_handle, feature: int) -> None:
    handle = make_handle(feature=feature)
    outcome = TransferExecutor().deliver(handle, build_report(10))
    assert outcome.mode == OUTPUT_REPORT
    assert len(handle.calls) == 2


def test_both_modes_failing_reports_communication_error(make_handle) -> None:
    handle = make_handle(feature=OSError("not supported"), output=-1)

    outcome = TransferExecutor().deliver(handle, build_report(50))

    assert not outcome.succeeded
    assert outcome.reason == COMMUNICATION_ERROR
    assert outcome.mode is None
    assert [a.mode for a in outcome.attempts] == [FEATURE_REPORT, OUTPUT_REPORT]
    assert "not supported" in outcome.attempts[0].error
    assert "-1" in outcome.attempts[1].error
    assert len(handle.calls) == 2


def test_non_transport_errors_propagate(make_handle) -> None:
    handle = make_handle(feature=ValueError("not open"))
    with pytest.raises(ValueError):
        TransferExecutor().deliver(handle, build_report(50))
    assert len(handle.calls) == 1
