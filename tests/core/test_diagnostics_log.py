# topmark:header:start
#
#   project      : ReflowMark
#   file         : test_diagnostics_log.py
#   file_relpath : tests/core/test_diagnostics_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `DiagnosticLog` and the diagnostic helpers."""

from __future__ import annotations

from reflowmark.core.diagnostics import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    diagnostics_counts_to_dict,
)


def test_log_collects_in_order() -> None:
    log = DiagnosticLog()
    log.add_info("one")
    log.add_warning("two")
    log.add_error("three")

    assert [d.message for d in log] == ["one", "two", "three"]
    assert log.has_error()
    assert log.stats().total == 3
    assert log.to_dict() == {"info": 1, "warning": 1, "error": 1}


def test_freeze_is_a_snapshot() -> None:
    log = DiagnosticLog()
    log.add_warning("w")
    frozen = log.freeze()
    log.add_error("e")
    assert frozen == (Diagnostic(DiagnosticLevel.WARNING, "w"),)


def test_extend_and_counts() -> None:
    log = DiagnosticLog.from_iterable([Diagnostic(DiagnosticLevel.INFO, "i")])
    log.extend([Diagnostic(DiagnosticLevel.ERROR, "e")])
    assert len(log) == 2
    assert log.stats().n_warning == 0
    assert diagnostics_counts_to_dict(log) == {"info": 1, "warning": 0, "error": 1}
