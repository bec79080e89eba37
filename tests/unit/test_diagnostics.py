"""Tests for the diagnostics collector."""

from unittest.mock import MagicMock

from ansible_terrakube.diagnostics import Diagnostic, Diagnostics, Severity


class TestDiagnostics:
    def test_empty_collector(self):
        diags = Diagnostics()

        assert len(diags) == 0
        assert not diags.has_errors

    def test_warnings_are_not_errors(self):
        diags = Diagnostics()
        diags.add_warning("Deprecated", "old output format")

        assert not diags.has_errors
        assert len(diags.warnings) == 1

    def test_extend_keeps_order(self):
        first = Diagnostics()
        first.add_error("A", "first")
        second = Diagnostics()
        second.add_warning("B", "second")
        second.add_error("C", "third")

        first.extend(second)

        assert [d.summary for d in first] == ["A", "B", "C"]
        assert [d.summary for d in first.errors] == ["A", "C"]

    def test_str_includes_path(self):
        diagnostic = Diagnostic(Severity.error, "Type Mismatch", "expected number", "x[0]")

        assert str(diagnostic) == "Type Mismatch at x[0]: expected number"

    def test_as_dict(self):
        diagnostic = Diagnostic(Severity.warning, "S", "D")

        assert diagnostic.as_dict() == {
            "severity": "warning",
            "summary": "S",
            "detail": "D",
            "path": "",
        }

    def test_report_warns_and_returns_errors(self):
        module = MagicMock()
        diags = Diagnostics()
        diags.add_warning("W", "watch out")
        diags.add_error("E1", "broken", "a")
        diags.add_error("E2", "also broken")

        messages = diags.report(module)

        module.warn.assert_called_once_with("W: watch out")
        assert messages == ["1. E1 at a: broken", "2. E2: also broken"]
