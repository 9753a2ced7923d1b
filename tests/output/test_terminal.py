"""Tests for terminal output formatter."""

from io import StringIO

from rich.console import Console

from licence_compliance_checker.models.compliance import ComplianceResults
from licence_compliance_checker.models.detection import DetectionRecord
from licence_compliance_checker.output.terminal import TerminalFormatter
from tests.fakes import a_project_with_licence, a_project_with_no_licence


def _render(results: ComplianceResults) -> str:
    buffer = StringIO()
    console = Console(file=buffer, width=120, force_terminal=False)
    TerminalFormatter(console=console).format_results(results)
    return buffer.getvalue()


class TestTerminalFormatter:
    """Tests for TerminalFormatter class."""

    def test_no_projects(self) -> None:
        """Test output without any project."""
        output = _render(ComplianceResults())

        assert "LICENCE COMPLIANCE" in output
        assert "Projects Checked: 0" in output
        assert "No projects checked" in output

    def test_compliant_summary(self) -> None:
        """Test the summary of a passing check."""
        results = ComplianceResults(
            compliant=[a_project_with_licence("vendor/foo", {"MIT": 0.9})]
        )

        output = _render(results)

        assert "Status: COMPLIANT" in output
        assert "Compliant (1)" in output
        assert "vendor/foo" in output
        assert "0.90" in output
        assert "Restricted (" not in output

    def test_failing_summary(self) -> None:
        """Test the summary and tables of a failing check."""
        results = ComplianceResults(
            restricted=[
                a_project_with_licence("vendor/bar", {"GPL-3.0": 0.95, "LGPL-3.0": 0.8})
            ],
            unidentifiable=[a_project_with_no_licence("vendor/baz")],
            ignored=[a_project_with_no_licence("vendor/qux")],
        )

        output = _render(results)

        assert "NOT COMPLIANT" in output
        assert "Projects Checked: 3" in output
        assert "Restricted (1)" in output
        assert "GPL-3.0 (+1 more)" in output
        assert "Unidentifiable (1)" in output
        assert "no licence found" in output
        assert "Ignored (1)" in output

    def test_bucket_order(self) -> None:
        """Test that failing buckets are shown first."""
        results = ComplianceResults(
            compliant=[a_project_with_licence("a", {"MIT": 0.9})],
            restricted=[a_project_with_licence("b", {"GPL-3.0": 0.9})],
        )

        output = _render(results)

        assert output.index("Restricted (1)") < output.index("Compliant (1)")

    def test_square_brackets_shown_verbatim(self) -> None:
        """Test that bracketed names are not read as Rich markup."""
        results = ComplianceResults(
            compliant=[a_project_with_licence("app/[slug]", {"[MIT]": 0.9})],
            unidentifiable=[
                DetectionRecord(
                    project="vendor/[/x]", detection_error="bad [/bold] file"
                )
            ],
        )

        output = _render(results)

        assert "app/[slug]" in output
        assert "[MIT]" in output
        assert "vendor/[/x]" in output
        assert "bad [/bold] file" in output
