"""Output formatters for licence-compliance-checker."""

from licence_compliance_checker.output.results_json import ComplianceJsonFormatter
from licence_compliance_checker.output.terminal import TerminalFormatter

__all__ = [
    "ComplianceJsonFormatter",
    "TerminalFormatter",
]
