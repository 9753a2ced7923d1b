"""JSON output formatter for compliance results."""
import json
from typing import Any, Optional, Union

from licence_compliance_checker.models.compliance import ComplianceResults
from licence_compliance_checker.models.detection import DetectionRecord

# Bucket keys in output order
BUCKETS = ("compliant", "restricted", "unidentifiable", "ignored")


class ComplianceJsonFormatter:
    """Format compliance results as JSON output.

    The output is an object with one array per bucket. Each record is
    {"project", "matches": [{"license", "confidence"}], "error"}, with
    empty fields left out.
    """

    def __init__(self, indent: Optional[int] = None) -> None:
        """Initialize the formatter.

        Args:
            indent: Indentation for pretty printing, None for compact output.
        """
        self._indent = indent

    def format_results(self, results: ComplianceResults) -> str:
        """Format compliance results as JSON string.

        Args:
            results: The compliance results to format.

        Returns:
            JSON string representation of the results.
        """
        output = self.build_output(results)
        if self._indent is None:
            return json.dumps(output, separators=(",", ":"))
        return json.dumps(output, indent=self._indent)

    def build_output(self, results: ComplianceResults) -> dict[str, Any]:
        """Build the output dictionary structure.

        Args:
            results: The compliance results to convert.

        Returns:
            Dictionary ready for JSON serialization.
        """
        return {
            bucket: [self._build_record(r) for r in getattr(results, bucket)]
            for bucket in BUCKETS
        }

    def _build_record(self, record: DetectionRecord) -> dict[str, Any]:
        output: dict[str, Any] = {}
        if record.project:
            output["project"] = record.project
        if record.matches:
            output["matches"] = [
                {"license": match.licence, "confidence": _confidence(match.confidence)}
                for match in record.matches
            ]
        if record.detection_error:
            output["error"] = record.detection_error
        return output


def _confidence(value: float) -> Union[int, float]:
    # Whole numbers are written without fraction, e.g. 0 for an override
    return int(value) if value.is_integer() else value
