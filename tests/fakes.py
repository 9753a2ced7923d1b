"""Fake licence detection for licence-compliance-checker tests."""

from __future__ import annotations

from typing import Optional, Sequence

from licence_compliance_checker.detection.base import LicenceDetector
from licence_compliance_checker.models.detection import DetectionRecord, LicenceMatch


class FakeLicenceDetector(LicenceDetector):
    """Detector returning canned records, recording each call."""

    def __init__(
        self, *records: DetectionRecord, error: Optional[Exception] = None
    ) -> None:
        self.records = list(records)
        self.error = error
        self.calls: list[list[str]] = []

    def detect(self, paths: Sequence[str]) -> list[DetectionRecord]:
        self.calls.append(list(paths))
        if self.error is not None:
            raise self.error
        return list(self.records)


def a_project_with_licence(
    project: str, licences_confidence: dict[str, float]
) -> DetectionRecord:
    """Build a detection record matching the given licences."""
    return DetectionRecord(
        project=project,
        matches=[
            LicenceMatch(licence=licence, confidence=confidence)
            for licence, confidence in licences_confidence.items()
        ],
    )


def a_project_with_no_licence(project: str) -> DetectionRecord:
    """Build a detection record for a project without licence."""
    return DetectionRecord(project=project, detection_error="no licence found")


