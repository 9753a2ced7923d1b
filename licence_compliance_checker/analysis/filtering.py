"""Project filtering for ignored projects configuration."""

from __future__ import annotations

from licence_compliance_checker.models.config import ComplianceConfig
from licence_compliance_checker.models.detection import DetectionRecord


def is_ignored(record: DetectionRecord, config: ComplianceConfig) -> bool:
    """Check whether a project is exempt from the compliance check.

    Project matching is exact and case-sensitive: the project must be
    listed in ignored_projects exactly as it was passed to the detector.

    Args:
        record: Detection record of the project.
        config: Configuration with ignored_projects.

    Returns:
        True if the project is ignored, False otherwise.
    """
    return record.project in config.ignored_projects
