"""Licence override functionality for manual licence corrections."""
from __future__ import annotations

import logging

from licence_compliance_checker.constants import OVERRIDE_CONFIDENCE
from licence_compliance_checker.models.config import ComplianceConfig
from licence_compliance_checker.models.detection import DetectionRecord, LicenceMatch

logger = logging.getLogger(__name__)


def apply_licence_override(
    record: DetectionRecord,
    config: ComplianceConfig,
) -> DetectionRecord:
    """Apply a manual licence override to a detection record.

    The override fully replaces the detector's findings: the returned
    record holds a single match for the overriding licence and no
    detection error, whatever the detector reported. Project matching
    is exact and case-sensitive.

    Args:
        record: Detection record of the project.
        config: Configuration with overridden_project_licences.

    Returns:
        New DetectionRecord carrying the override, or the given record
        unchanged if no override is configured for the project.
    """
    override = config.overridden_project_licences.get(record.project)
    if override is None:
        return record

    logger.debug(
        "Overriding licence of project '%s' with '%s'", record.project, override
    )
    return DetectionRecord(
        project=record.project,
        matches=[LicenceMatch(licence=override, confidence=OVERRIDE_CONFIDENCE)],
    )
