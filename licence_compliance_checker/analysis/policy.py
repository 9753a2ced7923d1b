"""Licence policy checking for restricted licences configuration."""
from __future__ import annotations

import logging

from licence_compliance_checker.analysis.ordering import most_probable_licence
from licence_compliance_checker.models.config import ComplianceConfig
from licence_compliance_checker.models.detection import DetectionRecord

logger = logging.getLogger(__name__)


def is_restricted(record: DetectionRecord, config: ComplianceConfig) -> bool:
    """Check a project's most probable licence against restricted licences.

    Only the most probable licence counts: a restricted licence found
    with lower confidence than another candidate does not make the
    project restricted.

    Args:
        record: Detection record with at least one match.
        config: Configuration with restricted_licences.

    Returns:
        True if the most probable licence is restricted, False otherwise.
    """
    licence = most_probable_licence(record.matches)
    if licence is not None and licence in config.restricted_licences:
        logger.info(
            "Project '%s' most probable licence '%s' is restricted",
            record.project,
            licence,
        )
        return True
    return False
