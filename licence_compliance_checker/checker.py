"""Compliance checker classifying detected project licences."""
from __future__ import annotations

import logging
from typing import Sequence

from licence_compliance_checker.analysis.filtering import is_ignored
from licence_compliance_checker.analysis.ordering import (
    sort_records,
    with_sorted_matches,
)
from licence_compliance_checker.analysis.overrides import apply_licence_override
from licence_compliance_checker.analysis.policy import is_restricted
from licence_compliance_checker.constants import NO_MATCH_ERROR
from licence_compliance_checker.detection.base import LicenceDetector
from licence_compliance_checker.models.compliance import ComplianceResults
from licence_compliance_checker.models.config import ComplianceConfig

logger = logging.getLogger(__name__)


class ComplianceChecker:
    """Validates project licences against a compliance configuration.

    The checker holds no state besides its configuration and detector,
    so a single instance can validate any number of batches.
    """

    def __init__(self, config: ComplianceConfig, detector: LicenceDetector) -> None:
        """Initialize the checker.

        Args:
            config: Restricted licences, ignored projects and overrides.
            detector: Licence detector invoked once per validation.
        """
        self._config = config
        self._detector = detector

    @property
    def config(self) -> ComplianceConfig:
        """Configuration every validation is checked against."""
        return self._config

    def validate(self, project_paths: Sequence[str]) -> ComplianceResults:
        """Check licence compliance of the given projects.

        Decision order for each project, first match wins:
        1. Ignored projects, as detected
        2. Overridden projects take their override licence, discarding
           any detection error
        3. Unidentifiable when detection failed
        4. Restricted when the most probable licence is restricted
        5. Compliant otherwise

        Args:
            project_paths: Project paths to check, duplicates allowed.

        Returns:
            ComplianceResults with each project in exactly one bucket,
            buckets ordered by project.

        Raises:
            DetectionError: If the detector fails. No results are
                produced in that case.
        """
        records = self._detector.detect(list(project_paths))
        logger.debug("Licence detection results: %s", records)

        results = ComplianceResults()
        for record in sort_records(records):
            record = with_sorted_matches(record)

            if is_ignored(record, self._config):
                results.ignored.append(record)
                continue

            record = apply_licence_override(record, self._config)

            if not record.has_error and not record.matches:
                record = record.model_copy(update={"detection_error": NO_MATCH_ERROR})

            if record.has_error:
                results.unidentifiable.append(record)
                continue

            if is_restricted(record, self._config):
                results.restricted.append(record)
                continue

            results.compliant.append(record)

        return results
