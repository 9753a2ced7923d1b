"""Pydantic data models for licence-compliance-checker."""

from licence_compliance_checker.models.compliance import ComplianceResults
from licence_compliance_checker.models.config import CheckerConfig, ComplianceConfig
from licence_compliance_checker.models.detection import DetectionRecord, LicenceMatch

__all__ = [
    "CheckerConfig",
    "ComplianceConfig",
    "ComplianceResults",
    "DetectionRecord",
    "LicenceMatch",
]
