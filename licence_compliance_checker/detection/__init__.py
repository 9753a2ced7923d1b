"""Licence detectors package."""

from licence_compliance_checker.detection.base import LicenceDetector
from licence_compliance_checker.detection.external import ExternalLicenceDetector
from licence_compliance_checker.detection.filesystem import FilesystemLicenceDetector

__all__ = [
    "ExternalLicenceDetector",
    "FilesystemLicenceDetector",
    "LicenceDetector",
]
