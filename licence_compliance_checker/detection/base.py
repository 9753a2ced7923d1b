"""Base licence detector interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from licence_compliance_checker.models.detection import DetectionRecord


class LicenceDetector(ABC):
    """Abstract base class for licence detectors.

    All licence detectors must inherit from this class and implement
    the detect() method.
    """

    @abstractmethod
    def detect(self, paths: Sequence[str]) -> list[DetectionRecord]:
        """Detect licences of the given projects.

        Args:
            paths: Project paths to inspect, duplicates allowed.

        Returns:
            One DetectionRecord per path, in any order, with project set
            to the path exactly as given. A path whose licence cannot be
            identified yields a record with a non-empty detection_error
            rather than being left out.

        Raises:
            DetectionError: If detection fails as a whole.
        """
