"""Licence detector backed by the go-license-detector command line tool."""
from __future__ import annotations

import json
import logging
import subprocess
from typing import Any, Optional, Sequence

from licence_compliance_checker.detection.base import LicenceDetector
from licence_compliance_checker.exceptions import DetectionError
from licence_compliance_checker.models.detection import DetectionRecord, LicenceMatch

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "license-detector"


class ExternalLicenceDetector(LicenceDetector):
    """Detector that runs `license-detector -f json` on all paths at once.

    The tool reports one JSON object per path:
    {"project": ..., "matches": [{"license", "confidence", "file"}], "error": ...}
    """

    def __init__(
        self,
        command: str = DEFAULT_COMMAND,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialize with the detector executable.

        Args:
            command: Name or path of the license-detector executable.
            timeout: Optional limit in seconds for the detector process.
        """
        self._command = command
        self._timeout = timeout

    def detect(self, paths: Sequence[str]) -> list[DetectionRecord]:
        """Run license-detector on the given paths.

        Args:
            paths: Project paths to inspect.

        Returns:
            One DetectionRecord per project reported by the tool.

        Raises:
            DetectionError: If the tool cannot be run, fails without
                output, or prints output that is not a detection report.
        """
        if not paths:
            return []

        args = [self._command, "-f", "json", *paths]
        logger.debug("Running licence detector: %s", args)
        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._timeout,
            )
        except FileNotFoundError as e:
            raise DetectionError(
                f"Licence detector '{self._command}' not found: {e}"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise DetectionError(
                f"Licence detector '{self._command}' timed out after {e.timeout}s"
            ) from e
        except OSError as e:
            raise DetectionError(
                f"Cannot run licence detector '{self._command}': {e}"
            ) from e

        if completed.returncode != 0 and not completed.stdout.strip():
            raise DetectionError(
                f"Licence detector '{self._command}' exited with code "
                f"{completed.returncode}: {completed.stderr.strip()}"
            )

        records = parse_detector_output(completed.stdout)
        logger.debug("Licence detection raw results: %s", records)
        return records


def parse_detector_output(output: str) -> list[DetectionRecord]:
    """Parse the JSON report of license-detector.

    Matches reported alongside an error are dropped.

    Args:
        output: JSON text printed by `license-detector -f json`.

    Returns:
        Detection records in report order.

    Raises:
        DetectionError: If the output is not a valid detection report.
    """
    try:
        payload = json.loads(output)
    except json.JSONDecodeError as e:
        raise DetectionError(f"Invalid licence detector output: {e}") from e

    if payload is None:
        return []
    if not isinstance(payload, list):
        raise DetectionError(
            "Invalid licence detector output: "
            f"expected a list of results, got {type(payload).__name__}"
        )

    try:
        return [_build_record(item) for item in payload]
    except (KeyError, TypeError, ValueError) as e:
        raise DetectionError(f"Invalid licence detector result: {e}") from e


def _build_record(item: Any) -> DetectionRecord:
    if not isinstance(item, dict):
        raise TypeError(f"expected an object, got {type(item).__name__}")

    error = item.get("error") or ""
    matches: list[LicenceMatch] = []
    if not error:
        matches = [
            LicenceMatch(licence=match["license"], confidence=match["confidence"])
            for match in item.get("matches") or []
        ]
    return DetectionRecord(
        project=item.get("project") or "",
        matches=matches,
        detection_error=error,
    )
