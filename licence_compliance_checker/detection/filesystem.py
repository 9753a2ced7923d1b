"""Local filesystem licence detector.

Identifies licences from the licence files at the top of each project
directory by fuzzy matching (difflib.SequenceMatcher) against known
templates, falling back to explicit licence mentions in README files.
"""
from __future__ import annotations

import logging
from difflib import SequenceMatcher
from pathlib import Path
from typing import Sequence

from licence_compliance_checker.detection.base import LicenceDetector
from licence_compliance_checker.detection.readme import (
    README_FILES,
    find_licence_mention,
)
from licence_compliance_checker.detection.templates import (
    LICENCE_TEMPLATES,
    normalize_licence_text,
)
from licence_compliance_checker.models.detection import DetectionRecord, LicenceMatch

logger = logging.getLogger(__name__)

# Minimum similarity for a template to be reported as a match
DEFAULT_THRESHOLD = 0.75

# README mentions are unverified, so they rank below any template match
README_MENTION_CONFIDENCE = 0.5

# File name prefixes (lowercase) identifying licence files
LICENCE_FILE_PREFIXES = ("license", "licence", "copying", "unlicense")
LICENCE_FILE_NAMES = ("copyright",)

NO_LICENCE_FOUND = "no license file was found"


def is_licence_file(name: str) -> bool:
    """Check whether a file name looks like a licence file.

    Matches LICENSE, LICENCE.txt, COPYING, LICENSE-MIT and the like.
    """
    lowered = name.lower()
    return lowered.startswith(LICENCE_FILE_PREFIXES) or lowered in LICENCE_FILE_NAMES


class FilesystemLicenceDetector(LicenceDetector):
    """Detector that reads licence files from local project directories."""

    def __init__(self, threshold: float = DEFAULT_THRESHOLD) -> None:
        """Initialize with pre-normalized licence templates.

        Args:
            threshold: Minimum similarity (0.0-1.0) for a licence
                template to be reported as a match.
        """
        self._threshold = threshold
        self._templates: dict[str, list[str]] = {
            licence: normalize_licence_text(template)
            for licence, template in LICENCE_TEMPLATES.items()
        }

    @property
    def threshold(self) -> float:
        return self._threshold

    def detect(self, paths: Sequence[str]) -> list[DetectionRecord]:
        """Detect licences of local project directories.

        Args:
            paths: Project directory paths.

        Returns:
            One DetectionRecord per path, in the order given.
        """
        return [self._detect_project(path) for path in paths]

    def _detect_project(self, path: str) -> DetectionRecord:
        directory = Path(path)
        if not directory.exists():
            return DetectionRecord(
                project=path, detection_error=f"{path}: no such file or directory"
            )
        if not directory.is_dir():
            return DetectionRecord(
                project=path, detection_error=f"{path}: not a directory"
            )

        try:
            matches = self._match_licence_files(directory)
            if not matches:
                matches = self._match_readme(directory)
        except OSError as e:
            logger.debug("Cannot read licence of project '%s': %s", path, e)
            return DetectionRecord(project=path, detection_error=str(e))

        if not matches:
            return DetectionRecord(project=path, detection_error=NO_LICENCE_FOUND)
        return DetectionRecord(project=path, matches=matches)

    def _match_licence_files(self, directory: Path) -> list[LicenceMatch]:
        """Match every licence file of a directory against the templates.

        Each licence keeps its best score across files.
        """
        best: dict[str, float] = {}
        licence_files = sorted(
            p for p in directory.iterdir() if p.is_file() and is_licence_file(p.name)
        )
        for licence_file in licence_files:
            content = licence_file.read_text(encoding="utf-8", errors="replace")
            for licence, score in self.score(content).items():
                if score > best.get(licence, 0.0):
                    best[licence] = score
            logger.debug("Scored licence file '%s': %s", licence_file, best)

        return [
            LicenceMatch(licence=licence, confidence=score)
            for licence, score in best.items()
        ]

    def _match_readme(self, directory: Path) -> list[LicenceMatch]:
        for name in README_FILES:
            readme = directory / name
            if not readme.is_file():
                continue
            licence = find_licence_mention(
                readme.read_text(encoding="utf-8", errors="replace")
            )
            if licence is not None:
                return [
                    LicenceMatch(licence=licence, confidence=README_MENTION_CONFIDENCE)
                ]
        return []

    def score(self, content: str) -> dict[str, float]:
        """Score licence text against every known template.

        The text is compared word by word against each template, using
        only as many leading words of the text as the template holds.

        Args:
            content: Licence file content.

        Returns:
            Similarity (0.0-1.0) by licence, for licences reaching the
            threshold.
        """
        words = normalize_licence_text(content)
        if not words:
            return {}

        scores: dict[str, float] = {}
        for licence, template in self._templates.items():
            ratio = SequenceMatcher(
                None, words[: len(template)], template, autojunk=False
            ).ratio()
            if ratio >= self._threshold:
                scores[licence] = round(ratio, 4)
        return scores
