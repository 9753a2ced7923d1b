"""Licence detection Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LicenceMatch(BaseModel):
    """A candidate licence identified for a project."""

    model_config = {"extra": "forbid", "frozen": True}

    licence: str = Field(description="Licence name or SPDX identifier")
    confidence: float = Field(
        description="Detection confidence, higher is more probable"
    )


class DetectionRecord(BaseModel):
    """Outcome of licence detection for a single project.

    One record is produced per requested project path. A non-empty
    detection_error means no licence could be identified; the matches
    are then irrelevant even when present.
    """

    model_config = {"extra": "forbid"}

    project: str = Field(description="Project path or name as requested")
    matches: list[LicenceMatch] = Field(
        default_factory=list,
        description="Candidate licences, in no particular order",
    )
    detection_error: str = Field(
        default="",
        description="Reason detection failed, empty when it succeeded",
    )

    @property
    def has_error(self) -> bool:
        """Check if detection failed for this project.

        Returns:
            True if detection_error is non-empty, False otherwise.
        """
        return bool(self.detection_error)
