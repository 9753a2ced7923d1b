"""Compliance result Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from licence_compliance_checker.models.detection import DetectionRecord


class ComplianceResults(BaseModel):
    """Partitioned outcome of a compliance check.

    Every detection record lands in exactly one bucket. Records within a
    bucket are ordered by project.
    """

    model_config = {"extra": "forbid"}

    compliant: list[DetectionRecord] = Field(
        default_factory=list,
        description="Projects whose most probable licence is not restricted",
    )
    restricted: list[DetectionRecord] = Field(
        default_factory=list,
        description="Projects whose most probable licence is restricted",
    )
    unidentifiable: list[DetectionRecord] = Field(
        default_factory=list,
        description="Projects whose licence could not be detected",
    )
    ignored: list[DetectionRecord] = Field(
        default_factory=list,
        description="Projects exempt from the compliance check",
    )

    @property
    def has_failures(self) -> bool:
        """Check if any project failed the compliance check.

        Returns:
            True if any project is restricted or unidentifiable.
        """
        return len(self.restricted) > 0 or len(self.unidentifiable) > 0

    @property
    def total(self) -> int:
        """Number of projects across all buckets."""
        return (
            len(self.compliant)
            + len(self.restricted)
            + len(self.unidentifiable)
            + len(self.ignored)
        )
