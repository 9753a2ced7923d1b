"""Configuration Pydantic models for licence-compliance-checker."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DetectorName = Literal["filesystem", "license-detector"]


class CheckerConfig(BaseModel):
    """Configuration file contents for licence-compliance-checker.

    All fields are optional with None defaults to allow partial configuration.
    Command line options are merged on top of these values.
    """

    model_config = {"extra": "forbid"}

    restricted_licences: Optional[List[str]] = Field(
        default=None,
        description="Licences that fail the compliance check when found "
        "as a project's most probable licence.",
    )
    ignored_projects: Optional[List[str]] = Field(
        default=None,
        description="Projects whose licence is not checked for compliance.",
    )
    overridden_project_licences: Optional[Dict[str, str]] = Field(
        default=None,
        description="Licence to use instead of the detected one, by project.",
    )
    detector: Optional[DetectorName] = Field(
        default=None,
        description="Licence detector to use.",
    )
    confidence_threshold: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Minimum similarity for the filesystem detector to "
        "report a licence match.",
    )


class ComplianceConfig(BaseModel):
    """Immutable input of the compliance engine for a single run."""

    model_config = {"extra": "forbid", "frozen": True}

    restricted_licences: frozenset[str] = Field(
        default_factory=frozenset,
        description="Licences that make a project non-compliant",
    )
    ignored_projects: frozenset[str] = Field(
        default_factory=frozenset,
        description="Projects exempt from the compliance check",
    )
    overridden_project_licences: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Licence replacing detection findings, by project",
    )

    @field_validator("overridden_project_licences")
    @classmethod
    def _freeze_overrides(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        # Read-only copy of the given mapping
        return MappingProxyType(dict(value))
