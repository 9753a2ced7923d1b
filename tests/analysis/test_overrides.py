"""Tests for licence overrides."""

from licence_compliance_checker.analysis.overrides import apply_licence_override
from licence_compliance_checker.models.config import ComplianceConfig
from licence_compliance_checker.models.detection import LicenceMatch
from tests.fakes import a_project_with_licence, a_project_with_no_licence


class TestApplyLicenceOverride:
    """Tests for apply_licence_override function."""

    def test_replaces_matches(self) -> None:
        """Test that the override replaces every detected match."""
        record = a_project_with_licence("project1", {"MIT": 0.9, "BSD3": 0.1})
        config = ComplianceConfig(overridden_project_licences={"project1": "BSD"})

        result = apply_licence_override(record, config)

        assert result.project == "project1"
        assert result.matches == [LicenceMatch(licence="BSD", confidence=0.0)]

    def test_clears_detection_error(self) -> None:
        """Test that an override resolves a failed detection."""
        record = a_project_with_no_licence("project1")
        config = ComplianceConfig(overridden_project_licences={"project1": "MIT"})

        result = apply_licence_override(record, config)

        assert result.detection_error == ""
        assert not result.has_error
        assert [m.licence for m in result.matches] == ["MIT"]

    def test_no_override(self) -> None:
        """Test that records without override are returned unchanged."""
        record = a_project_with_licence("project1", {"MIT": 0.9})
        config = ComplianceConfig(overridden_project_licences={"project2": "BSD"})

        assert apply_licence_override(record, config) is record

    def test_input_not_modified(self) -> None:
        """Test that the given record keeps its findings."""
        record = a_project_with_licence("project1", {"MIT": 0.9})
        config = ComplianceConfig(overridden_project_licences={"project1": "BSD"})

        apply_licence_override(record, config)

        assert [m.licence for m in record.matches] == ["MIT"]
