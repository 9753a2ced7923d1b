"""Tests for configuration loading."""

from pathlib import Path

import pytest

from licence_compliance_checker.config.loader import (
    build_compliance_config,
    find_config_file,
    load_config,
    load_config_file,
)
from licence_compliance_checker.exceptions import ConfigurationError
from licence_compliance_checker.models.config import CheckerConfig


class TestFindConfigFile:
    """Tests for find_config_file function."""

    def test_finds_yaml(self, tmp_path: Path) -> None:
        """Test that .licence-compliance.yaml is found."""
        config_file = tmp_path / ".licence-compliance.yaml"
        config_file.write_text("restricted_licences: [MIT]\n")

        assert find_config_file(tmp_path) == config_file

    def test_prefers_yaml_over_yml(self, tmp_path: Path) -> None:
        """Test that .yaml wins when both files exist."""
        (tmp_path / ".licence-compliance.yml").write_text("")
        (tmp_path / ".licence-compliance.yaml").write_text("")

        assert find_config_file(tmp_path) == tmp_path / ".licence-compliance.yaml"

    def test_finds_yml(self, tmp_path: Path) -> None:
        """Test that .licence-compliance.yml is found."""
        (tmp_path / ".licence-compliance.yml").write_text("")

        assert find_config_file(tmp_path) == tmp_path / ".licence-compliance.yml"

    def test_not_found(self, tmp_path: Path) -> None:
        """Test that None is returned without config file."""
        assert find_config_file(tmp_path) is None

    def test_ignores_directories(self, tmp_path: Path) -> None:
        """Test that only regular files are config files."""
        (tmp_path / ".licence-compliance.yaml").mkdir()
        (tmp_path / ".licence-compliance.yml").write_text("")

        assert find_config_file(tmp_path) == tmp_path / ".licence-compliance.yml"


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_valid_file(self, tmp_path: Path) -> None:
        """Test loading a complete configuration."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "restricted_licences:\n"
            "  - GPL-3.0\n"
            "  - AGPL-3.0\n"
            "ignored_projects:\n"
            "  - vendor/internal\n"
            "overridden_project_licences:\n"
            "  vendor/foo: MIT\n"
            "detector: filesystem\n"
            "confidence_threshold: 0.8\n"
        )

        config = load_config_file(config_file)

        assert config.restricted_licences == ["GPL-3.0", "AGPL-3.0"]
        assert config.ignored_projects == ["vendor/internal"]
        assert config.overridden_project_licences == {"vendor/foo": "MIT"}
        assert config.detector == "filesystem"
        assert config.confidence_threshold == 0.8

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file gives the defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("   \n")

        assert load_config_file(config_file) == CheckerConfig()

    def test_comments_only(self, tmp_path: Path) -> None:
        """Test that a file with only comments gives the defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("# nothing yet\n")

        assert load_config_file(config_file) == CheckerConfig()

    def test_empty_mapping(self, tmp_path: Path) -> None:
        """Test that an empty mapping gives the defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}\n")

        assert load_config_file(config_file) == CheckerConfig()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that YAML syntax errors are reported."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("restricted_licences: [MIT\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML syntax"):
            load_config_file(config_file)

    def test_root_not_mapping(self, tmp_path: Path) -> None:
        """Test that a non-mapping root is rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- MIT\n")

        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_config_file(config_file)

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Test that unknown keys are reported with their location."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("restricted_licenses: [MIT]\n")

        with pytest.raises(ConfigurationError, match="restricted_licenses"):
            load_config_file(config_file)

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Test that invalid values are reported."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("confidence_threshold: 2\n")

        with pytest.raises(ConfigurationError, match="confidence_threshold"):
            load_config_file(config_file)

    def test_unreadable_file(self, tmp_path: Path) -> None:
        """Test that read errors become configuration errors."""
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config_file(tmp_path / "missing.yaml")


class TestLoadConfig:
    """Tests for load_config function."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test loading the given file."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("restricted_licences: [MIT]\n")

        assert load_config(str(config_file)).restricted_licences == ["MIT"]

    def test_discovers_in_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the file in the working directory is used."""
        (tmp_path / ".licence-compliance.yml").write_text("ignored_projects: [x]\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().ignored_projects == ["x"]

    def test_defaults_without_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that defaults are used when no file exists."""
        monkeypatch.chdir(tmp_path)

        assert load_config() == CheckerConfig()


class TestBuildComplianceConfig:
    """Tests for build_compliance_config function."""

    def test_defaults(self) -> None:
        """Test that an empty configuration stays empty."""
        config = build_compliance_config(CheckerConfig())

        assert config.restricted_licences == frozenset()
        assert config.ignored_projects == frozenset()
        assert config.overridden_project_licences == {}

    def test_combines_lists(self) -> None:
        """Test that file and command line values are combined."""
        file_config = CheckerConfig(
            restricted_licences=["GPL-3.0"], ignored_projects=["a"]
        )

        config = build_compliance_config(file_config, ["MIT", "GPL-3.0"], ["b"])

        assert config.restricted_licences == frozenset({"GPL-3.0", "MIT"})
        assert config.ignored_projects == frozenset({"a", "b"})

    def test_command_line_override_wins(self) -> None:
        """Test that command line overrides replace file overrides."""
        file_config = CheckerConfig(
            overridden_project_licences={"a": "MIT", "b": "BSD"}
        )

        config = build_compliance_config(
            file_config, overridden_project_licences={"a": "Apache-2.0"}
        )

        assert config.overridden_project_licences == {"a": "Apache-2.0", "b": "BSD"}
