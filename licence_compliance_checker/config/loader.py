"""Configuration file discovery and loading for licence-compliance-checker."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml
from pydantic import ValidationError

from licence_compliance_checker.config.defaults import (
    DEFAULT_CONFIG_NAMES,
    get_default_config,
)
from licence_compliance_checker.exceptions import ConfigurationError
from licence_compliance_checker.models.config import CheckerConfig, ComplianceConfig


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the first DEFAULT_CONFIG_NAMES file present in start_dir.

    start_dir defaults to the working directory.
    """
    search_dir = start_dir or Path.cwd()
    candidates = [search_dir / name for name in DEFAULT_CONFIG_NAMES]
    return next((path for path in candidates if path.is_file()), None)


def _read_mapping(path: Path) -> dict[str, Any] | None:
    """Parse a YAML config file into its root mapping.

    Returns None when the file holds no document at all, i.e. it is blank
    or only has comments.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )
    return data


def load_config_file(path: Path) -> CheckerConfig:
    """Read one configuration file.

    Raises:
        ConfigurationError: On read errors, YAML errors, a root that is
            not a mapping, or keys and values CheckerConfig rejects.
    """
    data = _read_mapping(path)
    if not data:
        return get_default_config()

    try:
        return CheckerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {_describe(e)}"
        ) from e


def _describe(error: ValidationError) -> str:
    # "restricted_licences.0: Input should be a valid string; ..."
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
        for err in error.errors()
    )


def load_config(config_path: str | None = None) -> CheckerConfig:
    """Load the configuration for a run.

    An explicit config_path is always read. Without one, a config file in
    the working directory is used when present, and the defaults otherwise.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        return get_default_config()
    return load_config_file(path)


def build_compliance_config(
    file_config: CheckerConfig,
    restricted_licences: Iterable[str] = (),
    ignored_projects: Iterable[str] = (),
    overridden_project_licences: Mapping[str, str] | None = None,
) -> ComplianceConfig:
    """Merge command line values into the file configuration.

    Restricted licences and ignored projects from both sources are
    combined. Overrides given on the command line win over overrides
    for the same project in the file.

    Args:
        file_config: Configuration loaded from file.
        restricted_licences: Restricted licences from the command line.
        ignored_projects: Ignored projects from the command line.
        overridden_project_licences: Overrides from the command line.

    Returns:
        ComplianceConfig for the compliance engine.
    """
    overrides = dict(file_config.overridden_project_licences or {})
    overrides.update(overridden_project_licences or {})

    return ComplianceConfig(
        restricted_licences=frozenset(
            [*(file_config.restricted_licences or []), *restricted_licences]
        ),
        ignored_projects=frozenset(
            [*(file_config.ignored_projects or []), *ignored_projects]
        ),
        overridden_project_licences=overrides,
    )
