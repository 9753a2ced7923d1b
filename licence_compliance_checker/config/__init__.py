"""Configuration handling for licence-compliance-checker."""
from __future__ import annotations

from licence_compliance_checker.config.defaults import (
    DEFAULT_CONFIG_NAMES,
    DEFAULT_DETECTOR,
    get_default_config,
)
from licence_compliance_checker.config.loader import (
    build_compliance_config,
    find_config_file,
    load_config,
    load_config_file,
)
from licence_compliance_checker.models.config import CheckerConfig, ComplianceConfig

__all__ = [
    "CheckerConfig",
    "ComplianceConfig",
    "DEFAULT_CONFIG_NAMES",
    "DEFAULT_DETECTOR",
    "build_compliance_config",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
