"""Default configuration values for licence-compliance-checker."""

from __future__ import annotations

from licence_compliance_checker.models.config import CheckerConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".licence-compliance.yaml", ".licence-compliance.yml"]

# Detector used when neither the command line nor the config file names one
DEFAULT_DETECTOR = "filesystem"


def get_default_config() -> CheckerConfig:
    """Get the default configuration.

    Returns:
        CheckerConfig with all defaults (all fields None).
    """
    return CheckerConfig()
