"""Custom exceptions for licence-compliance-checker."""


class LicenceCheckerError(Exception):
    """Base exception for all licence-compliance-checker errors."""

    pass


class ConfigurationError(LicenceCheckerError):
    """Exception raised when configuration is invalid."""

    pass


class DetectionError(LicenceCheckerError):
    """Exception raised when the licence detector fails as a whole."""

    pass
