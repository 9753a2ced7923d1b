"""Constants for licence-compliance-checker."""

# Exit codes
EXIT_SUCCESS = 0  # All projects compliant
EXIT_ISSUES = 1  # Restricted or unidentifiable projects found
EXIT_ERROR = 2  # Check failed due to error

# Confidence given to a licence forced through an override
OVERRIDE_CONFIDENCE = 0.0

# Error recorded for a detection result that carries neither matches nor error
NO_MATCH_ERROR = "no licence match found"
