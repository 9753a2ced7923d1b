"""Compliance analysis logic for licence-compliance-checker."""
from licence_compliance_checker.analysis.filtering import is_ignored
from licence_compliance_checker.analysis.ordering import (
    most_probable_licence,
    sort_matches,
    sort_records,
    with_sorted_matches,
)
from licence_compliance_checker.analysis.overrides import apply_licence_override
from licence_compliance_checker.analysis.policy import is_restricted

__all__ = [
    "apply_licence_override",
    "is_ignored",
    "is_restricted",
    "most_probable_licence",
    "sort_matches",
    "sort_records",
    "with_sorted_matches",
]
