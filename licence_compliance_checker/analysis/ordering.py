"""Ordering of licence matches by probability."""
from __future__ import annotations

from typing import Optional, Sequence

from licence_compliance_checker.models.detection import DetectionRecord, LicenceMatch


def _match_sort_key(match: LicenceMatch) -> tuple[float, str]:
    return (-match.confidence, match.licence)


def sort_matches(matches: Sequence[LicenceMatch]) -> list[LicenceMatch]:
    """Order licence matches from most to least probable.

    Matches are sorted by descending confidence; matches with equal
    confidence are sorted by ascending licence name.

    Args:
        matches: Licence matches in any order.

    Returns:
        New list of matches, most probable first.
    """
    return sorted(matches, key=_match_sort_key)


def most_probable_licence(matches: Sequence[LicenceMatch]) -> Optional[str]:
    """Get the most probable licence among matches.

    Args:
        matches: Licence matches in any order.

    Returns:
        Licence name of the most probable match, or None if there are
        no matches.
    """
    if not matches:
        return None
    return min(matches, key=_match_sort_key).licence


def with_sorted_matches(record: DetectionRecord) -> DetectionRecord:
    """Copy a detection record with its matches ordered by probability.

    The given record is left untouched.
    """
    return record.model_copy(update={"matches": sort_matches(record.matches)})


def sort_records(records: Sequence[DetectionRecord]) -> list[DetectionRecord]:
    """Order detection records by project, ascending.

    Plain string comparison is used, so "B" sorts before "a". The sort
    is stable: records for the same project keep their relative order.
    """
    return sorted(records, key=lambda r: r.project)
