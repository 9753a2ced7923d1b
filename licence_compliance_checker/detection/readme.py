"""README licence mention extraction."""
import re
from typing import Optional
from urllib.parse import unquote

# Common README file names to try
README_FILES = ["README.md", "README.rst", "README.txt", "README"]

# Licence aliases mapping common variations to SPDX identifiers
LICENCE_ALIASES: dict[str, str] = {
    "mit": "MIT",
    "apache 2.0": "Apache-2.0",
    "apache 2": "Apache-2.0",
    "apache-2.0": "Apache-2.0",
    "apache2": "Apache-2.0",
    "gpl-3.0": "GPL-3.0",
    "gpl 3.0": "GPL-3.0",
    "gplv3": "GPL-3.0",
    "gpl-2.0": "GPL-2.0",
    "gpl 2.0": "GPL-2.0",
    "gplv2": "GPL-2.0",
    "agpl-3.0": "AGPL-3.0",
    "lgpl-3.0": "LGPL-3.0",
    "lgpl-2.1": "LGPL-2.1",
    "bsd-3-clause": "BSD-3-Clause",
    "bsd 3-clause": "BSD-3-Clause",
    "bsd-2-clause": "BSD-2-Clause",
    "bsd 2-clause": "BSD-2-Clause",
    "isc": "ISC",
    "mpl-2.0": "MPL-2.0",
    "mpl 2.0": "MPL-2.0",
    "unlicense": "Unlicense",
}

_SPDX_PATTERN = re.compile(
    r"SPDX-License-Identifier:\s*([A-Za-z0-9\-\.+]+)", re.IGNORECASE
)
_BADGE_PATTERN = re.compile(
    r"img\.shields\.io/badge/[Ll]icen[sc]e-([A-Za-z0-9\-\.%]+)-"
)
_COLON_PATTERN = re.compile(r"[Ll]icen[sc]e:\s*([A-Za-z0-9\-\.]+)")
_LICENSED_UNDER_PATTERN = re.compile(
    r"licen[sc]ed\s+under\s+(?:the\s+)?"
    r"(MIT|Apache(?:\s+2\.0|\-2\.0)?|A?GPL(?:\-?[23]\.0)?|LGPL(?:\-?[23]\.[01])?|"
    r"BSD(?:\-?[23]\-Clause)?|ISC|MPL(?:\-?2\.0)?|Unlicense)",
    re.IGNORECASE,
)


def find_licence_mention(content: str) -> Optional[str]:
    """Find an explicit licence mention in README content.

    Patterns are tried in order of reliability: SPDX identifier,
    shields.io badge, "License: X", then "Licensed under X".

    Args:
        content: The README file content.

    Returns:
        SPDX licence identifier, or None if no known licence is mentioned.
    """
    if not content:
        return None

    spdx_match = _SPDX_PATTERN.search(content)
    if spdx_match:
        return normalize_licence_id(spdx_match.group(1))

    badge_match = _BADGE_PATTERN.search(content)
    if badge_match:
        # Badges are URL encoded, e.g. Apache%202.0
        return normalize_licence_id(unquote(badge_match.group(1)))

    colon_match = _COLON_PATTERN.search(content)
    if colon_match:
        licence = normalize_licence_id(colon_match.group(1))
        if licence is not None:
            return licence

    licensed_under_match = _LICENSED_UNDER_PATTERN.search(content)
    if licensed_under_match:
        return normalize_licence_id(licensed_under_match.group(1))

    return None


def normalize_licence_id(raw_licence: str) -> Optional[str]:
    """Normalize a raw licence mention to an SPDX identifier.

    Args:
        raw_licence: The licence string as written in the README.

    Returns:
        SPDX licence identifier, or None if unknown.
    """
    cleaned = " ".join(raw_licence.strip().lower().split())
    if cleaned in LICENCE_ALIASES:
        return LICENCE_ALIASES[cleaned]

    if "apache" in cleaned and "2" in cleaned:
        return "Apache-2.0"
    if "lgpl" in cleaned:
        return "LGPL-3.0" if "3" in cleaned else "LGPL-2.1"
    if "agpl" in cleaned:
        return "AGPL-3.0"
    if "gpl" in cleaned:
        if "3" in cleaned:
            return "GPL-3.0"
        if "2" in cleaned:
            return "GPL-2.0"
    if "bsd" in cleaned:
        return "BSD-2-Clause" if "2" in cleaned else "BSD-3-Clause"
    if "mpl" in cleaned and "2" in cleaned:
        return "MPL-2.0"

    return None
