"""Field extraction helpers shared by the schema parsers.

Every helper appends a message to ``errors`` instead of raising, so a parser
can report all the problems of a document in one pass. A ``None`` return
means the field could not be used.
"""

from __future__ import annotations

from typing import Any, Optional

from updatecheck.domain.models import InfoPageLink, VersionInfo
from updatecheck.manifest import messages

VERSION_KEYS = ("Major", "Minor", "Patch", "Build")


def has(entry: Any, key: str) -> bool:
    return isinstance(entry, dict) and key in entry


def get_str(entry: Any, key: str, errors: list[str]) -> Optional[str]:
    if not has(entry, key):
        errors.append(messages.missing(key))
        return None
    value = entry[key]
    if not isinstance(value, str):
        errors.append(messages.invalid_value(key))
        return None
    return value


def get_list(entry: Any, key: str, errors: list[str]) -> Optional[list]:
    """Fetch a required, non-empty list."""
    if not has(entry, key):
        errors.append(messages.missing(key))
        return None
    value = entry[key]
    if not isinstance(value, list):
        errors.append(messages.invalid_value(key))
        return None
    if not value:
        errors.append(messages.empty_list(key))
        return None
    return value


def parse_release_version(value: Any, errors: list[str]) -> Optional[VersionInfo]:
    # Any subset of the components may be given; absent ones are zero.
    if not isinstance(value, dict) or not any(k in value for k in VERSION_KEYS):
        errors.append(messages.INVALID_RELEASE_VERSION)
        return None

    parts = []
    for key in VERSION_KEYS:
        part = value.get(key, 0)
        if isinstance(part, bool) or not isinstance(part, int) or part < 0:
            errors.append(messages.INVALID_RELEASE_VERSION)
            return None
        parts.append(part)
    return VersionInfo(*parts)


def parse_info_links(items: list, tag: str, errors: list[str]) -> list[InfoPageLink]:
    links = []
    for item in items:
        url = item.get("URL") if isinstance(item, dict) else None
        description = item.get("Description") if isinstance(item, dict) else None
        if isinstance(url, str) and isinstance(description, str):
            links.append(InfoPageLink(url=url, description=description))
        else:
            errors.append(messages.incomplete(tag))
    return links
