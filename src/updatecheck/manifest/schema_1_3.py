"""Schema 1.3: the original flat layout.

```
{
  "SchemaVersion": "1.3",
  "VersionString": "2.1.0.12",
  "ReleaseDate": "2019-03-01",
  "Description": "...",
  "InfoPageURL": [{"URL": "...", "Description": "..."}],
  "DownloadURL": [{"URL": "...", "TargetInfo": "Windows_ZIP"}]
}
```
"""

from __future__ import annotations

import re
from typing import Any, Optional

from updatecheck.domain.errors import ManifestError
from updatecheck.domain.models import ReleaseType, UpdateInfo15, UpdatePackage15, VersionInfo
from updatecheck.manifest import fields, messages, tokens

_SCANNED_VERSION = re.compile(r"\s*(\d+)(?:\.\s*(\d+)(?:\.\s*(\d+)(?:\.\s*(\d+))?)?)?")


def split_version_string(text: str) -> Optional[VersionInfo]:
    """Scan up to four dot separated numbers from the start of ``text``.

    Trailing components that are not present are zero, so "2.3" is 2.3.0.0.
    Returns None when not even the major number can be read.
    """
    if not text:
        return None
    m = _SCANNED_VERSION.match(text)
    if not m:
        return None
    return VersionInfo(*(int(g) if g is not None else 0 for g in m.groups()))


def parse_schema_1_3(doc: dict[str, Any]) -> UpdateInfo15:
    errors: list[str] = []
    info = UpdateInfo15()

    version_string = fields.get_str(doc, "VersionString", errors)
    if version_string is not None:
        version = split_version_string(version_string)
        if version is None:
            errors.append(messages.INVALID_RELEASE_VERSION)
        else:
            info.release_version = version

    date = fields.get_str(doc, "ReleaseDate", errors)
    if date is not None:
        info.release_date = date

    description = fields.get_str(doc, "Description", errors)
    if description is not None:
        info.release_description = description

    info_pages = fields.get_list(doc, "InfoPageURL", errors)
    if info_pages is not None:
        info.info_links = fields.parse_info_links(info_pages, "InfoPageURL", errors)

    downloads = fields.get_list(doc, "DownloadURL", errors)
    if downloads is not None:
        for entry in downloads:
            url = entry.get("URL") if isinstance(entry, dict) else None
            target = entry.get("TargetInfo") if isinstance(entry, dict) else None
            if not isinstance(url, str) or target is None:
                errors.append(messages.incomplete("DownloadURL"))
                continue

            resolved = tokens.parse_target_info(target)
            if resolved is None:
                errors.append(messages.invalid_value("TargetInfo"))
                continue

            platform, package_type = resolved
            # 1.3 predates release types; everything published then was GA.
            info.available_packages.append(
                UpdatePackage15(
                    url=url,
                    package_type=package_type,
                    release_type=ReleaseType.GENERAL_AVAILABILITY,
                    target_platforms=[platform],
                )
            )

    if errors:
        raise ManifestError(errors)
    return info
