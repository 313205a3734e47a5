"""Schema 1.5: one release, with release type and platforms per download link."""

from __future__ import annotations

from typing import Any, Optional

from updatecheck.domain.errors import ManifestError
from updatecheck.domain.models import UpdateInfo15, UpdatePackage15
from updatecheck.manifest import fields, messages, tokens

_LINK_KEYS = ("URL", "TargetPlatforms", "PackageType", "ReleaseType")


def _parse_package(entry: Any, errors: list[str]) -> Optional[UpdatePackage15]:
    if not isinstance(entry, dict):
        errors.append(messages.incomplete("DownloadLinks"))
        return None

    # only the first missing key of a link is reported
    for key in _LINK_KEYS:
        if key not in entry:
            errors.append(messages.missing(key))
            return None

    release_type = tokens.parse_release_type(entry["ReleaseType"])
    if release_type is None:
        errors.append(messages.invalid_value("ReleaseType"))
        return None

    package_type = tokens.parse_package_type(entry["PackageType"])
    if package_type is None:
        errors.append(messages.invalid_value("PackageType"))
        return None

    platforms = tokens.parse_platform_list(entry["TargetPlatforms"], errors, "TargetPlatforms")
    if platforms is None:
        return None

    url = entry["URL"]
    if not isinstance(url, str):
        errors.append(messages.invalid_value("URL"))
        return None

    return UpdatePackage15(
        url=url,
        package_type=package_type,
        release_type=release_type,
        target_platforms=platforms,
    )


def parse_schema_1_5(doc: dict[str, Any]) -> UpdateInfo15:
    errors: list[str] = []
    info = UpdateInfo15()

    if not fields.has(doc, "ReleaseVersion"):
        errors.append(messages.missing("ReleaseVersion"))
    else:
        version = fields.parse_release_version(doc["ReleaseVersion"], errors)
        if version is not None:
            info.release_version = version

    date = fields.get_str(doc, "ReleaseDate", errors)
    if date is not None:
        info.release_date = date

    description = fields.get_str(doc, "ReleaseDescription", errors)
    if description is not None:
        info.release_description = description

    info_pages = fields.get_list(doc, "InfoPageLinks", errors)
    if info_pages is not None:
        info.info_links = fields.parse_info_links(info_pages, "InfoPageLinks", errors)

    downloads = fields.get_list(doc, "DownloadLinks", errors)
    if downloads is not None:
        for entry in downloads:
            package = _parse_package(entry, errors)
            if package is not None:
                info.available_packages.append(package)

    if errors:
        raise ManifestError(errors)
    return info
