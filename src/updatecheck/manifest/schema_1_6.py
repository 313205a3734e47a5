"""Schema 1.6: the current layout, a list of self-contained releases."""

from __future__ import annotations

from typing import Any, Optional

from updatecheck.domain.errors import ManifestError
from updatecheck.domain.models import DownloadLink, ReleaseInfo, UpdateInfo
from updatecheck.manifest import fields, messages, tokens


def _parse_download_link(entry: Any, errors: list[str]) -> Optional[DownloadLink]:
    if not fields.has(entry, "URL"):
        errors.append(messages.missing("URL"))
        return None
    if "PackageType" not in entry:
        errors.append(messages.missing("PackageType"))
        return None

    package_type = tokens.parse_package_type(entry["PackageType"])
    if package_type is None:
        errors.append(messages.invalid_value("PackageType"))
        return None

    url = entry["URL"]
    package_name = entry.get("PackageName")
    if not isinstance(url, str):
        errors.append(messages.invalid_value("URL"))
        return None
    if package_name is not None and not isinstance(package_name, str):
        errors.append(messages.invalid_value("PackageName"))
        return None

    return DownloadLink(url=url, package_type=package_type, package_name=package_name)


def _parse_release(entry: Any, errors: list[str]) -> ReleaseInfo:
    release = ReleaseInfo()

    if not fields.has(entry, "ReleaseVersion"):
        errors.append(messages.missing("ReleaseVersion"))
    else:
        version = fields.parse_release_version(entry["ReleaseVersion"], errors)
        if version is not None:
            release.version = version

    date = fields.get_str(entry, "ReleaseDate", errors)
    if date is not None:
        release.date = date

    title = fields.get_str(entry, "ReleaseTitle", errors)
    if title is not None:
        release.title = title

    release_type_token = fields.get_str(entry, "ReleaseType", errors)
    if release_type_token is not None:
        release_type = tokens.parse_release_type(release_type_token)
        if release_type is None:
            errors.append(messages.invalid_value("ReleaseType"))
        else:
            release.release_type = release_type

    if not fields.has(entry, "ReleasePlatforms"):
        errors.append(messages.missing("ReleasePlatforms"))
    else:
        platforms = tokens.parse_platform_list(entry["ReleasePlatforms"], errors, "ReleasePlatforms")
        if platforms is not None:
            release.target_platforms = platforms

    if not fields.has(entry, "ReleaseTags"):
        errors.append(messages.missing("ReleaseTags"))
    else:
        tags = entry["ReleaseTags"]
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            errors.append(messages.invalid_value("ReleaseTags"))
        else:
            release.tags = list(tags)

    info_pages = fields.get_list(entry, "InfoPageLinks", errors)
    if info_pages is not None:
        release.info_links = fields.parse_info_links(info_pages, "InfoPageLinks", errors)

    # Download links are only looked at while the document is still clean.
    if not errors:
        downloads = fields.get_list(entry, "DownloadLinks", errors)
        if downloads is not None:
            for link_entry in downloads:
                link = _parse_download_link(link_entry, errors)
                if link is not None:
                    release.download_links.append(link)

    return release


def parse_schema_1_6(doc: dict[str, Any]) -> UpdateInfo:
    errors: list[str] = []
    update_info = UpdateInfo()

    releases = fields.get_list(doc, "Releases", errors)
    if releases is not None:
        for entry in releases:
            update_info.releases.append(_parse_release(entry, errors))

    if errors:
        raise ManifestError(errors)
    return update_info
