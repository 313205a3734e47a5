from __future__ import annotations

import json

from updatecheck.domain.models import DownloadLink, ReleaseInfo, UpdateInfo
from updatecheck.manifest import messages
from updatecheck.manifest.tokens import package_type_to_string, release_type_to_string, target_platform_to_string


def _download_link(link: DownloadLink) -> dict:
    out = {"URL": link.url, "PackageType": package_type_to_string(link.package_type)}
    if link.package_name is not None:
        out["PackageName"] = link.package_name
    return out


def _release(release: ReleaseInfo) -> dict:
    v = release.version
    return {
        "ReleaseVersion": {"Major": v.major, "Minor": v.minor, "Patch": v.patch, "Build": v.build},
        "ReleaseDate": release.date,
        "ReleaseTitle": release.title,
        "ReleaseType": release_type_to_string(release.release_type),
        "ReleasePlatforms": [target_platform_to_string(p) for p in release.target_platforms],
        "ReleaseTags": list(release.tags),
        "InfoPageLinks": [{"URL": i.url, "Description": i.description} for i in release.info_links],
        "DownloadLinks": [_download_link(d) for d in release.download_links],
    }


def to_manifest(update_info: UpdateInfo) -> dict:
    """Schema 1.6 document for the releases of ``update_info``."""
    return {
        "SchemaVersion": messages.CURRENT_SCHEMA_VERSION,
        "Releases": [_release(r) for r in update_info.releases],
    }


def dumps_manifest(update_info: UpdateInfo, indent: int | None = 2) -> str:
    return json.dumps(to_manifest(update_info), ensure_ascii=False, indent=indent)
