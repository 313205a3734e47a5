from __future__ import annotations

from updatecheck.domain.models import DownloadLink, ReleaseInfo, UpdateInfo, UpdateInfo15
from updatecheck.manifest.tokens import release_type_to_string, target_platform_to_string


def upgrade_1_5_to_1_6(legacy: UpdateInfo15) -> UpdateInfo:
    """Regroup the flat 1.5 package list into one release per
    (target platforms, release type) pair.

    Releases appear in first-occurrence order of their pair; download links
    keep the package order.
    """
    update_info = UpdateInfo()
    by_key: dict[tuple, ReleaseInfo] = {}

    for package in legacy.available_packages:
        key = (tuple(package.target_platforms), package.release_type)
        release = by_key.get(key)
        if release is None:
            release = ReleaseInfo(
                version=legacy.release_version,
                date=legacy.release_date,
                title=legacy.release_description,
                target_platforms=list(package.target_platforms),
                release_type=package.release_type,
                tags=[target_platform_to_string(p) for p in package.target_platforms]
                + [release_type_to_string(package.release_type)],
                info_links=list(legacy.info_links),
            )
            by_key[key] = release
            update_info.releases.append(release)

        release.download_links.append(DownloadLink(url=package.url, package_type=package.package_type))

    return update_info
