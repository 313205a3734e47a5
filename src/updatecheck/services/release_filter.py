from __future__ import annotations

import logging

from updatecheck.domain.models import TargetPlatform, UpdateInfo, VersionInfo

log = logging.getLogger(__name__)


def filter_to_platform(update_info: UpdateInfo, platform: TargetPlatform) -> bool:
    """Drop, in place, the releases that do not target ``platform``.

    An unknown platform keeps every release. Returns True when releases
    remain that may be updates for this platform.
    """
    if platform is TargetPlatform.UNKNOWN:
        return True

    before = len(update_info.releases)
    update_info.releases[:] = [r for r in update_info.releases if r.targets(platform)]
    log.info("releases_filtered platform=%s kept=%d dropped=%d", platform.name, len(update_info.releases), before - len(update_info.releases))
    return bool(update_info.releases)


def find_newer_release(update_info: UpdateInfo, reference: VersionInfo) -> bool:
    """Flag ``is_update_available`` at the first release newer than ``reference``."""
    update_info.is_update_available = False
    for release in update_info.releases:
        if release.version.is_newer_than(reference):
            update_info.is_update_available = True
            log.info("update_available version=%s reference=%s", release.version, reference)
            break
    return update_info.is_update_available
