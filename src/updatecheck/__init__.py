"""Check whether a newer version of a product is available.

Typical use::

    from updatecheck import VersionInfo, check_for_updates

    result = check_for_updates(
        VersionInfo(1, 2, 0, 0),
        "https://api.github.com/repos/owner/product/releases/latest",
        "Product_Updates.json",
    )
    if result.was_check_successful and result.update_info.is_update_available:
        ...
"""

from updatecheck.domain.models import (
    CheckResult,
    DownloadLink,
    InfoPageLink,
    PackageType,
    ReleaseInfo,
    ReleaseType,
    TargetPlatform,
    UpdateInfo,
    VersionInfo,
)
from updatecheck.manifest.tokens import package_type_to_string, release_type_to_string, target_platform_to_string
from updatecheck.services.update_service import UpdateCheckService, check_for_updates, get_api_version_info

__version__ = "2.0.0"

__all__ = [
    "CheckResult",
    "DownloadLink",
    "InfoPageLink",
    "PackageType",
    "ReleaseInfo",
    "ReleaseType",
    "TargetPlatform",
    "UpdateInfo",
    "VersionInfo",
    "package_type_to_string",
    "release_type_to_string",
    "target_platform_to_string",
    "UpdateCheckService",
    "check_for_updates",
    "get_api_version_info",
]
