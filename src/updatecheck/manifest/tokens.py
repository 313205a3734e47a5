"""Wire tokens for platforms, package types and release types.

Schema 1.5 introduced this vocabulary and schema 1.6 reuses it unchanged.
Schema 1.3 only knows the combined ``TargetInfo`` tokens.
"""

from __future__ import annotations

from typing import Optional

from updatecheck.domain.models import PackageType, ReleaseType, TargetPlatform
from updatecheck.manifest import messages

UNKNOWN = "Unknown"

_PLATFORMS = {
    "Windows": TargetPlatform.WINDOWS,
    "Ubuntu": TargetPlatform.UBUNTU,
    "RHEL": TargetPlatform.RHEL,
    "Darwin": TargetPlatform.DARWIN,
}

_PACKAGE_TYPES = {
    "ZIP": PackageType.ZIP,
    "MSI": PackageType.MSI,
    "TAR": PackageType.TAR,
    "RPM": PackageType.RPM,
    "Debian": PackageType.DEBIAN,
}

_RELEASE_TYPES = {
    "GA": ReleaseType.GENERAL_AVAILABILITY,
    "Beta": ReleaseType.BETA,
    "Alpha": ReleaseType.ALPHA,
    "Patch": ReleaseType.PATCH,
    "Development": ReleaseType.DEVELOPMENT,
}

# schema 1.3 TargetInfo -> (platform, package type)
_TARGET_INFO_1_3 = {
    "Windows_ZIP": (TargetPlatform.WINDOWS, PackageType.ZIP),
    "Windows_MSI": (TargetPlatform.WINDOWS, PackageType.MSI),
    "Linux_TAR": (TargetPlatform.UBUNTU, PackageType.TAR),
    "Linux_RPM": (TargetPlatform.UBUNTU, PackageType.RPM),
    "Linux_Debian": (TargetPlatform.UBUNTU, PackageType.DEBIAN),
}


def _lookup(table: dict, token: object):
    if not isinstance(token, str):
        return None
    return table.get(token)


def parse_platform(token: object) -> Optional[TargetPlatform]:
    return _lookup(_PLATFORMS, token)


def parse_package_type(token: object) -> Optional[PackageType]:
    return _lookup(_PACKAGE_TYPES, token)


def parse_release_type(token: object) -> Optional[ReleaseType]:
    return _lookup(_RELEASE_TYPES, token)


def parse_target_info(token: object) -> Optional[tuple[TargetPlatform, PackageType]]:
    return _lookup(_TARGET_INFO_1_3, token)


def parse_platform_list(tokens: object, errors: list[str], tag: str) -> Optional[list[TargetPlatform]]:
    """Strictly parse a non-empty list of platform tokens.

    Stops at the first unrecognized token; ``tag`` names the field in the
    error message.
    """
    if not isinstance(tokens, list):
        errors.append(messages.invalid_value(tag))
        return None
    if not tokens:
        errors.append(messages.empty_list(tag))
        return None

    platforms: list[TargetPlatform] = []
    for token in tokens:
        platform = parse_platform(token)
        if platform is None:
            errors.append(messages.invalid_value(tag))
            return None
        platforms.append(platform)
    return platforms


def _reverse(table: dict, value) -> str:
    for token, member in table.items():
        if member is value:
            return token
    return UNKNOWN


def target_platform_to_string(platform: TargetPlatform) -> str:
    return _reverse(_PLATFORMS, platform)


def package_type_to_string(package_type: PackageType) -> str:
    return _reverse(_PACKAGE_TYPES, package_type)


def release_type_to_string(release_type: ReleaseType) -> str:
    return _reverse(_RELEASE_TYPES, release_type)
