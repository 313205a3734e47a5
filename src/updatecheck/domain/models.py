from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from updatecheck.domain.errors import InvalidVersionError

_STRICT_VERSION = re.compile(r"^\s*(\d+)\.(\d+)\.(\d+)\.(\d+)\s*$")


class TargetPlatform(Enum):
    UNKNOWN = 0
    WINDOWS = 1
    UBUNTU = 2
    RHEL = 3
    DARWIN = 4

    @classmethod
    def current(cls, platform: str | None = None) -> "TargetPlatform":
        name = sys.platform if platform is None else platform
        if name.startswith("win"):
            return cls.WINDOWS
        if name.startswith("linux"):
            return cls.UBUNTU
        if name == "darwin":
            return cls.DARWIN
        return cls.UNKNOWN


class PackageType(Enum):
    UNKNOWN = 0
    ZIP = 1
    MSI = 2
    TAR = 3
    RPM = 4
    DEBIAN = 5


class ReleaseType(Enum):
    UNKNOWN = 0
    GENERAL_AVAILABILITY = 1
    BETA = 2
    ALPHA = 3
    PATCH = 4
    # used for testing builds
    DEVELOPMENT = 5


class Comparison(Enum):
    OLDER = -1
    EQUAL = 0
    NEWER = 1


@dataclass(frozen=True, order=True)
class VersionInfo:
    """A Major.Minor.Patch.Build version.

    Field order drives the dataclass ordering, so ``<`` and friends compare
    major first and build last.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    build: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch", "build"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidVersionError(f"Version {name} must be a non-negative integer. Received: {value!r}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}.{self.build}"

    def compare(self, other: "VersionInfo") -> Comparison:
        mine = (self.major, self.minor, self.patch, self.build)
        theirs = (other.major, other.minor, other.patch, other.build)
        if mine > theirs:
            return Comparison.NEWER
        if mine < theirs:
            return Comparison.OLDER
        return Comparison.EQUAL

    def is_newer_than(self, other: "VersionInfo") -> bool:
        return self.compare(other) is Comparison.NEWER

    @classmethod
    def parse(cls, text: str) -> "VersionInfo":
        m = _STRICT_VERSION.match(text or "")
        if not m:
            raise InvalidVersionError(f"Expected a version formatted as major.minor.patch.build. Received: {text!r}")
        return cls(*(int(g) for g in m.groups()))


@dataclass(frozen=True)
class InfoPageLink:
    url: str
    description: str


@dataclass(frozen=True)
class DownloadLink:
    url: str
    package_type: PackageType
    # display override, only set by schema 1.6 documents
    package_name: Optional[str] = None


@dataclass
class ReleaseInfo:
    version: VersionInfo = field(default_factory=VersionInfo)
    date: str = ""
    title: str = ""
    target_platforms: list[TargetPlatform] = field(default_factory=list)
    release_type: ReleaseType = ReleaseType.UNKNOWN
    tags: list[str] = field(default_factory=list)
    download_links: list[DownloadLink] = field(default_factory=list)
    info_links: list[InfoPageLink] = field(default_factory=list)

    def targets(self, platform: TargetPlatform) -> bool:
        return platform in self.target_platforms


@dataclass
class UpdateInfo:
    is_update_available: bool = False
    releases: list[ReleaseInfo] = field(default_factory=list)


@dataclass
class UpdatePackage15:
    url: str
    package_type: PackageType
    release_type: ReleaseType
    target_platforms: list[TargetPlatform] = field(default_factory=list)


@dataclass
class UpdateInfo15:
    """Flat single-release layout shared by schema 1.3 and 1.5 documents."""

    release_version: VersionInfo = field(default_factory=VersionInfo)
    release_date: str = ""
    release_description: str = ""
    available_packages: list[UpdatePackage15] = field(default_factory=list)
    info_links: list[InfoPageLink] = field(default_factory=list)


@dataclass
class CheckResult:
    """Outcome of one check: either a usable UpdateInfo or the error messages."""

    was_check_successful: bool
    update_info: UpdateInfo = field(default_factory=UpdateInfo)
    error_messages: list[str] = field(default_factory=list)

    @property
    def error_message(self) -> str:
        return " ".join(m.strip() for m in self.error_messages if m.strip())

    @classmethod
    def success(cls, update_info: UpdateInfo) -> "CheckResult":
        return cls(was_check_successful=True, update_info=update_info)

    @classmethod
    def failure(cls, messages: list[str]) -> "CheckResult":
        return cls(was_check_successful=False, error_messages=list(messages))
