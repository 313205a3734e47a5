from .models import (
    CheckResult,
    Comparison,
    DownloadLink,
    InfoPageLink,
    PackageType,
    ReleaseInfo,
    ReleaseType,
    TargetPlatform,
    UpdateInfo,
    VersionInfo,
)
from .errors import (
    InvalidVersionError,
    ManifestError,
    TempDirectoryError,
    TransportError,
    UnsupportedSchemaError,
    UpdateCheckError,
)

__all__ = [
    "CheckResult",
    "Comparison",
    "DownloadLink",
    "InfoPageLink",
    "PackageType",
    "ReleaseInfo",
    "ReleaseType",
    "TargetPlatform",
    "UpdateInfo",
    "VersionInfo",
    "InvalidVersionError",
    "ManifestError",
    "TempDirectoryError",
    "TransportError",
    "UnsupportedSchemaError",
    "UpdateCheckError",
]
