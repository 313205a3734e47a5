from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import logging
import os
import sys

from updatecheck.domain.errors import TempDirectoryError
from updatecheck.domain.models import TargetPlatform
from updatecheck.manifest import messages

log = logging.getLogger(__name__)

ASSUME_VERSION_ENV = "RDTS_UPDATER_ASSUME_VERSION"
HELPER_ENV = "UPDATECHECK_HELPER"
HTTP_TIMEOUT_ENV = "UPDATECHECK_HTTP_TIMEOUT"

_POSIX_DEFAULT_TEMP = "/tmp"
DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class AppPaths:
    base_dir: Path
    logs_dir: Path


@dataclass(frozen=True)
class UpdateCheckSettings:
    platform: TargetPlatform = field(default_factory=TargetPlatform.current)
    assume_version_env: str = ASSUME_VERSION_ENV
    # external download helper; None means download in-process with requests
    helper_command: str | None = None
    poll_interval: float = 0.1
    terminate_timeout: float = 2.0
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "UpdateCheckSettings":
        env = os.environ if environ is None else environ
        return cls(
            helper_command=env.get(HELPER_ENV) or None,
            http_timeout=_parse_timeout(env.get(HTTP_TIMEOUT_ENV, "")),
        )


def _parse_timeout(raw: str) -> float:
    raw = raw.strip()
    if not raw:
        return DEFAULT_HTTP_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        log.warning("http_timeout_unparsable value=%r fallback=%s", raw, DEFAULT_HTTP_TIMEOUT)
        return DEFAULT_HTTP_TIMEOUT
    if not timeout > 0:
        log.warning("http_timeout_not_positive value=%r fallback=%s", raw, DEFAULT_HTTP_TIMEOUT)
        return DEFAULT_HTTP_TIMEOUT
    return timeout


def _windows_appdata() -> Path:
    return Path(os.environ.get("APPDATA", str(Path.home() / "AppData" / "Roaming")))


def _mac_app_support() -> Path:
    return Path.home() / "Library" / "Application Support"


def get_app_paths(app_name: str = "UpdateCheck") -> AppPaths:
    if sys.platform.startswith("win"):
        base = _windows_appdata() / app_name
    elif sys.platform == "darwin":
        base = _mac_app_support() / app_name
    else:
        base = Path.home() / f".{app_name.lower()}"

    logs = base / "logs"

    base.mkdir(parents=True, exist_ok=True)
    logs.mkdir(parents=True, exist_ok=True)

    return AppPaths(base_dir=base, logs_dir=logs)


def _windows_temp() -> str:
    return os.environ.get("TEMP") or os.environ.get("TMP") or str(_windows_local_appdata() / "Temp")


def _windows_local_appdata() -> Path:
    return Path(os.environ.get("LOCALAPPDATA", str(Path.home() / "AppData" / "Local")))


def get_temp_dir() -> Path:
    """Directory for files that only live as long as one check."""
    if sys.platform.startswith("win"):
        raw = _windows_temp()
    else:
        raw = os.environ.get("TMPDIR") or _POSIX_DEFAULT_TEMP

    temp = Path(raw)
    if not temp.is_dir():
        raise TempDirectoryError(f"{messages.UNABLE_TO_FIND_TEMP_DIRECTORY} Not a directory: {temp}")
    if not os.access(temp, os.W_OK):
        raise TempDirectoryError(f"{messages.UNABLE_TO_FIND_TEMP_DIRECTORY} Not writable: {temp}")
    return temp
