"""Obtain the raw bytes of a version file.

The location string picks the strategy:

* contains ``/releases/latest``: a GitHub latest-release API URL; the version
  file is one of the release assets.
* starts with ``http``: the version file is downloaded from
  ``<location>/<filename>``.
* anything else: ``<location>/<filename>`` is read from disk.
"""

from __future__ import annotations

import json
import logging
import shutil
import tempfile
import threading
from pathlib import Path
from typing import Callable, Optional

from updatecheck.config import get_temp_dir
from updatecheck.domain.errors import TransportError
from updatecheck.manifest import messages
from updatecheck.transport.downloader import Downloader

log = logging.getLogger(__name__)

GITHUB_RELEASES_LATEST = "/releases/latest"
HTTP_PREFIX = "http"
LATEST_RELEASE_FILENAME = "LatestReleaseInfo.json"
FALLBACK_DOWNLOAD_FILENAME = "version.json"


def join_location(location: str, filename: str) -> str:
    if not filename:
        return location
    if not location:
        return filename
    return f"{location}/{filename}"


def local_name_for_url(url: str) -> str:
    """Last path segment of ``url`` without its query string."""
    path = url.split("?", 1)[0]
    cut = max(path.rfind("/"), path.rfind("\\"))
    name = path[cut + 1:]
    return name or FALLBACK_DOWNLOAD_FILENAME


def read_version_file(path: Path | str) -> bytes:
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        log.warning("version_file_unreadable path=%s error=%s", p, e)
        raise TransportError(messages.FAILED_TO_LOAD_VERSION_FILE) from e
    if not data:
        raise TransportError(messages.DOWNLOADED_AN_EMPTY_VERSION_FILE)
    return data


class ManifestResolver:
    """Loads one version file.

    Downloads land in a private scratch directory under the temp directory,
    created on first use and removed by ``close()``, so concurrent checks
    never share file names.
    """

    def __init__(
        self,
        downloader: Downloader,
        temp_dir_provider: Callable[[], Path] = get_temp_dir,
        cancel_event: Optional[threading.Event] = None,
    ):
        self.downloader = downloader
        self.temp_dir_provider = temp_dir_provider
        self.cancel_event = cancel_event
        self._scratch: Optional[Path] = None

    def __enter__(self) -> "ManifestResolver":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def scratch_dir(self) -> Path:
        if self._scratch is None:
            self._scratch = Path(tempfile.mkdtemp(prefix="updatecheck-", dir=self.temp_dir_provider()))
        return self._scratch

    def close(self) -> None:
        if self._scratch is not None:
            shutil.rmtree(self._scratch, ignore_errors=True)
            self._scratch = None

    def _fetch(self, url: str, local_path: Path) -> None:
        log.info("download_start url=%s path=%s", url, local_path)
        if not self.downloader.fetch(url, local_path, self.cancel_event):
            if self.cancel_event is not None and self.cancel_event.is_set():
                log.info("download_cancelled url=%s", url)
                raise TransportError(messages.CHECK_CANCELLED)
            raise TransportError(getattr(self.downloader, "failure_message", messages.FAILED_TO_DOWNLOAD_VERSION_FILE))

    def load(self, location: str, manifest_filename: str) -> bytes:
        if not manifest_filename.endswith(messages.JSON_FILE_EXTENSION):
            raise TransportError(messages.URL_MUST_POINT_TO_A_JSON_FILE)

        if GITHUB_RELEASES_LATEST in location:
            data = self.load_from_latest_release(location, manifest_filename)
        elif location.startswith(HTTP_PREFIX):
            data = self.download_json_file(join_location(location, manifest_filename))
        else:
            data = read_version_file(join_location(location, manifest_filename))

        log.info("manifest_loaded location=%s bytes=%d", location, len(data))
        return data

    def download_json_file(self, url: str) -> bytes:
        local = self.scratch_dir / local_name_for_url(url)
        local.unlink(missing_ok=True)
        self._fetch(url, local)
        return read_version_file(local)

    def load_from_latest_release(self, release_url: str, asset_name: str) -> bytes:
        local = self.scratch_dir / LATEST_RELEASE_FILENAME
        local.unlink(missing_ok=True)
        self._fetch(release_url, local)

        raw = read_version_file(local)
        try:
            # Restricted networks may hand back an HTML page instead of JSON.
            release = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TransportError(f"{messages.FAILED_TO_LOAD_LATEST_RELEASE_INFORMATION} {e}") from e

        return self.download_json_file(find_asset_download_url(release, asset_name))


def find_asset_download_url(release: object, asset_name: str) -> str:
    if not isinstance(release, dict) or not isinstance(release.get("assets"), list):
        problem = [messages.MISSING_ASSETS]
        if isinstance(release, dict) and isinstance(release.get("message"), str):
            problem.append(release["message"])
        raise TransportError(" ".join(problem))

    for asset in release["assets"]:
        if isinstance(asset, dict) and asset.get("name") == asset_name:
            url = asset.get("browser_download_url")
            if not isinstance(url, str) or not url:
                raise TransportError(messages.DOWNLOAD_URL_NOT_FOUND_IN_ASSET)
            return url

    problem = [messages.ASSET_NOT_FOUND]
    # GitHub reports API errors (rate limiting and the like) in "message".
    if isinstance(release.get("message"), str):
        problem.append(release["message"])
    raise TransportError(" ".join(problem))


def load_manifest(
    location: str,
    manifest_filename: str,
    downloader: Downloader,
    temp_dir_provider: Callable[[], Path] = get_temp_dir,
    cancel_event: Optional[threading.Event] = None,
) -> bytes:
    """One-shot load; the scratch directory is gone when this returns."""
    with ManifestResolver(downloader, temp_dir_provider, cancel_event) as resolver:
        return resolver.load(location, manifest_filename)
