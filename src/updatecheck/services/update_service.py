from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

from updatecheck.config import UpdateCheckSettings, get_temp_dir
from updatecheck.domain.errors import UpdateCheckError
from updatecheck.domain.models import CheckResult, UpdateInfo, VersionInfo
from updatecheck.manifest import messages
from updatecheck.manifest.parser import parse_manifest
from updatecheck.services.release_filter import filter_to_platform, find_newer_release
from updatecheck.services.version_override import reference_version
from updatecheck.transport.downloader import Downloader, build_downloader
from updatecheck.transport.resolver import load_manifest

log = logging.getLogger(__name__)

API_VERSION = VersionInfo(2, 0, 0, 0)


def get_api_version_info() -> VersionInfo:
    return API_VERSION


class UpdateCheckService:
    def __init__(
        self,
        current_version: VersionInfo | str,
        downloader: Optional[Downloader] = None,
        settings: Optional[UpdateCheckSettings] = None,
        temp_dir_provider: Callable[[], Path] = get_temp_dir,
    ):
        if isinstance(current_version, str):
            current_version = VersionInfo.parse(current_version)
        self.current_version = current_version
        self.settings = settings or UpdateCheckSettings.from_env()
        self.downloader = downloader or build_downloader(self.settings)
        self.temp_dir_provider = temp_dir_provider

    def _evaluate(self, update_info: UpdateInfo) -> None:
        if not filter_to_platform(update_info, self.settings.platform):
            log.info("no_compatible_releases platform=%s", self.settings.platform.name)
            return
        reference = reference_version(self.current_version, self.settings.assume_version_env)
        find_newer_release(update_info, reference)

    def check_for_updates(
        self,
        latest_release_location: str,
        manifest_filename: str,
        cancel_event: Optional[threading.Event] = None,
    ) -> CheckResult:
        """Fetch, parse and evaluate the version file.

        Never raises: every failure comes back as an unsuccessful CheckResult
        whose update_info must not be used.
        """
        try:
            raw = load_manifest(latest_release_location, manifest_filename, self.downloader, self.temp_dir_provider, cancel_event)
            update_info = parse_manifest(raw)
            self._evaluate(update_info)
        except UpdateCheckError as e:
            log.warning("update_check_failed location=%s error=%s", latest_release_location, e)
            return CheckResult.failure(e.messages)
        except Exception as e:
            log.exception("update_check_crashed location=%s", latest_release_location)
            return CheckResult.failure([f"{messages.UNKNOWN_ERROR_OCCURRED} {e}"])

        log.info(
            "update_check_done location=%s releases=%d update_available=%s",
            latest_release_location,
            len(update_info.releases),
            update_info.is_update_available,
        )
        return CheckResult.success(update_info)


def check_for_updates(
    current_version: VersionInfo | str,
    latest_release_location: str,
    manifest_filename: str,
    *,
    downloader: Optional[Downloader] = None,
    settings: Optional[UpdateCheckSettings] = None,
    cancel_event: Optional[threading.Event] = None,
) -> CheckResult:
    service = UpdateCheckService(current_version, downloader=downloader, settings=settings)
    return service.check_for_updates(latest_release_location, manifest_filename, cancel_event)
