from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from updatecheck.application.worker import CompleteCallback, CancelledCallback, UpdateCheckThread
from updatecheck.config import UpdateCheckSettings
from updatecheck.domain.models import VersionInfo
from updatecheck.services.update_service import UpdateCheckService
from updatecheck.transport.downloader import Downloader, build_downloader


@dataclass(frozen=True)
class AppContainer:
    settings: UpdateCheckSettings
    downloader: Downloader
    updates: UpdateCheckService

    def background_checker(
        self,
        on_complete: Optional[CompleteCallback] = None,
        on_cancelled: Optional[CancelledCallback] = None,
    ) -> UpdateCheckThread:
        return UpdateCheckThread(self.updates, on_complete=on_complete, on_cancelled=on_cancelled)


def build_container(
    current_version: VersionInfo | str,
    settings: Optional[UpdateCheckSettings] = None,
    downloader: Optional[Downloader] = None,
) -> AppContainer:
    settings = settings or UpdateCheckSettings.from_env()
    downloader = downloader or build_downloader(settings)
    updates = UpdateCheckService(current_version, downloader=downloader, settings=settings)

    return AppContainer(
        settings=settings,
        downloader=downloader,
        updates=updates,
    )
