"""Background update checks.

Architecture:
  UpdateCheckService  - blocking check, runs on whatever thread calls it
  UpdateCheckThread   - runs one check at a time on a worker thread and
                        reports back through callbacks
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from updatecheck.domain.models import CheckResult

log = logging.getLogger(__name__)

CompleteCallback = Callable[["UpdateCheckThread", CheckResult], None]
CancelledCallback = Callable[["UpdateCheckThread"], None]


class UpdateCheckThread:
    """Start / result-ready / cancel handshake around a blocking check.

    ``start_check`` returns immediately. When the check ends, ``on_complete``
    receives the result, unless ``cancel`` was called first, in which case
    ``on_cancelled`` fires and the result must not be trusted. Callbacks run
    on the worker thread. Cancellation is cooperative: it takes effect at the
    downloader's next poll.

    A controller can be reused once its check has finished; several
    controllers may run at the same time.
    """

    def __init__(
        self,
        service,
        on_complete: Optional[CompleteCallback] = None,
        on_cancelled: Optional[CancelledCallback] = None,
        name: str = "CheckForUpdatesThread",
    ):
        self.service = service
        self.on_complete = on_complete
        self.on_cancelled = on_cancelled
        self.name = name
        self.last_result: Optional[CheckResult] = None
        self._lock = threading.Lock()
        self._cancel = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start_check(self, latest_release_location: str, manifest_filename: str) -> None:
        with self._lock:
            if self.is_running():
                raise RuntimeError("An update check is already running on this controller")
            self._cancel = threading.Event()
            self.last_result = None
            self._thread = threading.Thread(
                target=self._run,
                args=(latest_release_location, manifest_filename, self._cancel),
                name=self.name,
                daemon=True,
            )
            self._thread.start()

    def cancel(self) -> None:
        if self.is_running():
            log.info("update_check_cancel_requested thread=%s", self.name)
            self._cancel.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the current check ends; False on timeout."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def _run(self, location: str, filename: str, cancel_event: threading.Event) -> None:
        result = self.service.check_for_updates(location, filename, cancel_event)
        self.last_result = result
        try:
            if cancel_event.is_set():
                if self.on_cancelled:
                    self.on_cancelled(self)
            elif self.on_complete:
                self.on_complete(self, result)
        except Exception:
            log.exception("update_check_callback_failed thread=%s", self.name)
