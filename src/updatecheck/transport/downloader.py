from __future__ import annotations

import logging
import shlex
import subprocess
import threading
from pathlib import Path
from typing import Optional, Protocol, Sequence

import requests

from updatecheck.config import UpdateCheckSettings
from updatecheck.manifest import messages

log = logging.getLogger(__name__)

# Buffer size for streamed downloads
DOWNLOAD_BUFFER = 65536
USER_AGENT = "updatecheck/2.0"


class Downloader(Protocol):
    """Fetches ``remote_url`` into ``local_path``.

    Returns False when the download could not be carried out or was
    cancelled through ``cancel_event``. A True result does not promise the
    file is usable; callers still check that it exists and is not empty.
    """

    failure_message: str

    def fetch(self, remote_url: str, local_path: Path | str, cancel_event: Optional[threading.Event] = None) -> bool: ...


class HelperProcessDownloader:
    """Runs an external download helper as ``<helper> <url> <local path>``.

    The helper is polled every ``poll_interval`` seconds; at each poll a set
    ``cancel_event`` stops the wait and the helper is terminated, then killed
    if it is still alive after ``terminate_timeout`` seconds.
    """

    failure_message = messages.FAILED_TO_LAUNCH_DOWNLOADER

    def __init__(self, helper: str | Sequence[str], poll_interval: float = 0.1, terminate_timeout: float = 2.0):
        self.helper = shlex.split(helper) if isinstance(helper, str) else list(helper)
        self.poll_interval = poll_interval
        self.terminate_timeout = terminate_timeout

    def run(self, command: Sequence[str], cancel_event: Optional[threading.Event] = None) -> tuple[bool, str]:
        try:
            proc = subprocess.Popen(
                list(command),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except OSError as e:
            log.warning("helper_launch_failed command=%s error=%s", command[0] if command else "", e)
            return False, str(e)

        chunks: list[bytes] = []
        while True:
            if cancel_event is not None and cancel_event.is_set():
                log.info("helper_cancelled pid=%s", proc.pid)
                self._terminate(proc)
                return False, ""
            try:
                out, _ = proc.communicate(timeout=self.poll_interval)
            except subprocess.TimeoutExpired:
                continue
            if out:
                chunks.append(out)
            break

        output = b"".join(chunks).decode("utf-8", errors="replace")
        if proc.returncode != 0:
            log.warning("helper_exit_nonzero pid=%s code=%s output=%s", proc.pid, proc.returncode, output.strip())
        return True, output

    def _terminate(self, proc: subprocess.Popen) -> None:
        proc.terminate()
        try:
            proc.wait(timeout=self.terminate_timeout)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.wait()
        if proc.stdout is not None:
            proc.stdout.close()

    def fetch(self, remote_url: str, local_path: Path | str, cancel_event: Optional[threading.Event] = None) -> bool:
        ok, _ = self.run([*self.helper, remote_url, str(local_path)], cancel_event)
        return ok


class RequestsDownloader:
    failure_message = messages.FAILED_TO_DOWNLOAD_VERSION_FILE

    def __init__(self, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session

    def fetch(self, remote_url: str, local_path: Path | str, cancel_event: Optional[threading.Event] = None) -> bool:
        target = Path(local_path)
        getter = self.session.get if self.session is not None else requests.get
        try:
            with getter(remote_url, timeout=self.timeout, stream=True, headers={"User-Agent": USER_AGENT}) as r:
                r.raise_for_status()
                with target.open("wb") as out:
                    for chunk in r.iter_content(chunk_size=DOWNLOAD_BUFFER):
                        if cancel_event is not None and cancel_event.is_set():
                            log.info("download_cancelled url=%s", remote_url)
                            break
                        out.write(chunk)
                    else:
                        return True
        except (requests.RequestException, OSError) as e:
            log.warning("download_failed url=%s error=%s", remote_url, e)

        target.unlink(missing_ok=True)
        return False


def build_downloader(settings: UpdateCheckSettings) -> Downloader:
    if settings.helper_command:
        return HelperProcessDownloader(
            settings.helper_command,
            poll_interval=settings.poll_interval,
            terminate_timeout=settings.terminate_timeout,
        )
    return RequestsDownloader(timeout=settings.http_timeout)
