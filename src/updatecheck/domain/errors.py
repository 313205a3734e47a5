from __future__ import annotations

from typing import Iterable


class UpdateCheckError(Exception):
    """Base update check error."""

    @property
    def messages(self) -> list[str]:
        return [str(self)]


class TransportError(UpdateCheckError):
    pass


class TempDirectoryError(TransportError):
    pass


class InvalidVersionError(UpdateCheckError, ValueError):
    pass


class ManifestError(UpdateCheckError):
    """A version file that could not be parsed.

    Carries every problem found during a single parsing pass.
    """

    def __init__(self, messages: Iterable[str] | str):
        if isinstance(messages, str):
            messages = [messages]
        self._messages = list(messages)
        super().__init__(" ".join(self._messages))

    @property
    def messages(self) -> list[str]:
        return list(self._messages)


class UnsupportedSchemaError(ManifestError):
    pass
