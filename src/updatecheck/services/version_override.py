from __future__ import annotations

import logging
import os
import re
from typing import Mapping, Optional

from updatecheck.config import ASSUME_VERSION_ENV
from updatecheck.domain.models import VersionInfo

log = logging.getLogger(__name__)

FALLBACK_VERSION = VersionInfo(1, 0, 0, 0)

_OVERRIDE = re.compile(r"\s*(\d+)\s*\.\s*(\d+)\s*\.\s*(\d+)\s*\.\s*(\d+)")


def parse_override(text: str) -> Optional[VersionInfo]:
    m = _OVERRIDE.match(text)
    if not m:
        return None
    return VersionInfo(*(int(g) for g in m.groups()))


def assumed_version(env_name: str = ASSUME_VERSION_ENV, environ: Optional[Mapping[str, str]] = None) -> Optional[VersionInfo]:
    """Version forced through the environment, or None when the variable is unset.

    A set but unparsable value yields 1.0.0.0.
    """
    env = os.environ if environ is None else environ
    raw = env.get(env_name)
    if raw is None:
        return None

    version = parse_override(raw)
    if version is None:
        log.warning("assume_version_unparsable env=%s value=%r fallback=%s", env_name, raw, FALLBACK_VERSION)
        return FALLBACK_VERSION
    log.info("assume_version env=%s version=%s", env_name, version)
    return version


def reference_version(
    current: VersionInfo, env_name: str = ASSUME_VERSION_ENV, environ: Optional[Mapping[str, str]] = None
) -> VersionInfo:
    override = assumed_version(env_name, environ)
    return current if override is None else override
