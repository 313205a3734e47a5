from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import Optional, Sequence

from updatecheck.application.container import build_container
from updatecheck.config import UpdateCheckSettings, get_app_paths
from updatecheck.domain.errors import InvalidVersionError
from updatecheck.domain.models import VersionInfo
from updatecheck.logging_config import setup_logging
from updatecheck.services.report import format_results


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="updatecheck", description="Check whether a newer product version is available.")
    p.add_argument("current_version", help="current product version, major.minor.patch.build")
    p.add_argument("location", help="GitHub latest-release API URL, base URL, or local directory")
    p.add_argument("filename", help="version file name (must end in .json)")
    p.add_argument("--show-tags", action="store_true", help="include release tags in the summary")
    p.add_argument("--logs-dir", type=Path, default=None, help="directory for log files")
    p.add_argument("--helper", default=None, help="external download helper command")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    try:
        current = VersionInfo.parse(args.current_version)
    except InvalidVersionError as e:
        parser.error(str(e))

    logs_dir = args.logs_dir or get_app_paths().logs_dir
    setup_logging(logs_dir, level=logging.INFO)

    settings = UpdateCheckSettings.from_env()
    if args.helper:
        settings = dataclasses.replace(settings, helper_command=args.helper)

    container = build_container(current, settings=settings)
    result = container.updates.check_for_updates(args.location, args.filename)

    print(format_results(result, show_tags=args.show_tags))
    return 0 if result.was_check_successful else 1


if __name__ == "__main__":
    raise SystemExit(main())
