from .release_filter import filter_to_platform, find_newer_release
from .report import format_results
from .update_service import UpdateCheckService, check_for_updates, get_api_version_info
from .version_override import assumed_version, reference_version

__all__ = [
    "filter_to_platform",
    "find_newer_release",
    "format_results",
    "UpdateCheckService",
    "check_for_updates",
    "get_api_version_info",
    "assumed_version",
    "reference_version",
]
