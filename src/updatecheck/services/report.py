from __future__ import annotations

from updatecheck.domain.models import CheckResult, ReleaseInfo
from updatecheck.manifest.tokens import package_type_to_string, release_type_to_string, target_platform_to_string

UNABLE_TO_CHECK = "Unable to check for updates."
NO_UPDATE_AVAILABLE = "No updates available."
NEW_UPDATE_AVAILABLE = "New updates available:"


def _release_lines(release: ReleaseInfo, show_tags: bool) -> list[str]:
    lines = [
        release.title,
        "",
        f"New version: {release.version} ({release_type_to_string(release.release_type)})",
        f"Release date: {release.date}",
    ]
    if show_tags and release.tags:
        lines.append("Tags: " + ", ".join(release.tags))
    lines.append("")

    if release.download_links:
        lines.append("Download available in these formats:")
        # e.g. "    Windows: [MSI] [ZIP]" with the URL for each package below
        for platform in release.target_platforms:
            formats = " ".join(f"[{package_type_to_string(d.package_type)}]" for d in release.download_links)
            lines.append(f"    {target_platform_to_string(platform)}: {formats}")
        for d in release.download_links:
            label = d.package_name or package_type_to_string(d.package_type)
            lines.append(f"      {label}: {d.url}")
        lines.append("")

    if release.info_links:
        lines.append("For more information, visit:")
        lines.extend(f"  - {i.description}: {i.url}" for i in release.info_links)
        lines.append("")
    return lines


def format_results(result: CheckResult, show_tags: bool = False) -> str:
    """Plain text summary of a check, suitable for a console or a message box."""
    if not result.was_check_successful:
        return f"{UNABLE_TO_CHECK}\n{result.error_message}".rstrip()

    info = result.update_info
    if not info.is_update_available:
        return NO_UPDATE_AVAILABLE

    lines = [NEW_UPDATE_AVAILABLE, ""]
    for release in info.releases:
        lines.extend(_release_lines(release, show_tags))
    return "\n".join(lines).rstrip()
