"""User-facing error strings reported by the manifest parsers and transports."""

from __future__ import annotations

SCHEMA_VERSION_1_3 = "1.3"
SCHEMA_VERSION_1_5 = "1.5"
SCHEMA_VERSION_1_6 = "1.6"
CURRENT_SCHEMA_VERSION = SCHEMA_VERSION_1_6

JSON_FILE_EXTENSION = ".json"


def missing(tag: str) -> str:
    return f"The version file is missing the {tag} entry."


def empty_list(tag: str) -> str:
    return f"The version file contains an empty {tag} list."


def incomplete(tag: str) -> str:
    return f"The version file contains an incomplete {tag} entry."


def invalid_value(tag: str) -> str:
    return f"The version file contains an invalid {tag} value."


INVALID_RELEASE_VERSION = "The version file contains an invalid ReleaseVersion number."
UNSUPPORTED_SCHEMA_VERSION = (
    "The schema version of the version file is not supported; "
    f"latest supported version is {CURRENT_SCHEMA_VERSION}."
)
FAILED_TO_PARSE_VERSION_FILE = "Failed to parse version file."

# transport
URL_MUST_POINT_TO_A_JSON_FILE = "URL must point to a JSON file."
UNABLE_TO_FIND_TEMP_DIRECTORY = "Unable to find temp directory."
FAILED_TO_LAUNCH_DOWNLOADER = "Failed to launch the download helper."
FAILED_TO_DOWNLOAD_VERSION_FILE = "Failed to download version file."
FAILED_TO_LOAD_LATEST_RELEASE_INFORMATION = "Failed to load latest release information."
FAILED_TO_LOAD_VERSION_FILE = "Failed to load version file."
CHECK_CANCELLED = "The update check was cancelled."
DOWNLOADED_AN_EMPTY_VERSION_FILE = "Downloaded an empty version file."
MISSING_ASSETS = "The latest releases JSON is missing the assets element."
ASSET_NOT_FOUND = "The required asset was not found in the assets list."
DOWNLOAD_URL_NOT_FOUND_IN_ASSET = "The download url was not found for the required asset."

UNKNOWN_ERROR_OCCURRED = "An unknown error occurred:"
