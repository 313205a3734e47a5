import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _no_assumed_version(monkeypatch):
    monkeypatch.delenv("RDTS_UPDATER_ASSUME_VERSION", raising=False)
    monkeypatch.delenv("UPDATECHECK_HELPER", raising=False)
    monkeypatch.delenv("UPDATECHECK_HTTP_TIMEOUT", raising=False)


class FakeDownloader:
    """Serves canned bodies by URL instead of touching the network."""

    failure_message = "Failed to launch the download helper."

    def __init__(self, files=None, fail=False):
        self.files = dict(files or {})
        self.fail = fail
        self.calls = []

    def fetch(self, remote_url, local_path, cancel_event=None):
        self.calls.append((remote_url, Path(local_path)))
        if self.fail:
            return False
        body = self.files.get(remote_url)
        if body is not None:
            if isinstance(body, str):
                body = body.encode("utf-8")
            Path(local_path).write_bytes(body)
        return True


def release_1_6(major=1, minor=0, patch=0, build=0, platforms=("Windows",), release_type="GA", title="Release"):
    return {
        "ReleaseVersion": {"Major": major, "Minor": minor, "Patch": patch, "Build": build},
        "ReleaseDate": "2024-05-01",
        "ReleaseTitle": title,
        "ReleaseType": release_type,
        "ReleasePlatforms": list(platforms),
        "ReleaseTags": list(platforms) + [release_type],
        "InfoPageLinks": [{"URL": "https://example.com/product", "Description": "Product page"}],
        "DownloadLinks": [{"URL": f"https://example.com/{title}.zip", "PackageType": "ZIP"}],
    }


def manifest_1_6(*releases):
    return json.dumps({"SchemaVersion": "1.6", "Releases": list(releases)})


def manifest_1_5(packages, version=None):
    return json.dumps(
        {
            "SchemaVersion": "1.5",
            "ReleaseVersion": version if version is not None else {"Major": 2, "Minor": 1},
            "ReleaseDate": "2020-02-14",
            "ReleaseDescription": "Product 2.1",
            "InfoPageLinks": [{"URL": "https://example.com/releases", "Description": "Releases page"}],
            "DownloadLinks": packages,
        }
    )


def package_1_5(url, platforms=("Windows",), package_type="ZIP", release_type="GA"):
    return {"URL": url, "TargetPlatforms": list(platforms), "PackageType": package_type, "ReleaseType": release_type}
