import json

import pytest

from conftest import manifest_1_5, manifest_1_6, package_1_5, release_1_6
from updatecheck.domain.errors import ManifestError, UnsupportedSchemaError
from updatecheck.domain.models import (
    DownloadLink,
    InfoPageLink,
    PackageType,
    ReleaseType,
    TargetPlatform,
    VersionInfo,
)
from updatecheck.manifest.parser import parse_manifest
from updatecheck.manifest.schema_1_3 import split_version_string
from updatecheck.manifest.serializer import dumps_manifest, to_manifest


def _doc_1_3(**overrides):
    doc = {
        "SchemaVersion": "1.3",
        "VersionString": "2.3",
        "ReleaseDate": "2019-03-01",
        "Description": "Product 2.3",
        "InfoPageURL": [{"URL": "https://example.com/p", "Description": "Product page"}],
        "DownloadURL": [
            {"URL": "https://example.com/p.zip", "TargetInfo": "Windows_ZIP"},
            {"URL": "https://example.com/p.msi", "TargetInfo": "Windows_MSI"},
            {"URL": "https://example.com/p.tgz", "TargetInfo": "Linux_TAR"},
        ],
    }
    doc.update(overrides)
    return json.dumps(doc)


# -------- dispatch --------

def test_missing_schema_version_is_rejected():
    with pytest.raises(ManifestError) as exc:
        parse_manifest(json.dumps({"Releases": []}))
    assert exc.value.messages == ["The version file is missing the SchemaVersion entry."]


def test_empty_document_counts_as_missing_schema_version():
    with pytest.raises(ManifestError) as exc:
        parse_manifest("{}")
    assert "SchemaVersion" in str(exc.value)


def test_unsupported_schema_version_names_latest_supported():
    with pytest.raises(UnsupportedSchemaError) as exc:
        parse_manifest(json.dumps({"SchemaVersion": "1.7"}))
    assert "not supported" in str(exc.value)
    assert "1.6" in str(exc.value)


def test_non_string_schema_version_is_invalid():
    with pytest.raises(ManifestError) as exc:
        parse_manifest(json.dumps({"SchemaVersion": 1.6, "Releases": []}))
    assert not isinstance(exc.value, UnsupportedSchemaError)
    assert exc.value.messages == ["The version file contains an invalid SchemaVersion value."]


def test_html_instead_of_json_fails_cleanly():
    with pytest.raises(ManifestError) as exc:
        parse_manifest(b"<html><body>Access denied</body></html>")
    assert exc.value.messages[0] == "Failed to parse version file."


# -------- schema 1.3 --------

def test_version_string_with_missing_trailing_parts():
    assert split_version_string("2.3") == VersionInfo(2, 3, 0, 0)
    assert split_version_string("1.2.3.4") == VersionInfo(1, 2, 3, 4)
    assert split_version_string("7") == VersionInfo(7, 0, 0, 0)
    assert split_version_string("") is None
    assert split_version_string("beta") is None


def test_schema_1_3_upgrades_to_one_release_per_platform():
    info = parse_manifest(_doc_1_3())

    assert [r.target_platforms for r in info.releases] == [[TargetPlatform.WINDOWS], [TargetPlatform.UBUNTU]]
    windows, linux = info.releases
    assert windows.version == VersionInfo(2, 3, 0, 0)
    assert windows.release_type is ReleaseType.GENERAL_AVAILABILITY
    assert windows.title == "Product 2.3"
    assert windows.tags == ["Windows", "GA"]
    assert [d.package_type for d in windows.download_links] == [PackageType.ZIP, PackageType.MSI]
    assert linux.download_links == [DownloadLink("https://example.com/p.tgz", PackageType.TAR)]
    assert info.is_update_available is False


def test_schema_1_3_empty_version_string_fails():
    with pytest.raises(ManifestError) as exc:
        parse_manifest(_doc_1_3(VersionString=""))
    assert "invalid ReleaseVersion number" in str(exc.value)


def test_schema_1_3_reports_every_problem_in_one_pass():
    doc = json.loads(_doc_1_3())
    del doc["ReleaseDate"]
    doc["InfoPageURL"] = []
    doc["DownloadURL"] = [{"URL": "https://example.com/x"}, {"URL": "https://example.com/y", "TargetInfo": "Mac_DMG"}]

    with pytest.raises(ManifestError) as exc:
        parse_manifest(json.dumps(doc))

    assert exc.value.messages == [
        "The version file is missing the ReleaseDate entry.",
        "The version file contains an empty InfoPageURL list.",
        "The version file contains an incomplete DownloadURL entry.",
        "The version file contains an invalid TargetInfo value.",
    ]


# -------- schema 1.5 --------

def test_schema_1_5_partial_release_version_defaults_to_zero():
    info = parse_manifest(manifest_1_5([package_1_5("https://example.com/a.zip")], version={"Major": 3, "Build": 12}))
    assert info.releases[0].version == VersionInfo(3, 0, 0, 12)


def test_schema_1_5_release_version_needs_at_least_one_component():
    with pytest.raises(ManifestError) as exc:
        parse_manifest(manifest_1_5([package_1_5("https://example.com/a.zip")], version={"Revision": 1}))
    assert "invalid ReleaseVersion number" in str(exc.value)


def test_schema_1_5_reports_first_missing_link_field():
    broken = {"URL": "https://example.com/a.zip", "PackageType": "ZIP"}
    with pytest.raises(ManifestError) as exc:
        parse_manifest(manifest_1_5([broken]))
    assert exc.value.messages == ["The version file is missing the TargetPlatforms entry."]


@pytest.mark.parametrize(
    "package, message",
    [
        (package_1_5("u", release_type="RC"), "invalid ReleaseType value"),
        (package_1_5("u", package_type="DMG"), "invalid PackageType value"),
        (package_1_5("u", platforms=("Windows", "Solaris")), "invalid TargetPlatforms value"),
        (package_1_5("u", platforms=()), "empty TargetPlatforms list"),
    ],
)
def test_schema_1_5_tokens_are_strict(package, message):
    good = package_1_5("https://example.com/ok.zip")
    with pytest.raises(ManifestError) as exc:
        parse_manifest(manifest_1_5([good, package]))
    assert message in str(exc.value)


def test_schema_1_5_missing_sections():
    doc = {"SchemaVersion": "1.5"}
    with pytest.raises(ManifestError) as exc:
        parse_manifest(json.dumps(doc))
    assert exc.value.messages == [
        "The version file is missing the ReleaseVersion entry.",
        "The version file is missing the ReleaseDate entry.",
        "The version file is missing the ReleaseDescription entry.",
        "The version file is missing the InfoPageLinks entry.",
        "The version file is missing the DownloadLinks entry.",
    ]


# -------- schema 1.6 --------

def test_schema_1_6_parses_each_release_directly():
    second = release_1_6(2, 1, platforms=("Ubuntu", "RHEL"), release_type="Beta", title="Beta")
    second["DownloadLinks"].append({"URL": "https://example.com/b.rpm", "PackageType": "RPM", "PackageName": "RHEL 8 RPM"})
    second["ReleaseTags"] = ["linux", "preview"]

    info = parse_manifest(manifest_1_6(release_1_6(title="GA"), second))

    assert len(info.releases) == 2
    beta = info.releases[1]
    assert beta.version == VersionInfo(2, 1, 0, 0)
    assert beta.release_type is ReleaseType.BETA
    assert beta.target_platforms == [TargetPlatform.UBUNTU, TargetPlatform.RHEL]
    assert beta.tags == ["linux", "preview"]
    assert beta.download_links[1] == DownloadLink("https://example.com/b.rpm", PackageType.RPM, "RHEL 8 RPM")
    assert beta.info_links == [InfoPageLink("https://example.com/product", "Product page")]


def test_schema_1_6_empty_releases_list():
    with pytest.raises(ManifestError) as exc:
        parse_manifest(json.dumps({"SchemaVersion": "1.6", "Releases": []}))
    assert exc.value.messages == ["The version file contains an empty Releases list."]


def test_schema_1_6_requires_release_tags():
    release = release_1_6()
    del release["ReleaseTags"]
    with pytest.raises(ManifestError) as exc:
        parse_manifest(manifest_1_6(release))
    assert exc.value.messages == ["The version file is missing the ReleaseTags entry."]


def test_schema_1_6_download_links_skipped_after_earlier_error():
    release = release_1_6()
    release["ReleaseType"] = "Nightly"
    release["DownloadLinks"] = []

    with pytest.raises(ManifestError) as exc:
        parse_manifest(manifest_1_6(release))

    # the empty DownloadLinks list is never looked at
    assert exc.value.messages == ["The version file contains an invalid ReleaseType value."]


def test_schema_1_6_bad_download_link():
    release = release_1_6()
    release["DownloadLinks"] = [{"PackageType": "ZIP"}, {"URL": "https://example.com/x", "PackageType": "APK"}]
    with pytest.raises(ManifestError) as exc:
        parse_manifest(manifest_1_6(release))
    assert exc.value.messages == [
        "The version file is missing the URL entry.",
        "The version file contains an invalid PackageType value.",
    ]


def test_wrong_json_types_are_reported_not_raised():
    release = release_1_6()
    release["ReleaseDate"] = 20240501
    release["ReleaseVersion"] = {"Major": "one"}
    with pytest.raises(ManifestError) as exc:
        parse_manifest(manifest_1_6(release))
    assert "invalid ReleaseVersion number" in str(exc.value)
    assert "invalid ReleaseDate value" in str(exc.value)


def test_schema_1_6_round_trip():
    original = parse_manifest(
        manifest_1_6(
            release_1_6(1, 2, 3, 4, platforms=("Windows", "Darwin"), title="One"),
            release_1_6(5, 0, 0, 1, platforms=("Ubuntu",), release_type="Development", title="Two"),
        )
    )
    original.releases[0].download_links.append(DownloadLink("https://example.com/one.msi", PackageType.MSI, "Installer"))

    again = parse_manifest(dumps_manifest(original))

    assert again == original
    assert to_manifest(again)["SchemaVersion"] == "1.6"
