from updatecheck.domain.models import (
    InfoPageLink,
    PackageType,
    ReleaseInfo,
    ReleaseType,
    TargetPlatform,
    UpdateInfo,
    UpdateInfo15,
    UpdatePackage15,
    VersionInfo,
)
from updatecheck.manifest.upgrade import upgrade_1_5_to_1_6
from updatecheck.services.release_filter import filter_to_platform, find_newer_release
from updatecheck.services.version_override import FALLBACK_VERSION, assumed_version, reference_version

W = TargetPlatform.WINDOWS
U = TargetPlatform.UBUNTU
D = TargetPlatform.DARWIN


def _legacy(*packages):
    return UpdateInfo15(
        release_version=VersionInfo(2, 1, 0, 0),
        release_date="2020-02-14",
        release_description="Product 2.1",
        available_packages=list(packages),
        info_links=[InfoPageLink("https://example.com/releases", "Releases page")],
    )


def _pkg(url, platforms, package_type=PackageType.ZIP, release_type=ReleaseType.GENERAL_AVAILABILITY):
    return UpdatePackage15(url=url, package_type=package_type, release_type=release_type, target_platforms=list(platforms))


def test_packages_sharing_platforms_and_type_merge_into_one_release():
    info = upgrade_1_5_to_1_6(_legacy(_pkg("a.zip", [W]), _pkg("a.msi", [W], PackageType.MSI)))

    assert len(info.releases) == 1
    release = info.releases[0]
    assert [d.url for d in release.download_links] == ["a.zip", "a.msi"]
    assert release.version == VersionInfo(2, 1, 0, 0)
    assert release.title == "Product 2.1"
    assert release.date == "2020-02-14"
    assert release.tags == ["Windows", "GA"]
    assert release.info_links == [InfoPageLink("https://example.com/releases", "Releases page")]


def test_different_platform_sets_make_separate_releases():
    info = upgrade_1_5_to_1_6(_legacy(_pkg("a.zip", [W]), _pkg("a.tgz", [U, D], PackageType.TAR)))

    assert [r.target_platforms for r in info.releases] == [[W], [U, D]]
    assert info.releases[1].tags == ["Ubuntu", "Darwin", "GA"]


def test_release_type_is_part_of_the_grouping_key():
    info = upgrade_1_5_to_1_6(
        _legacy(
            _pkg("ga.zip", [W]),
            _pkg("beta.zip", [W], release_type=ReleaseType.BETA),
            _pkg("ga.msi", [W], PackageType.MSI),
        )
    )

    assert [r.release_type for r in info.releases] == [ReleaseType.GENERAL_AVAILABILITY, ReleaseType.BETA]
    assert [d.url for d in info.releases[0].download_links] == ["ga.zip", "ga.msi"]
    assert info.releases[1].tags == ["Windows", "Beta"]


def test_upgraded_releases_do_not_share_info_link_lists():
    info = upgrade_1_5_to_1_6(_legacy(_pkg("a.zip", [W]), _pkg("a.tgz", [U])))
    info.releases[0].info_links.append(InfoPageLink("x", "y"))
    assert len(info.releases[1].info_links) == 1


def _release(version, platforms, title=""):
    return ReleaseInfo(version=version, target_platforms=list(platforms), title=title)


def test_filter_keeps_matching_releases_in_order():
    info = UpdateInfo(releases=[_release(VersionInfo(1), [W], "w"), _release(VersionInfo(1), [U], "u"), _release(VersionInfo(1), [W, D], "wd")])

    assert filter_to_platform(info, W) is True
    assert [r.title for r in info.releases] == ["w", "wd"]


def test_filter_reports_when_nothing_is_left():
    info = UpdateInfo(releases=[_release(VersionInfo(9), [U])])
    assert filter_to_platform(info, D) is False
    assert info.releases == []


def test_unknown_platform_keeps_everything():
    info = UpdateInfo(releases=[_release(VersionInfo(1), [U]), _release(VersionInfo(1), [D])])
    assert filter_to_platform(info, TargetPlatform.UNKNOWN) is True
    assert len(info.releases) == 2


def test_first_newer_release_wins():
    info = UpdateInfo(
        releases=[
            _release(VersionInfo(0, 9, 0, 0), [W]),
            _release(VersionInfo(1, 0, 0, 0), [W]),
            _release(VersionInfo(1, 1, 0, 0), [W]),
        ]
    )
    assert find_newer_release(info, VersionInfo(1, 0, 0, 0)) is True
    assert info.is_update_available is True


def test_later_older_release_does_not_clear_the_flag():
    info = UpdateInfo(releases=[_release(VersionInfo(1, 1, 0, 0), [W]), _release(VersionInfo(0, 9, 0, 0), [W])])
    assert find_newer_release(info, VersionInfo(1, 0, 0, 0)) is True
    assert info.is_update_available is True


def test_equal_or_older_releases_are_not_updates():
    info = UpdateInfo(releases=[_release(VersionInfo(1, 0, 0, 0), [W]), _release(VersionInfo(0, 1, 0, 0), [W])])
    assert find_newer_release(info, VersionInfo(1, 0, 0, 0)) is False


def test_running_platform_resolution():
    assert TargetPlatform.current("win32") is W
    assert TargetPlatform.current("linux") is U
    assert TargetPlatform.current("darwin") is D
    assert TargetPlatform.current("sunos5") is TargetPlatform.UNKNOWN


def test_override_replaces_reference_version():
    env = {"RDTS_UPDATER_ASSUME_VERSION": "3.2.1.0"}
    assert reference_version(VersionInfo(9, 9, 9, 9), environ=env) == VersionInfo(3, 2, 1, 0)


def test_unparsable_override_falls_back_to_1_0_0_0():
    for raw in ("latest", "3.2.1", ""):
        assert assumed_version(environ={"RDTS_UPDATER_ASSUME_VERSION": raw}) == FALLBACK_VERSION
    assert FALLBACK_VERSION == VersionInfo(1, 0, 0, 0)


def test_unset_override_uses_caller_version():
    assert assumed_version(environ={}) is None
    assert reference_version(VersionInfo(4, 0, 0, 0), environ={}) == VersionInfo(4, 0, 0, 0)


def test_override_variable_name_is_configurable():
    env = {"MY_APP_ASSUME": " 5 . 0 . 1 . 2 "}
    assert assumed_version("MY_APP_ASSUME", env) == VersionInfo(5, 0, 1, 2)
