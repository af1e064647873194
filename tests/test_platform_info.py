import platform

from appfresh.core import platform_info


def test_strips_release_suffix(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Linux")
    monkeypatch.setattr(platform, "release", lambda: "6.1.0-13-amd64")

    assert platform_info.current_os_version() == "6.1.0"


def test_macos_uses_mac_ver(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Darwin")
    monkeypatch.setattr(platform, "mac_ver", lambda: ("14.4.1", ("", "", ""), "arm64"))

    assert platform_info.current_os_version() == "14.4.1"


def test_unknown_release(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Linux")
    monkeypatch.setattr(platform, "release", lambda: "")

    assert platform_info.current_os_version() == ""
