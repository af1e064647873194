import json

import pytest

from appfresh import main as cli

from conftest import FakeOpener, lookup_body

LISTING = {
    "version": "3.0.0",
    "trackViewUrl": "https://apps.example.com/app/id123",
    "minimumOsVersion": "14.0",
}


@pytest.fixture(autouse=True)
def no_log_files(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda data_dir, verbose=False: None)


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"bundle_id": "com.example.app", "app_version": "2.5.0"}),
                    encoding="utf-8")
    return str(path)


def test_reports_update(transport, config, capsys):
    transport.body = lookup_body(LISTING)

    code = cli.main(["--config", config, "--os-version", "14.1"])

    assert code == 0
    out = capsys.readouterr().out
    assert "Update available: v3.0.0" in out
    assert "https://apps.example.com/app/id123" in out


def test_reports_incompatible(transport, config, capsys):
    transport.body = lookup_body(LISTING)

    assert cli.main(["--config", config, "--os-version", "13.0"]) == 0
    assert "requires OS 14.0" in capsys.readouterr().out


def test_flags_override_settings(transport, config, capsys):
    transport.body = lookup_body(LISTING)

    cli.main(["--config", config, "--bundle-id", "com.other", "--country", "gb",
              "--app-version", "3.0.0", "--os-version", "15"])

    req, _ = transport.requests[0]
    assert req.full_url.endswith("/gb/lookup?bundleId=com.other")
    assert "Up to date" in capsys.readouterr().out


def test_failure_exit_code(transport, tmp_path, capsys):
    code = cli.main(["--config", str(tmp_path / "none.json"), "--os-version", "14"])

    assert code == 1
    assert "no_identifier" in capsys.readouterr().out
    assert transport.requests == []


def test_open_flag_launches_browser(transport, config, monkeypatch):
    transport.body = lookup_body(LISTING)
    opener = FakeOpener()
    monkeypatch.setattr(cli, "BrowserOpener", lambda: opener)

    cli.main(["--config", config, "--os-version", "14.1", "--open"])

    assert opener.opened == ["https://apps.example.com/app/id123"]
