from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

from vocalware import cli
from vocalware.client import VocalwareClient

runner = CliRunner()


@pytest.fixture(autouse=True)
def _env(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("VOCALWARE_ACCOUNT_ID", "1234")
    monkeypatch.setenv("VOCALWARE_API_ID", "5678")
    monkeypatch.setenv("VOCALWARE_SECRET_PHRASE", "s3cret")
    monkeypatch.setenv("VOCALWARE_VOICE_NAME", "Kate")
    monkeypatch.setenv("VOCALWARE_LOG_LEVEL", "WARNING")


def _mock_client(monkeypatch, handler) -> None:
    def factory(settings):
        http = httpx.Client(transport=httpx.MockTransport(handler))
        return VocalwareClient(settings.client_config(), http_client=http)

    monkeypatch.setattr(cli, "_client_from_settings", factory)


def test_voices_lists_catalog() -> None:
    result = runner.invoke(cli.app, ["voices", "--lang", "en"])
    assert result.exit_code == 0
    assert "Kate" in result.output
    assert "Bridget" in result.output


def test_url_prints_signed_url() -> None:
    result = runner.invoke(cli.app, ["url", "  good morning  ", "--voice", "Julie"])
    assert result.exit_code == 0
    url = httpx.URL(result.output.strip())
    assert url.params["TXT"] == "good morning"
    assert url.params["VID"] == "13"
    assert "CS" in url.params


def test_url_unknown_voice_is_bad_parameter() -> None:
    result = runner.invoke(cli.app, ["url", "hi", "--voice", "Nobody"])
    assert result.exit_code != 0


def test_say_writes_file(monkeypatch, tmp_path) -> None:
    _mock_client(
        monkeypatch,
        lambda request: httpx.Response(200, content=b"ID3data", headers={"content-type": "audio/mpeg"}),
    )
    out = tmp_path / "hello.mp3"
    result = runner.invoke(cli.app, ["say", "hello", "--out", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_bytes() == b"ID3data"


def test_say_service_error_exits_1(monkeypatch, tmp_path) -> None:
    _mock_client(
        monkeypatch,
        lambda request: httpx.Response(200, content=b"Invalid account", headers={"content-type": "text/html"}),
    )
    result = runner.invoke(cli.app, ["say", "hello"])
    assert result.exit_code == 1
    assert "Invalid account" in result.output
    assert not (tmp_path / "speech.mp3").exists()


def test_say_without_credentials_exits_1(monkeypatch) -> None:
    monkeypatch.delenv("VOCALWARE_SECRET_PHRASE")
    result = runner.invoke(cli.app, ["say", "hello"])
    assert result.exit_code == 1
    assert "secret_phrase is missing" in result.output
