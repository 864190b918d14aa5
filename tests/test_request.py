from __future__ import annotations

import dataclasses
import hashlib

import httpx
import pytest

from vocalware.errors import ConfigurationError
from vocalware.request import RequestParams, build_url, checksum


def _params(config, text: str = "hello world", **overrides) -> RequestParams:
    return RequestParams.from_config(config.with_overrides(**overrides), text)


def test_url_shape(config) -> None:
    url = httpx.URL(build_url(_params(config)))
    assert url.scheme == "http"
    assert url.host == "www.vocalware.com"
    assert url.port is None
    assert url.path == "/tts/gen.php"
    assert list(url.params.keys()) == ["EID", "LID", "VID", "TXT", "EXT", "ACC", "API", "CS"]
    assert url.params["EID"] == "3"
    assert url.params["LID"] == "1"
    assert url.params["VID"] == "11"
    assert url.params["TXT"] == "hello world"
    assert url.params["EXT"] == "mp3"
    assert url.params["ACC"] == "1234"
    assert url.params["API"] == "5678"


def test_checksum_covers_fields_and_secret(config) -> None:
    expected = hashlib.md5(b"3111hello worldmp312345678s3cret").hexdigest()
    params = _params(config)
    assert checksum(params) == expected
    assert httpx.URL(build_url(params)).params["CS"] == expected


def test_checksum_includes_effects_and_session(config) -> None:
    params = _params(config, fx_type="P", fx_level=2, session="abc")
    expected = hashlib.md5(b"3111hello worldmp3P212345678abcs3cret").hexdigest()
    assert checksum(params) == expected

    url = httpx.URL(build_url(params))
    assert url.params["FX_TYPE"] == "P"
    assert url.params["FX_LEVEL"] == "2"
    assert url.params["SESSION"] == "abc"


def test_secret_phrase_never_in_url(config) -> None:
    assert "s3cret" not in build_url(_params(config))


def test_port_and_protocol(config) -> None:
    url = httpx.URL(build_url(_params(config, protocol="https", host="tts.example.test", port=8443)))
    assert url.scheme == "https"
    assert url.host == "tts.example.test"
    assert url.port == 8443


def test_text_is_encoded(config) -> None:
    text = "Héllo & goodbye? 100% sure #1"
    raw = build_url(_params(config, text=text))
    assert " " not in raw
    assert httpx.URL(raw).params["TXT"] == text


def test_path_without_leading_slash(config) -> None:
    assert httpx.URL(build_url(_params(config, path="tts/gen.php"))).path == "/tts/gen.php"


def test_unbuildable_url_is_configuration_error(config) -> None:
    params = RequestParams.from_config(config, "hi")
    bad = dataclasses.replace(params, port="abc")
    with pytest.raises(ConfigurationError, match="invalid request url"):
        build_url(bad)
