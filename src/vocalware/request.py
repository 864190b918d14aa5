from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Dict, Optional, Union

import httpx

from vocalware.config import ClientConfig
from vocalware.errors import ConfigurationError
from vocalware.voice import Voice


@dataclass(frozen=True)
class RequestParams:
    """Merged per-call attributes: client config, overrides and the (stripped) text."""

    account_id: Union[int, str]
    api_id: Union[int, str]
    secret_phrase: str
    voice: Voice
    ext: str
    host: str
    path: str
    protocol: str
    text: str
    port: Optional[int] = None
    fx_type: Optional[str] = None
    fx_level: Optional[Union[int, str]] = None
    session: Optional[str] = None

    @classmethod
    def from_config(cls, config: ClientConfig, text: str) -> "RequestParams":
        return cls(
            account_id=config.account_id,  # type: ignore[arg-type]
            api_id=config.api_id,  # type: ignore[arg-type]
            secret_phrase=config.secret_phrase,  # type: ignore[arg-type]
            voice=config.voice,  # type: ignore[arg-type]
            ext=config.ext,
            host=config.host,
            path=config.path,
            protocol=config.protocol,
            text=text,
            port=config.port,
            fx_type=config.fx_type,
            fx_level=config.fx_level,
            session=config.session,
        )


def checksum(params: RequestParams) -> str:
    """
    MD5 over EID, LID, VID, TXT, EXT, FX_TYPE, FX_LEVEL, ACC, API, SESSION,
    HTTP_ERR and the secret phrase, concatenated in that order.
    Unset optional values contribute an empty string.
    """
    parts = [
        params.voice.engine_id,
        params.voice.lang_id,
        params.voice.voice_id,
        params.text,
        params.ext,
        params.fx_type,
        params.fx_level,
        params.account_id,
        params.api_id,
        params.session,
        None,  # HTTP_ERR is never sent
        params.secret_phrase,
    ]
    raw = "".join("" if p is None else str(p) for p in parts)
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


def query_params(params: RequestParams) -> Dict[str, str]:
    query: Dict[str, str] = {
        "EID": str(params.voice.engine_id),
        "LID": str(params.voice.lang_id),
        "VID": str(params.voice.voice_id),
        "TXT": params.text,
        "EXT": params.ext,
    }
    if params.fx_type is not None:
        query["FX_TYPE"] = str(params.fx_type)
    if params.fx_level is not None:
        query["FX_LEVEL"] = str(params.fx_level)
    if params.session is not None:
        query["SESSION"] = str(params.session)
    query["ACC"] = str(params.account_id)
    query["API"] = str(params.api_id)
    query["CS"] = checksum(params)
    return query


def build_url(params: RequestParams) -> str:
    netloc = params.host
    if params.port is not None:
        netloc = "%s:%s" % (params.host, params.port)
    path = params.path if params.path.startswith("/") else "/" + params.path
    base = "%s://%s%s" % (params.protocol, netloc, path)
    try:
        return str(httpx.URL(base, params=query_params(params)))
    except httpx.InvalidURL as e:
        raise ConfigurationError("invalid request url %r: %s" % (base, e)) from e
