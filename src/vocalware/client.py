from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import httpx

from vocalware.config import ClientConfig, validate_config
from vocalware.core.logging import get_logger
from vocalware.errors import ConfigurationError, ServiceError
from vocalware.request import RequestParams, build_url

MPEG_CONTENT_TYPE = "audio/mpeg"
FLASH_CONTENT_TYPE = "application/x-shockwave-flash"
AUDIO_CONTENT_TYPES = (MPEG_CONTENT_TYPE, FLASH_CONTENT_TYPE)

ConfigLike = Optional[Union[ClientConfig, Mapping[str, Any]]]


@dataclass(frozen=True)
class AudioResult:
    data: bytes
    content_type: str

    @property
    def suggested_ext(self) -> str:
        if _media_type(self.content_type) == FLASH_CONTENT_TYPE:
            return "swf"
        return "mp3"

    def save(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        p.write_bytes(self.data)
        return p


class _BaseClient:
    """
    Config handling, URL building and response classification shared by the
    sync and async clients. Subclasses only own the transport.
    """

    def __init__(self, config: ConfigLike = None, **attrs: Any) -> None:
        if isinstance(config, ClientConfig):
            config = config.with_overrides(**attrs)
        elif config is None or isinstance(config, Mapping):
            merged = dict(config or {})
            merged.update(attrs)
            try:
                config = ClientConfig(**merged)
            except TypeError as e:
                raise ConfigurationError(str(e)) from e
        else:
            raise ConfigurationError(
                "config must be a ClientConfig or a mapping, got %s" % type(config).__name__
            )
        validate_config(config)
        self._config = config
        self._log = get_logger(component="vocalware")

    @property
    def config(self) -> ClientConfig:
        return self._config

    def build_url(self, text: str, **overrides: Any) -> str:
        """
        Signed GET URL for `text`. Overrides apply to this URL only; the stored
        config is left untouched.
        """
        config = self._config.with_overrides(**overrides)
        if overrides:
            validate_config(config)
        return build_url(RequestParams.from_config(config, text.strip()))

    def _log_request(self, url: str, overrides: dict) -> None:
        config = self._config.with_overrides(**overrides) if overrides else self._config
        voice = config.voice.name if config.voice is not None else None
        self._log.debug("tts_request", url=url, ext=config.ext, voice=voice)

    def _failed(self, err: ServiceError) -> ServiceError:
        self._log.warning("tts_failed", reason=err.reason, status=err.status_code, url=err.url)
        return err

    def _transport_error(self, url: str, exc: httpx.TransportError) -> ServiceError:
        return self._failed(
            ServiceError(url=url, reason="request failed", details=str(exc) or type(exc).__name__)
        )

    def _classify(self, url: str, resp: httpx.Response) -> AudioResult:
        if not (200 <= resp.status_code <= 299):
            raise self._failed(
                ServiceError(
                    url=url,
                    reason="unexpected response status",
                    details=_body_text(resp),
                    status_code=resp.status_code,
                )
            )

        # Vocalware answers errors with a 200 and a plain-text message; only the
        # content type tells the two apart.
        content_type = resp.headers.get("content-type", "")
        if _media_type(content_type) in AUDIO_CONTENT_TYPES:
            self._log.debug("tts_audio", bytes=len(resp.content), content_type=content_type)
            return AudioResult(data=resp.content, content_type=content_type)

        raise self._failed(
            ServiceError(
                url=url,
                reason="service error",
                details=_body_text(resp),
                status_code=resp.status_code,
            )
        )


class VocalwareClient(_BaseClient):
    """
    Blocking Vocalware client.

    Example:
        voice = default_catalog().get(lang="en", name="Kate")
        with VocalwareClient(secret_phrase=..., api_id=..., account_id=..., voice=voice) as c:
            mp3 = c.generate("I love python!").data
    """

    def __init__(
        self,
        config: ConfigLike = None,
        *,
        http_client: Optional[httpx.Client] = None,
        timeout_seconds: float = 30.0,
        **attrs: Any,
    ) -> None:
        super().__init__(config, **attrs)
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout_seconds)

    def generate(self, text: str, **overrides: Any) -> AudioResult:
        """
        Synthesize `text` and return the audio. Exactly one GET is issued.

        Raises ServiceError on transport failures, non-2xx statuses and service
        error messages (2xx with a non-audio content type).
        """
        url = self.build_url(text, **overrides)
        self._log_request(url, overrides)
        try:
            resp = self._http.get(url)
        except httpx.TransportError as e:
            raise self._transport_error(url, e) from e
        return self._classify(url, resp)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "VocalwareClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class AsyncVocalwareClient(_BaseClient):
    def __init__(
        self,
        config: ConfigLike = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout_seconds: float = 30.0,
        **attrs: Any,
    ) -> None:
        super().__init__(config, **attrs)
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    async def generate(self, text: str, **overrides: Any) -> AudioResult:
        url = self.build_url(text, **overrides)
        self._log_request(url, overrides)
        try:
            resp = await self._http.get(url)
        except httpx.TransportError as e:
            raise self._transport_error(url, e) from e
        return self._classify(url, resp)

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "AsyncVocalwareClient":
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()


def _media_type(content_type: str) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


def _body_text(resp: httpx.Response) -> str:
    return resp.text
