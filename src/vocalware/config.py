from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vocalware.errors import ConfigurationError
from vocalware.voice import Voice, VoiceCatalog, default_catalog

EXTENSIONS = ("mp3", "swf")
PROTOCOLS = ("http", "https")


@dataclass(frozen=True)
class ClientConfig:
    """
    Everything needed to sign and send a Vocalware request.

    account_id, api_id, secret_phrase and voice are required; they default to
    None only so that a missing value is reported by validate_config() as a
    ConfigurationError instead of a bare TypeError.
    """

    account_id: Optional[Union[int, str]] = None
    api_id: Optional[Union[int, str]] = None
    secret_phrase: Optional[str] = None
    voice: Optional[Voice] = None
    ext: str = "mp3"
    host: str = "www.vocalware.com"
    path: str = "/tts/gen.php"
    protocol: str = "http"
    port: Optional[int] = None
    # Optional service parameters.
    fx_type: Optional[str] = None
    fx_level: Optional[Union[int, str]] = None
    session: Optional[str] = None

    def with_overrides(self, **overrides: Any) -> "ClientConfig":
        if not overrides:
            return self
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(k for k in overrides if k not in known)
        if unknown:
            raise ConfigurationError("unknown option(s): %s" % ", ".join(unknown))
        return dataclasses.replace(self, **overrides)


def validate_config(config: ClientConfig) -> None:
    # Order matters: the first failing check is the one reported.
    if not config.secret_phrase:
        raise ConfigurationError("secret_phrase is missing")
    if _blank(config.api_id):
        raise ConfigurationError("api_id is missing")
    if _blank(config.account_id):
        raise ConfigurationError("account_id is missing")
    if config.voice is None:
        raise ConfigurationError("voice is missing")
    if not isinstance(config.voice, Voice):
        raise ConfigurationError("voice must be a Voice, got %s" % type(config.voice).__name__)
    if config.ext not in EXTENSIONS:
        raise ConfigurationError("ext must be one of %s, got %r" % (", ".join(EXTENSIONS), config.ext))
    if config.protocol not in PROTOCOLS:
        raise ConfigurationError(
            "protocol must be one of %s, got %r" % (", ".join(PROTOCOLS), config.protocol)
        )
    if config.port is not None and not _valid_port(config.port):
        raise ConfigurationError("port must be an int in 1..65535, got %r" % (config.port,))


def _blank(v: object) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def _valid_port(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and 1 <= v <= 65535


def _strip_quotes(s: str) -> str:
    s = (s or "").strip()
    if len(s) >= 2 and ((s[0] == s[-1]) and s[0] in ("'", '"')):
        s = s[1:-1].strip()
    return s


def _env_files() -> tuple[str, str]:
    """
    Local .env first, then the repo-root .env (useful when running from scripts/).
    """
    repo_root_env = str(Path(__file__).resolve().parents[2] / ".env")
    return (".env", repo_root_env)


class VocalwareSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    account_id: Optional[str] = Field(default=None, alias="VOCALWARE_ACCOUNT_ID")
    api_id: Optional[str] = Field(default=None, alias="VOCALWARE_API_ID")
    secret_phrase: Optional[str] = Field(default=None, alias="VOCALWARE_SECRET_PHRASE")
    voice_lang: str = Field(default="en", alias="VOCALWARE_VOICE_LANG")
    voice_name: str = Field(default="Kate", alias="VOCALWARE_VOICE_NAME")
    ext: str = Field(default="mp3", alias="VOCALWARE_EXT")
    host: str = Field(default="www.vocalware.com", alias="VOCALWARE_HOST")
    path: str = Field(default="/tts/gen.php", alias="VOCALWARE_PATH")
    protocol: str = Field(default="http", alias="VOCALWARE_PROTOCOL")
    port: Optional[int] = Field(default=None, alias="VOCALWARE_PORT")
    timeout_seconds: float = Field(default=30, alias="VOCALWARE_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="VOCALWARE_LOG_LEVEL")

    @field_validator("account_id", "api_id", "secret_phrase", mode="before")
    @classmethod
    def _norm_opt(cls, v: object) -> Optional[str]:
        if v is None:
            return None
        s = _strip_quotes(str(v))
        return s or None

    @field_validator("voice_lang", "voice_name", "host", "path", mode="before")
    @classmethod
    def _norm_str(cls, v: object) -> str:
        return _strip_quotes(str(v))

    @field_validator("ext", "protocol", mode="before")
    @classmethod
    def _norm_lower(cls, v: object) -> str:
        return _strip_quotes(str(v)).lower()

    @field_validator("port", mode="before")
    @classmethod
    def _norm_port(cls, v: object) -> Optional[object]:
        if v is None:
            return None
        s = _strip_quotes(str(v))
        return s or None

    def client_config(self, catalog: Optional[VoiceCatalog] = None) -> ClientConfig:
        """
        Build a ClientConfig, resolving the configured voice through the catalog.
        An unknown voice leaves voice=None; the client reports it when constructed.
        """
        catalog = catalog or default_catalog()
        return ClientConfig(
            account_id=self.account_id,
            api_id=self.api_id,
            secret_phrase=self.secret_phrase,
            voice=catalog.find(lang=self.voice_lang, name=self.voice_name),
            ext=self.ext,
            host=self.host,
            path=self.path,
            protocol=self.protocol,
            port=self.port,
        )
