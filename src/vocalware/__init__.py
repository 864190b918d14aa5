from vocalware.client import AsyncVocalwareClient, AudioResult, VocalwareClient
from vocalware.config import ClientConfig, VocalwareSettings, validate_config
from vocalware.errors import ConfigurationError, ServiceError, VocalwareError, VoiceNotFoundError
from vocalware.voice import Voice, VoiceCatalog, default_catalog

__all__ = [
    "AsyncVocalwareClient",
    "AudioResult",
    "ClientConfig",
    "ConfigurationError",
    "ServiceError",
    "Voice",
    "VoiceCatalog",
    "VoiceNotFoundError",
    "VocalwareClient",
    "VocalwareError",
    "VocalwareSettings",
    "default_catalog",
    "validate_config",
]
