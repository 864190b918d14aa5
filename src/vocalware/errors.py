from __future__ import annotations

from typing import Optional


class VocalwareError(Exception):
    pass


class ConfigurationError(VocalwareError):
    """Client configuration is missing a required field or holds an invalid value."""


class VoiceNotFoundError(VocalwareError):
    pass


class ServiceError(VocalwareError):
    """
    A single failed call to the Vocalware service.

    Carries the exact URL that was attempted (handy when debugging signing or
    encoding problems) and whatever text came back: the response body, or the
    transport error message when no response was received.
    """

    def __init__(
        self,
        *,
        url: str,
        reason: str,
        details: str = "",
        status_code: Optional[int] = None,
    ) -> None:
        self.url = url
        self.reason = reason
        self.details = details
        self.status_code = status_code
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [self.reason]
        if self.status_code is not None:
            parts.append("status=%s" % self.status_code)
        if self.details:
            parts.append("details=%r" % self.details[:500])
        parts.append("url=%s" % self.url)
        return " ".join(parts)
