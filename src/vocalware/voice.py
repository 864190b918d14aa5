from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from vocalware.errors import VoiceNotFoundError


@dataclass(frozen=True)
class Voice:
    lang: str
    name: str
    engine_id: int
    lang_id: int
    voice_id: int
    accent: str = ""

    @property
    def key(self) -> Tuple[str, str]:
        return _key(self.lang, self.name)


# (lang, name, engine_id, lang_id, voice_id, accent)
# English voices of the Vocalware "engine 3" family. Accounts may have other
# voices enabled; add them with VoiceCatalog.register().
BUILTIN_VOICES: List[Tuple[str, str, int, int, int, str]] = [
    ("en", "Susan", 3, 1, 1, "US"),
    ("en", "Dave", 3, 1, 2, "US"),
    ("en", "Elizabeth", 3, 1, 3, "UK"),
    ("en", "Simon", 3, 1, 4, "UK"),
    ("en", "Catherine", 3, 1, 5, "UK"),
    ("en", "Allison", 3, 1, 6, "US"),
    ("en", "Steven", 3, 1, 7, "US"),
    ("en", "Alan", 3, 1, 8, "Australian"),
    ("en", "Grace", 3, 1, 9, "Australian"),
    ("en", "Veena", 3, 1, 10, "Indian"),
    ("en", "Kate", 3, 1, 11, "US"),
    ("en", "Paul", 3, 1, 12, "US"),
    ("en", "Julie", 3, 1, 13, "US"),
    ("en", "Bridget", 3, 1, 14, "Irish"),
]


class VoiceCatalog:
    """
    In-memory voice lookup by (language, name).
    Matching is case-insensitive on both parts.
    """

    def __init__(self, voices: Iterable[Voice] = ()) -> None:
        self._voices: Dict[Tuple[str, str], Voice] = {}
        for v in voices:
            self.register(v)

    def register(self, voice: Voice) -> None:
        self._voices[voice.key] = voice

    def find(self, *, lang: str, name: str) -> Optional[Voice]:
        return self._voices.get(_key(lang, name))

    def get(self, *, lang: str, name: str) -> Voice:
        voice = self.find(lang=lang, name=name)
        if voice is None:
            raise VoiceNotFoundError("no voice named %r for language %r" % (name, lang))
        return voice

    def all(self, lang: Optional[str] = None) -> List[Voice]:
        voices = list(self._voices.values())
        if lang:
            want = lang.strip().lower()
            voices = [v for v in voices if v.lang.lower() == want]
        return sorted(voices, key=lambda v: (v.lang, v.engine_id, v.lang_id, v.voice_id))

    def __len__(self) -> int:
        return len(self._voices)


def default_catalog() -> VoiceCatalog:
    return VoiceCatalog(
        Voice(lang=lang, name=name, engine_id=eid, lang_id=lid, voice_id=vid, accent=accent)
        for (lang, name, eid, lid, vid, accent) in BUILTIN_VOICES
    )


def _key(lang: str, name: str) -> Tuple[str, str]:
    return ((lang or "").strip().lower(), (name or "").strip().lower())
