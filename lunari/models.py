"""
Core data models for the Lunari translator.

The ``Dictionary`` is the only state the engine reads. It is a passive
structure with three parts:

- ``meta``: free-form information about the dictionary (never read by the engine)
- ``words``: lowercase English word -> translation
- ``phrases``: normalized lowercase English phrase -> translation

A word translation is either a plain string or a structured entry such as
``{"l": "ya", "pos": "interj"}`` whose ``"l"`` field is the primary Lunari
form. ``WordEntry`` resolves both shapes into a single string at lookup time.

Design Philosophy:
- Defensive: any JSON-like value can be coerced into a valid Dictionary
- Serializable: dictionaries round-trip through JSON for import/export
- Owned by the caller: the engine never mutates a Dictionary; merges copy
"""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from lunari.utils import phrase_key, word_key

logger = logging.getLogger(__name__)

# Field holding the Lunari form in a structured word entry
PRIMARY_FIELD = "l"


class DictionaryFormatError(ValueError):
    """Raised when dictionary text is not valid JSON."""


def parse_json(text: str) -> Any:
    """Decode JSON text, raising DictionaryFormatError on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DictionaryFormatError(f"Invalid JSON: {e}") from e


@dataclass(frozen=True)
class WordEntry:
    """A resolved word translation.

    Attributes:
        lunari: The primary Lunari form, exactly as stored
        extras: Any other fields of a structured entry (part of speech, notes)
    """
    lunari: str
    extras: dict = field(default_factory=dict)

    @classmethod
    def from_value(cls, value: Any) -> Optional[WordEntry]:
        """Resolve a raw ``words`` value, or return None when it is unusable."""
        if isinstance(value, str):
            return cls(value) if value else None
        if isinstance(value, dict):
            primary = value.get(PRIMARY_FIELD)
            if isinstance(primary, str) and primary:
                extras = {k: v for k, v in value.items() if k != PRIMARY_FIELD}
                return cls(primary, extras)
        return None


@dataclass
class Dictionary:
    """An English -> Lunari dictionary.

    Keys are always lowercased (and, for phrases, whitespace-normalized);
    values keep whatever casing the author gave them.
    """
    meta: dict = field(default_factory=dict)
    words: dict = field(default_factory=dict)
    phrases: dict = field(default_factory=dict)

    def __post_init__(self):
        for name in ("meta", "words", "phrases"):
            if not isinstance(getattr(self, name), dict):
                logger.debug("Dictionary %s is not a mapping; using empty", name)
                setattr(self, name, {})

    @classmethod
    def coerce(cls, value: Any) -> Optional[Dictionary]:
        """Return ``value`` as a Dictionary; None stays None."""
        if value is None or isinstance(value, cls):
            return value
        return cls.from_dict(value)

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def phrase_count(self) -> int:
        return len(self.phrases)

    def summary(self, label: str) -> str:
        """Status line, e.g. ``Built-in dictionary • 120 words • 14 phrases``."""
        return f"{label} • {self.word_count} words • {self.phrase_count} phrases"

    def copy(self) -> Dictionary:
        return Dictionary(
            meta=copy.deepcopy(self.meta),
            words=copy.deepcopy(self.words),
            phrases=dict(self.phrases),
        )

    def merged(self, words: dict[str, str], phrases: dict[str, str]) -> Dictionary:
        """Return a copy with ``words`` and ``phrases`` inserted or overwritten.

        Keys are expected to be normalized already (see ``lunari.utils``).
        """
        result = self.copy()
        result.words.update(words)
        result.phrases.update(phrases)
        return result

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "meta": copy.deepcopy(self.meta),
            "words": copy.deepcopy(self.words),
            "phrases": dict(self.phrases),
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_dict(cls, data: Any) -> Dictionary:
        """Build a Dictionary from any JSON-like value.

        Missing or malformed parts become empty mappings; unusable entries
        are dropped. Never raises.
        """
        if not isinstance(data, dict):
            if data is not None:
                logger.warning("Dictionary data is %s, not an object; using empty dictionary",
                               type(data).__name__)
            return cls()

        meta = data.get("meta")
        raw_words = data.get("words")
        raw_phrases = data.get("phrases")

        words = {}
        if isinstance(raw_words, dict):
            for key, value in raw_words.items():
                if not isinstance(key, str) or not isinstance(value, (str, dict)):
                    logger.debug("Dropping malformed word entry %r", key)
                    continue
                words[word_key(key)] = value

        phrases = {}
        if isinstance(raw_phrases, dict):
            for key, value in raw_phrases.items():
                if not isinstance(key, str) or not isinstance(value, str):
                    logger.debug("Dropping malformed phrase entry %r", key)
                    continue
                phrases[phrase_key(key)] = value

        return cls(
            meta=dict(meta) if isinstance(meta, dict) else {},
            words=words,
            phrases=phrases,
        )

    @classmethod
    def from_json(cls, text: str) -> Dictionary:
        """Parse dictionary JSON text.

        Raises:
            DictionaryFormatError: If the text is not valid JSON
        """
        return cls.from_dict(parse_json(text))
