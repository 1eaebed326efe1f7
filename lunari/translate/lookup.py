"""
Dictionary lookups for single words and whole phrases.

Both lookups treat a missing dictionary as a miss for every query, so
translation degrades to echoing the input. Neither mutates the dictionary.
"""

from __future__ import annotations

from typing import Optional

from lunari.models import Dictionary, WordEntry
from lunari.utils import phrase_key


def lookup_word(dictionary: Optional[Dictionary], word: str) -> Optional[str]:
    """Return the Lunari form of an English word, or None.

    The word is lowercased before lookup. Plain-string entries are returned
    as is; structured entries return their primary ``"l"`` field.
    """
    dictionary = Dictionary.coerce(dictionary)
    if dictionary is None:
        return None
    entry = WordEntry.from_value(dictionary.words.get(word.lower()))
    return entry.lunari if entry else None


def lookup_phrase(dictionary: Optional[Dictionary], text: str) -> Optional[str]:
    """Return the translation of ``text`` as a whole phrase, or None."""
    dictionary = Dictionary.coerce(dictionary)
    if dictionary is None:
        return None
    phrase = dictionary.phrases.get(phrase_key(text))
    if isinstance(phrase, str) and phrase:
        return phrase
    return None
