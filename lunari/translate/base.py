"""
Rule-based English -> Lunari translation.

This module defines:
- TranslationOptions: the two switches read at translation time
- TranslationResult: the translated text plus metadata for the CLI
- DictionaryTranslator: phrase and word-by-word translation over a Dictionary
- translate(): functional entry point returning just the string

Algorithm:
1. No dictionary: the input is returned unchanged
2. With ``prefer_phrases``, a whole-input phrase match wins immediately
3. Otherwise the text is tokenized; separators pass through, words are
   looked up (with the possessive ``'s`` rule), recased and reassembled
4. Without ``prefer_phrases``, a whole-input phrase match found *after*
   the word-by-word pass still overrides its result

Step 4 means the flag only controls ordering and short-circuiting, not
whether phrase matching happens at all.

Design Philosophy:
- Translators are stateless: the caller owns and passes the Dictionary
- Total: no input string or dictionary makes translation raise
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from lunari.casing import apply_casing
from lunari.models import Dictionary
from lunari.tokenizer import tokenize
from lunari.translate.lookup import lookup_phrase, lookup_word

logger = logging.getLogger(__name__)

POSSESSIVE_MARKER = "'s"

# Lunari uses "-de" for "of"; "Alex's" becomes "Aleks-de"
POSSESSIVE_SUFFIX = "-de"


@dataclass
class TranslationOptions:
    """Switches controlling translation.

    Attributes:
        prefer_phrases: Try a whole-input phrase match before word-by-word
        mark_unknown: Wrap untranslatable words as ``[word]``
    """
    prefer_phrases: bool = True
    mark_unknown: bool = False

    def to_dict(self) -> dict:
        return {
            "prefer_phrases": self.prefer_phrases,
            "mark_unknown": self.mark_unknown,
        }


@dataclass
class TranslationResult:
    """Result of a translation.

    Attributes:
        text: The translated text
        source_text: Original English text
        phrase_match: True when the whole input matched a phrase
        unknown_words: Word tokens with no dictionary entry, in order
        translated_words: Word tokens that were replaced, in order
    """
    text: str
    source_text: str
    phrase_match: bool = False
    unknown_words: list[str] = field(default_factory=list)
    translated_words: list[str] = field(default_factory=list)

    @property
    def has_unknown(self) -> bool:
        return len(self.unknown_words) > 0


def split_possessive(base: str) -> tuple[str, bool]:
    """Strip a trailing ``'s`` from a lowercased word.

    Words of two characters or fewer are never treated as possessive.

    Returns:
        (lookup_key, is_possessive)
    """
    if base.endswith(POSSESSIVE_MARKER) and len(base) > len(POSSESSIVE_MARKER):
        return base[:-len(POSSESSIVE_MARKER)], True
    return base, False


class DictionaryTranslator:
    """Offline translator using only dictionary lookups.

    Usage:
        translator = DictionaryTranslator(dictionary, TranslationOptions())
        result = translator.translate("Hello, world!")
        print(result.text)
    """

    def __init__(
        self,
        dictionary: Optional[Dictionary],
        options: Optional[TranslationOptions] = None,
    ):
        # Plain JSON-like mappings are accepted and repaired
        self.dictionary = Dictionary.coerce(dictionary)
        self.options = options or TranslationOptions()

    @property
    def name(self) -> str:
        return "dictionary"

    def translate(self, text: str) -> TranslationResult:
        if self.dictionary is None:
            return TranslationResult(text=text, source_text=text)

        if self.options.prefer_phrases:
            phrase = lookup_phrase(self.dictionary, text)
            if phrase:
                logger.debug("Phrase match for %r", text)
                return TranslationResult(text=phrase, source_text=text, phrase_match=True)

        result = self._translate_words(text)

        if not self.options.prefer_phrases:
            phrase = lookup_phrase(self.dictionary, text)
            if phrase:
                logger.debug("Phrase match for %r overrides word-by-word result", text)
                return TranslationResult(text=phrase, source_text=text, phrase_match=True)

        return result

    def _translate_words(self, text: str) -> TranslationResult:
        out = []
        unknown = []
        translated = []

        for token in tokenize(text):
            if not token.is_word:
                out.append(token.text)
                continue

            key, possessive = split_possessive(token.text.lower())
            found = lookup_word(self.dictionary, key)
            if not found:
                unknown.append(token.text)
                out.append(f"[{token.text}]" if self.options.mark_unknown else token.text)
                continue

            # Casing follows the full token, suffix included
            lunari = apply_casing(token.text, found)
            if possessive:
                lunari = f"{lunari}{POSSESSIVE_SUFFIX}"
            translated.append(token.text)
            out.append(lunari)

        if unknown:
            logger.debug("Unknown words: %s", ", ".join(unknown))

        return TranslationResult(
            text="".join(out),
            source_text=text,
            unknown_words=unknown,
            translated_words=translated,
        )


def translate(
    text: str,
    dictionary: Optional[Dictionary],
    options: Optional[TranslationOptions] = None,
) -> str:
    """Translate English text to Lunari.

    Args:
        text: English input
        dictionary: Active dictionary, or None (input is echoed)
        options: Translation switches (defaults: prefer phrases, no marking)

    Returns:
        The translated text
    """
    return DictionaryTranslator(dictionary, options).translate(text).text
