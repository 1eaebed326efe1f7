"""
Lunari Translator: rule-based English -> Lunari word and phrase substitution

Translates free-form English text with a dictionary of word and phrase
mappings while keeping punctuation, spacing and casing patterns.

Core pieces:
1. Tokenizer splitting text into word and separator tokens
2. Dictionary lookups for words (with a possessive rule) and whole phrases
3. Casing transfer from the English token to the Lunari form
4. Quick-add merging of ``english = lunari`` lines

License: MIT
"""

__version__ = "0.1.0"

from lunari.models import Dictionary, WordEntry
from lunari.tokenizer import Token, tokenize
from lunari.translate import (
    DictionaryTranslator,
    TranslationOptions,
    TranslationResult,
    merge_lines,
    translate,
)

__all__ = [
    "Dictionary",
    "WordEntry",
    "Token",
    "tokenize",
    "DictionaryTranslator",
    "TranslationOptions",
    "TranslationResult",
    "merge_lines",
    "translate",
]
