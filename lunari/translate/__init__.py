"""Translation engine: lookups, rule-based translator and quick-add merging."""

from lunari.translate.base import (
    DictionaryTranslator,
    TranslationOptions,
    TranslationResult,
    split_possessive,
    translate,
)
from lunari.translate.lookup import lookup_phrase, lookup_word
from lunari.translate.quick_add import MergeResult, QuickAdd, merge_lines, parse_quick_add_lines

__all__ = [
    "DictionaryTranslator",
    "TranslationOptions",
    "TranslationResult",
    "split_possessive",
    "translate",
    "lookup_phrase",
    "lookup_word",
    "MergeResult",
    "QuickAdd",
    "merge_lines",
    "parse_quick_add_lines",
]
