"""
Small text helpers shared by the dictionary model, lookups and quick-add.

Functions:
    normalize_spaces: Trim and collapse whitespace runs
    word_key: Normalize an English word into a ``words`` key
    phrase_key: Normalize an English phrase into a ``phrases`` key

Example:
    >>> from lunari.utils import normalize_spaces, phrase_key
    >>> normalize_spaces("  good \\t morning ")
    'good morning'
    >>> phrase_key("Good   Morning")
    'good morning'
"""

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_spaces(s: str) -> str:
    """
    Trim a string and collapse every internal whitespace run to one space.

    Args:
        s: Any string

    Returns:
        The normalized string (possibly empty)

    Example:
        >>> normalize_spaces(" hello   there\\n")
        'hello there'
    """
    return _WHITESPACE_RUN.sub(" ", s.strip())


def word_key(word: str) -> str:
    """Lowercased, trimmed form used to store and look up single words."""
    return word.strip().lower()


def phrase_key(text: str) -> str:
    """Lowercased, whitespace-normalized form used for phrases."""
    return normalize_spaces(text).lower()
