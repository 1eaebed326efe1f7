"""
Tokenizer that splits text into word and separator tokens.

A word is one or more ASCII letters, optionally followed by an apostrophe
and more letters ("don't", "Alex's"). Everything else (spaces, punctuation,
digits, symbols) is grouped into maximal separator runs. Joining the token
texts gives back the input exactly.

Example:
    >>> [t.text for t in tokenize("Hello, world!")]
    ['Hello', ', ', 'world', '!']
"""

from __future__ import annotations

import re
from dataclasses import dataclass

WORD_PATTERN = r"[A-Za-z]+(?:'[A-Za-z]+)?"

_TOKEN_RE = re.compile(rf"{WORD_PATTERN}|[^A-Za-z]+")
_WORD_RE = re.compile(WORD_PATTERN)


@dataclass(frozen=True)
class Token:
    """A slice of the input text.

    Attributes:
        text: The exact characters of the token
        is_word: True for word tokens, False for separators
    """
    text: str
    is_word: bool

    def __str__(self) -> str:
        return self.text


def is_word(text: str) -> bool:
    """Whether ``text`` is exactly one word token."""
    return _WORD_RE.fullmatch(text) is not None


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into an ordered list of tokens.

    Args:
        text: Any string, including the empty string

    Returns:
        Tokens in input order; empty list for empty input
    """
    tokens = []
    for match in _TOKEN_RE.finditer(text):
        piece = match.group(0)
        tokens.append(Token(piece, is_word(piece)))
    return tokens
