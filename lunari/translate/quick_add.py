"""
Bulk dictionary additions from ``left = right`` lines.

Accepted input, one entry per line:

    hello = ya
    good morning = yara muna

A left side containing a space becomes a phrase, anything else a word.
Keys are lowercased; translations keep their casing. Lines without a
usable ``=`` split are skipped silently.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from lunari.models import Dictionary
from lunari.utils import normalize_spaces

# Split at the first "=", spaces around it are not part of either side
_LINE_RE = re.compile(r"^(.+?)\s*=\s*(.+)$")


@dataclass
class QuickAdd:
    """Parsed additions, keyed by normalized English."""
    words: dict[str, str] = field(default_factory=dict)
    phrases: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.words) + len(self.phrases)


@dataclass
class MergeResult:
    """Outcome of ``merge_lines``.

    Attributes:
        dictionary: The new dictionary with additions applied
        count: Entries added or overwritten
    """
    dictionary: Dictionary
    count: int


def parse_quick_add_lines(raw: str) -> QuickAdd:
    adds = QuickAdd()
    for line in raw.split("\n"):
        line = line.strip()
        if not line:
            continue
        m = _LINE_RE.match(line)
        if not m:
            continue
        left = normalize_spaces(m.group(1)).lower()
        right = normalize_spaces(m.group(2))
        if not left or not right:
            continue
        if " " in left:
            adds.phrases[left] = right
        else:
            adds.words[left] = right
    return adds


def merge_lines(raw: str, dictionary: Optional[Dictionary]) -> MergeResult:
    """Merge quick-add lines into a copy of ``dictionary``.

    Existing keys are overwritten and new keys inserted; nothing is removed
    and the input dictionary is left untouched.

    Args:
        raw: Text containing ``left = right`` lines
        dictionary: Current dictionary (None is treated as empty)

    Returns:
        MergeResult with the updated dictionary and the number of entries
        processed (duplicates within ``raw`` count once)
    """
    base = dictionary if dictionary is not None else Dictionary()
    adds = parse_quick_add_lines(raw)
    return MergeResult(
        dictionary=base.merged(adds.words, adds.phrases),
        count=len(adds),
    )
