"""
File-backed storage for the built-in and custom dictionaries.

The built-in dictionary ships inside the package. Once the user imports a
file or quick-adds entries, the result is saved as a custom dictionary in
the user directory and takes precedence until it is cleared.

Usage:
    from lunari.store import DictionaryStore

    store = DictionaryStore()
    active = store.load_active()
    print(active.label, active.dictionary.word_count)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from lunari.config import BUILTIN_DICTIONARY, custom_dictionary_path
from lunari.models import Dictionary, DictionaryFormatError, parse_json
from lunari.translate.quick_add import MergeResult, merge_lines

logger = logging.getLogger(__name__)

BUILTIN_LABEL = "Built-in dictionary"
CUSTOM_LABEL = "Custom dictionary (saved)"


class DictionaryLoadError(Exception):
    """Raised when a dictionary file cannot be read or parsed."""


@dataclass
class ActiveDictionary:
    """The dictionary currently in use and where it came from."""
    dictionary: Dictionary
    label: str

    @property
    def is_custom(self) -> bool:
        return self.label == CUSTOM_LABEL

    @property
    def summary(self) -> str:
        return self.dictionary.summary(self.label)


def _read_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DictionaryLoadError(f"Cannot read {path}: {e}") from e
    try:
        return parse_json(text)
    except DictionaryFormatError as e:
        raise DictionaryLoadError(f"{path}: {e}") from e


def _read_dictionary(path: Path) -> Dictionary:
    return Dictionary.from_dict(_read_json(path))


def _write_atomic(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(f"{path.name}.tmp.{os.getpid()}")
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


class DictionaryStore:
    """Load and save dictionaries.

    Args:
        builtin_path: Shipped dictionary (default: package data)
        custom_path: Saved custom dictionary (default: user directory)
    """

    def __init__(
        self,
        builtin_path: Optional[Path] = None,
        custom_path: Optional[Path] = None,
    ):
        self.builtin_path = Path(builtin_path) if builtin_path else BUILTIN_DICTIONARY
        self.custom_path = Path(custom_path) if custom_path else custom_dictionary_path()

    def load_builtin(self) -> Dictionary:
        """Load the built-in dictionary.

        Raises:
            DictionaryLoadError: If the file is missing or not valid JSON
        """
        return _read_dictionary(self.builtin_path)

    def load_custom(self) -> Optional[Dictionary]:
        """Load the saved custom dictionary, or None if there is none.

        A corrupt file, or one whose top-level value is not an object,
        is logged and ignored.
        """
        if not self.custom_path.exists():
            return None
        try:
            data = _read_json(self.custom_path)
        except DictionaryLoadError as e:
            logger.warning("Ignoring unreadable custom dictionary: %s", e)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring custom dictionary %s: top-level value is %s, not an object",
                           self.custom_path, type(data).__name__)
            return None
        return Dictionary.from_dict(data)

    def has_custom(self) -> bool:
        return self.custom_path.exists()

    def save_custom(self, dictionary: Dictionary) -> Path:
        _write_atomic(self.custom_path, dictionary.to_json(indent=None))
        logger.info("Saved custom dictionary to %s", self.custom_path)
        return self.custom_path

    def clear_custom(self) -> bool:
        """Delete the custom dictionary. Returns True if one existed."""
        try:
            self.custom_path.unlink()
        except FileNotFoundError:
            return False
        logger.info("Removed custom dictionary %s", self.custom_path)
        return True

    def load_active(self) -> ActiveDictionary:
        """Return the custom dictionary if saved, else the built-in one.

        A broken built-in dictionary degrades to an empty one.
        """
        custom = self.load_custom()
        if custom is not None:
            return ActiveDictionary(custom, CUSTOM_LABEL)
        try:
            builtin = self.load_builtin()
        except DictionaryLoadError as e:
            logger.error("Could not load built-in dictionary: %s", e)
            builtin = Dictionary()
        return ActiveDictionary(builtin, BUILTIN_LABEL)

    def import_file(self, path: Path) -> Dictionary:
        """Use a JSON file as the custom dictionary.

        Raises:
            DictionaryLoadError: If the file cannot be read or is not valid JSON
        """
        dictionary = _read_dictionary(Path(path))
        self.save_custom(dictionary)
        return dictionary

    def export(self, path: Path, dictionary: Dictionary) -> Path:
        path = Path(path)
        _write_atomic(path, dictionary.to_json(indent=2) + "\n")
        return path

    def add_lines(self, raw: str) -> MergeResult:
        """Merge quick-add lines into the active dictionary and save it.

        Nothing is saved when ``raw`` holds no valid line.
        """
        result = merge_lines(raw, self.load_active().dictionary)
        if result.count:
            self.save_custom(result.dictionary)
        return result


def load_dictionary_file(path: Path) -> Dictionary:
    """Read a dictionary JSON file without saving it anywhere."""
    return _read_dictionary(Path(path))
