"""
Project-wide configuration and file locations.

This module defines the paths used by the Lunari translator: the built-in
dictionary shipped inside the package, and the per-user directory where a
custom (edited or imported) dictionary is saved.

Module Contents:
    APP_NAME: Application name for display purposes
    DATA_DIR: Package data directory containing the built-in dictionary
    BUILTIN_DICTIONARY: Path to the shipped ``lunari_dict.json``
    USER_DIR_ENV: Environment variable that overrides the user directory
    CUSTOM_DICTIONARY_NAME: File name of the saved custom dictionary
    EXPORT_FILENAME: Default file name for dictionary exports

Unlike the package data directory, the user directory is resolved at call
time (see ``user_dir``) and only created when something is saved into it.

Example:
    >>> from lunari.config import BUILTIN_DICTIONARY, custom_dictionary_path
    >>> print(f"Built-in dictionary at: {BUILTIN_DICTIONARY}")
    >>> print(f"Custom dictionary at: {custom_dictionary_path()}")
"""

import os
from pathlib import Path

# Application name for display and identification
APP_NAME = "Lunari Translator"

# Package data directory (ships the built-in dictionary)
DATA_DIR = Path(__file__).resolve().parent / "data"

# Built-in English -> Lunari dictionary
BUILTIN_DICTIONARY = DATA_DIR / "lunari_dict.json"

# Per-user directory override, e.g. LUNARI_HOME=/tmp/lunari
USER_DIR_ENV = "LUNARI_HOME"

# Saved custom dictionary, versioned so a format change can use a new name
CUSTOM_DICTIONARY_NAME = "lunari_custom_dict_v1.json"

# Default name for `lunari export`
EXPORT_FILENAME = "lunari_dict_export.json"


def user_dir() -> Path:
    """Return the per-user Lunari directory (``~/.lunari`` by default)."""
    override = os.getenv(USER_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".lunari"


def custom_dictionary_path() -> Path:
    """Return the path of the saved custom dictionary."""
    return user_dir() / CUSTOM_DICTIONARY_NAME
