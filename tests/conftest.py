"""Shared fixtures for the Lunari translator tests."""

import pytest

from lunari.config import USER_DIR_ENV
from lunari.models import Dictionary


@pytest.fixture
def sample_dictionary():
    """Small dictionary mixing plain and structured entries."""
    return Dictionary(
        meta={"name": "test"},
        words={
            "hello": "ya",
            "world": "mona",
            "alex": "aleks",
            "moon": {"l": "luna", "pos": "noun"},
            "star": {"l": "Esti"},
            "is": "esa",
            "good": "bona",
            "morning": "muna",
            "don't": "nedo",
            "iphone": "fonu",
            "empty": "",
            "broken": {"pos": "noun"},
        },
        phrases={
            "good morning": "yara muna",
            "thank you": "Grasi Tu",
        },
    )


@pytest.fixture
def lunari_home(tmp_path, monkeypatch):
    """Point the user directory at a temporary folder."""
    home = tmp_path / "home"
    monkeypatch.setenv(USER_DIR_ENV, str(home))
    return home
