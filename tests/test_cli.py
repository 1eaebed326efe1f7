"""
Tests for the command-line interface.

The user directory is redirected to a temporary folder, so every test
starts from the shipped built-in dictionary.

Run with: pytest tests/test_cli.py -v
"""

import json

import pytest
from typer.testing import CliRunner

from lunari import __version__
from lunari.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_home(lunari_home):
    return lunari_home


class TestVersion:

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestTranslateCommand:

    def test_text(self):
        result = runner.invoke(app, ["translate", "--text", "Hello, world!"])

        assert result.exit_code == 0
        assert "Ya, mona!" in result.stdout

    def test_requires_input(self):
        result = runner.invoke(app, ["translate"])

        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_mark_unknown(self):
        """Brackets are printed literally, not read as markup."""
        result = runner.invoke(app, ["translate", "-t", "hello zzz", "--mark-unknown"])

        assert result.exit_code == 0
        assert "ya [zzz]" in result.stdout
        assert "Unknown words: zzz" in result.stdout

    def test_phrase_overrides_without_preference(self):
        result = runner.invoke(app, ["translate", "-t", "Good Morning", "--no-prefer-phrases"])

        assert result.exit_code == 0
        assert "yara muna" in result.stdout

    def test_file_to_file(self, tmp_path):
        source = tmp_path / "story.txt"
        source.write_text("The moon's light.\nGood night!\n", encoding="utf-8")
        target = tmp_path / "story.lunari.txt"

        result = runner.invoke(app, ["translate", "-i", str(source), "-o", str(target)])

        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8") == "La luna-de lumi.\nBona nocte!\n"

    def test_unwritable_output(self, tmp_path):
        """Writing onto a directory is reported, not raised."""
        result = runner.invoke(app, ["translate", "-t", "hello", "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert "Cannot write" in result.stdout

    def test_missing_input_file(self, tmp_path):
        result = runner.invoke(app, ["translate", "-i", str(tmp_path / "absent.txt")])

        assert result.exit_code == 1

    def test_explicit_dictionary(self, tmp_path):
        path = tmp_path / "mini.json"
        path.write_text(json.dumps({"words": {"hello": "hola"}}), encoding="utf-8")

        result = runner.invoke(app, ["translate", "-t", "Hello", "--dict", str(path)])

        assert result.exit_code == 0
        assert "Hola" in result.stdout

    def test_invalid_explicit_dictionary(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")

        result = runner.invoke(app, ["translate", "-t", "Hello", "--dict", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_interactive(self):
        result = runner.invoke(app, ["translate", "--interactive"], input="hello moon\n\n")

        assert result.exit_code == 0
        assert "ya luna" in result.stdout


class TestAddCommand:

    def test_add_then_translate(self):
        result = runner.invoke(app, ["add", "hello = yo", "good evening = bona vespera"])

        assert result.exit_code == 0
        assert "Added 2 entries" in result.stdout

        result = runner.invoke(app, ["translate", "-t", "Hello"])
        assert "Yo" in result.stdout

        result = runner.invoke(app, ["translate", "-t", "good evening"])
        assert "bona vespera" in result.stdout

    def test_add_from_file(self, tmp_path):
        lines = tmp_path / "adds.txt"
        lines.write_text("sun = sola\nbad line\n", encoding="utf-8")

        result = runner.invoke(app, ["add", "--file", str(lines)])

        assert result.exit_code == 0
        assert "Added 1 entries" in result.stdout

    def test_no_valid_lines(self):
        result = runner.invoke(app, ["add", "nothing here"])

        assert result.exit_code == 1
        assert "No valid lines" in result.stdout


class TestDictionaryCommands:

    def test_status_line(self):
        result = runner.invoke(app, ["dictionary"])

        assert result.exit_code == 0
        assert "Built-in dictionary" in result.stdout

    def test_search_word(self):
        result = runner.invoke(app, ["dictionary", "--search", "moon"])

        assert "luna" in result.stdout

    def test_search_phrase(self):
        result = runner.invoke(app, ["dictionary", "-s", "Good Morning"])

        assert "yara muna" in result.stdout

    def test_search_missing(self):
        result = runner.invoke(app, ["dictionary", "-s", "zzz"])

        assert "Not found" in result.stdout

    def test_list(self):
        result = runner.invoke(app, ["dictionary", "--list", "--phrases"])

        assert result.exit_code == 0
        assert "hello" in result.stdout
        assert "good morning" in result.stdout

    def test_import_and_reset(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"words": {"hello": "salut"}}), encoding="utf-8")

        result = runner.invoke(app, ["import", str(path)])
        assert result.exit_code == 0
        assert "Custom dictionary (saved)" in result.stdout
        assert "Salut" in runner.invoke(app, ["translate", "-t", "Hello"]).stdout

        result = runner.invoke(app, ["reset"])
        assert result.exit_code == 0
        assert "Built-in dictionary" in result.stdout
        assert "Ya" in runner.invoke(app, ["translate", "-t", "Hello"]).stdout

    def test_import_invalid(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[1, 2", encoding="utf-8")

        result = runner.invoke(app, ["import", str(path)])

        assert result.exit_code == 1

    def test_export(self, tmp_path):
        target = tmp_path / "out.json"

        result = runner.invoke(app, ["export", str(target)])

        assert result.exit_code == 0
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["words"]["hello"] == "ya"

    def test_info(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Built-in dictionary" in result.stdout
