"""
Command-line interface for the Lunari translator.

Provides commands for:
- Translating text or files
- Quick-adding dictionary entries
- Viewing, importing, exporting and resetting the dictionary

Usage:
    lunari translate --text "Hello, world!"
    lunari translate --input story.txt --output story.lunari.txt --mark-unknown
    lunari add "hello = ya" "good morning = yara muna"
    lunari dictionary --search moon
    lunari import my_dict.json
    lunari export
    lunari reset
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from lunari import __version__
from lunari.config import APP_NAME, EXPORT_FILENAME
from lunari.models import Dictionary, WordEntry
from lunari.store import CUSTOM_LABEL, DictionaryLoadError, DictionaryStore, load_dictionary_file
from lunari.translate import (
    DictionaryTranslator,
    TranslationOptions,
    TranslationResult,
    lookup_phrase,
    lookup_word,
)

app = typer.Typer(
    name="lunari",
    help="Lunari Translator: rule-based English to Lunari word and phrase translation",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{APP_NAME} v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="Enable debug logging",
    ),
):
    """Lunari Translator: English to Lunari, one word at a time."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/] {escape(message)}", style="bold")
    raise typer.Exit(1)


def _print_result(result: TranslationResult) -> None:
    console.print(result.text, markup=False, highlight=False, soft_wrap=True)
    if result.unknown_words:
        unknown = ", ".join(dict.fromkeys(result.unknown_words))
        console.print(f"[dim]Unknown words: {escape(unknown)}[/]")


@app.command()
def translate(
    input_text: Optional[str] = typer.Option(
        None, "--text", "-t",
        help="English text to translate",
    ),
    input_file: Optional[Path] = typer.Option(
        None, "--input", "-i",
        help="English text file to translate",
    ),
    output_file: Optional[Path] = typer.Option(
        None, "--output", "-o",
        help="Write the translation to this file",
    ),
    dict_file: Optional[Path] = typer.Option(
        None, "--dict", "-d",
        help="Use this dictionary JSON instead of the active one (not saved)",
    ),
    prefer_phrases: bool = typer.Option(
        True, "--prefer-phrases/--no-prefer-phrases",
        help="Try a whole-input phrase match before word-by-word translation",
    ),
    mark_unknown: bool = typer.Option(
        False, "--mark-unknown",
        help="Wrap untranslatable words as [word]",
    ),
    interactive: bool = typer.Option(
        False, "--interactive",
        help="Translate lines as you type them (empty line to quit)",
    ),
):
    """Translate English text to Lunari."""
    if input_text is None and input_file is None and not interactive:
        _fail("Provide --text, --input or --interactive")

    try:
        if dict_file is not None:
            dictionary = load_dictionary_file(dict_file)
        else:
            dictionary = DictionaryStore().load_active().dictionary
    except DictionaryLoadError as e:
        _fail(str(e))

    translator = DictionaryTranslator(
        dictionary,
        TranslationOptions(prefer_phrases=prefer_phrases, mark_unknown=mark_unknown),
    )

    if interactive:
        _interactive_loop(translator)
        return

    if input_text is not None:
        text = input_text
    else:
        try:
            text = input_file.read_text(encoding="utf-8")
        except OSError as e:
            _fail(f"Cannot read {input_file}: {e}")

    result = translator.translate(text)

    if output_file is not None:
        try:
            output_file.write_text(result.text, encoding="utf-8")
        except OSError as e:
            _fail(f"Cannot write {output_file}: {e}")
        console.print(f"[green]Saved translation to[/] {escape(str(output_file))}")
        if result.unknown_words:
            console.print(f"[dim]{len(result.unknown_words)} unknown words[/]")
    else:
        _print_result(result)


def _interactive_loop(translator: DictionaryTranslator) -> None:
    console.print("[dim]Type English text, empty line to quit.[/]")
    while True:
        try:
            line = Prompt.ask("[cyan]English[/]", default="", show_default=False)
        except (EOFError, KeyboardInterrupt):
            break
        if not line.strip():
            break
        _print_result(translator.translate(line))


@app.command()
def add(
    lines: Optional[List[str]] = typer.Argument(
        None,
        help='Entries like "hello = ya" (one per argument)',
    ),
    lines_file: Optional[Path] = typer.Option(
        None, "--file", "-f",
        help="Text file with one 'english = lunari' entry per line",
    ),
):
    """Quick-add entries to the custom dictionary."""
    parts = list(lines or [])
    if lines_file is not None:
        try:
            parts.append(lines_file.read_text(encoding="utf-8"))
        except OSError as e:
            _fail(f"Cannot read {lines_file}: {e}")

    result = DictionaryStore().add_lines("\n".join(parts))
    if result.count == 0:
        console.print("[yellow]No valid lines found to add[/]")
        raise typer.Exit(1)
    console.print(f"[green]Added {result.count} entries to custom dictionary (saved)[/]")


@app.command()
def dictionary(
    list_entries: bool = typer.Option(
        False, "--list", "-l",
        help="List all words",
    ),
    phrases: bool = typer.Option(
        False, "--phrases", "-p",
        help="List all phrases",
    ),
    search: Optional[str] = typer.Option(
        None, "--search", "-s",
        help="Look up a word or phrase",
    ),
):
    """Show the active dictionary."""
    active = DictionaryStore().load_active()
    console.print(f"[bold]{escape(active.summary)}[/]")

    if search:
        found = lookup_phrase(active.dictionary, search) or lookup_word(active.dictionary, search.strip())
        if found:
            console.print(f"[green]{escape(search)}[/] → [cyan]{escape(found)}[/]")
        else:
            console.print(f"[yellow]Not found:[/] {escape(search)}")
        return

    if list_entries:
        console.print(_words_table(active.dictionary))
    if phrases:
        console.print(_phrases_table(active.dictionary))


def _words_table(dictionary: Dictionary) -> Table:
    table = Table(title=f"Words ({dictionary.word_count})")
    table.add_column("English", style="cyan")
    table.add_column("Lunari", style="green")
    table.add_column("Notes", style="dim")
    for english in sorted(dictionary.words):
        entry = WordEntry.from_value(dictionary.words[english])
        if entry is None:
            table.add_row(escape(english), "", "unusable entry")
            continue
        notes = ", ".join(f"{k}={v}" for k, v in entry.extras.items())
        table.add_row(escape(english), escape(entry.lunari), escape(notes))
    return table


def _phrases_table(dictionary: Dictionary) -> Table:
    table = Table(title=f"Phrases ({dictionary.phrase_count})")
    table.add_column("English", style="cyan")
    table.add_column("Lunari", style="green")
    for english in sorted(dictionary.phrases):
        table.add_row(escape(english), escape(dictionary.phrases[english]))
    return table


@app.command("import")
def import_dictionary(
    path: Path = typer.Argument(..., help="Dictionary JSON file"),
):
    """Use a dictionary JSON file as the custom dictionary."""
    store = DictionaryStore()
    try:
        imported = store.import_file(path)
    except DictionaryLoadError as e:
        _fail(str(e))
    console.print(f"[green]{escape(imported.summary(CUSTOM_LABEL))}[/]")


@app.command()
def export(
    path: Path = typer.Argument(
        Path(EXPORT_FILENAME),
        help="Where to write the dictionary JSON",
    ),
):
    """Export the active dictionary as JSON."""
    store = DictionaryStore()
    active = store.load_active()
    try:
        written = store.export(path, active.dictionary)
    except OSError as e:
        _fail(f"Cannot write {path}: {e}")
    console.print(f"[green]Exported[/] {escape(active.summary)} [green]to[/] {escape(str(written))}")


@app.command()
def reset():
    """Discard the custom dictionary and go back to the built-in one."""
    store = DictionaryStore()
    if store.clear_custom():
        console.print("[green]Custom dictionary removed[/]")
    else:
        console.print("[dim]No custom dictionary saved[/]")
    console.print(escape(store.load_active().summary))


@app.command()
def info():
    """Show version, active dictionary and file locations."""
    store = DictionaryStore()
    active = store.load_active()

    console.print(f"[bold]{APP_NAME} v{__version__}[/]")
    console.print(escape(active.summary), highlight=False)
    console.print()

    table = Table(title="Dictionary files")
    table.add_column("File", style="cyan")
    table.add_column("Location")
    table.add_row("Built-in", str(store.builtin_path))
    table.add_row(
        "Custom",
        f"{store.custom_path} ({'saved' if store.has_custom() else 'not saved'})",
    )
    console.print(table)
