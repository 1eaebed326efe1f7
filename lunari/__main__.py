"""
Entry point for running the Lunari translator as a module.

Usage:
    python -m lunari --help
    python -m lunari translate --text "Hello, world!"
    python -m lunari add "good morning = yara muna"
"""
from .cli import app


if __name__ == "__main__":
    app()
