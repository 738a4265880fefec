"""Pytest configuration for parser corpus tests."""

from pathlib import Path

import pytest

# Corpus directories
CORPORA_DIR = Path(__file__).parent.parent / "corpora"
CHARSHEET_CORPUS_DIR = CORPORA_DIR / "charsheet"


@pytest.fixture
def charsheet_corpus_dir() -> Path:
    """Return path to the character sheet corpus directory."""
    return CHARSHEET_CORPUS_DIR
