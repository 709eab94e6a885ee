"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from textprep.core.dataset import Dataset

GREEN_EGGS = [
    "I would not eat them here or there.",
    "I would not eat them anywhere.",
    "I would not eat green eggs and ham.",
    "I do not like them, Sam-I-am.",
]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def text_dataset():
    """Raw text with an unrelated numeric column."""
    return Dataset.from_pydict(
        {"text": list(GREEN_EGGS), "score": [1, 2, 3, 4]},
        metadata={"source": "test"},
    )


@pytest.fixture
def token_dataset():
    """Already tokenized text with an unrelated id column."""
    return Dataset.from_pydict(
        {
            "id": [1, 2],
            "text": [
                ["I", "would", "not", "eat", "them", "here", "or", "there"],
                ["organizing", "organizes", "organization"],
            ],
        },
        metadata={"source": "test"},
    )
