"""Core module for textprep package."""

from textprep.core.dataset import Dataset
from textprep.core.exceptions import (
    ColumnTypeError,
    ConfigurationError,
    RecipeError,
    SelectionError,
    StateError,
    StepError,
    TextPrepError,
)
from textprep.core.ids import rand_id
from textprep.core.selectors import ColumnInfo, resolve_selectors, summarize_schema

# Imported last: the engine depends on textprep.steps, which imports the modules above
from textprep.core.recipe import Recipe

__all__ = [
    "Dataset",
    "Recipe",
    "ColumnInfo",
    "resolve_selectors",
    "summarize_schema",
    "rand_id",
    "TextPrepError",
    "SelectionError",
    "ColumnTypeError",
    "ConfigurationError",
    "StateError",
    "RecipeError",
    "StepError",
]
