"""textprep - Recipe steps for preprocessing text columns.

Declarative, immutable preprocessing steps with a train (prep) phase and
an apply (bake) phase, including tokenization and stemming of token lists.
"""

__version__ = "0.1.0"

# Core classes
from textprep.core.dataset import Dataset

# Exceptions
from textprep.core.exceptions import (
    ColumnTypeError,
    ConfigurationError,
    RecipeError,
    SelectionError,
    StateError,
    StepError,
    TextPrepError,
)
from textprep.core.recipe import Recipe

# Steps
from textprep.steps import StemStep, Step, TokenizeStep, resolve_stemmer

# Public API
from textprep.api import build_recipe, from_yaml, run_recipe_from_yaml

__all__ = [
    # Version
    "__version__",
    # Public API
    "from_yaml",
    "build_recipe",
    "run_recipe_from_yaml",
    # Core classes
    "Dataset",
    "Recipe",
    "Step",
    "StemStep",
    "TokenizeStep",
    "resolve_stemmer",
    # Exceptions
    "TextPrepError",
    "SelectionError",
    "ColumnTypeError",
    "ConfigurationError",
    "StateError",
    "RecipeError",
    "StepError",
]
