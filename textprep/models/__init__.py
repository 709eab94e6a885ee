"""Models module for recipe definitions."""

from textprep.models.loader import load_recipe
from textprep.models.recipe_config import RecipeConfig
from textprep.models.runtime_config import RuntimeConfig
from textprep.models.step_config import StepConfig

__all__ = [
    "RecipeConfig",
    "StepConfig",
    "RuntimeConfig",
    "load_recipe",
]
