"""Public Python API for textprep package.

This module provides the main entry points for loading recipes from YAML
and running them on datasets stored in files.
"""

from pathlib import Path

from textprep.core.dataset import Dataset
from textprep.core.io import read_dataset
from textprep.core.recipe import Recipe
from textprep.models.loader import load_recipe
from textprep.models.recipe_config import RecipeConfig


def from_yaml(path: str, cli_vars: dict[str, str] | None = None) -> RecipeConfig:
    """Load a recipe configuration from a YAML file.

    Raises:
        RecipeError: If file not found, invalid YAML, or validation fails

    Example:
        >>> config = from_yaml("examples/recipes/reviews.yaml")
        >>> print(config.name)
        reviews
    """
    return load_recipe(path, cli_vars=cli_vars)


def build_recipe(config: RecipeConfig, template: Dataset) -> Recipe:
    """Create an untrained Recipe from configuration and a template dataset.

    Args:
        config: Recipe configuration
        template: Dataset whose columns are the recipe inputs

    Returns:
        Untrained Recipe with the configured steps
    """
    recipe = Recipe.from_dataset(template, outcomes=config.outcomes, name=config.name)
    for step in config.build_steps():
        recipe = recipe.add_step(step)
    return recipe


def run_recipe_from_yaml(
    recipe_path: str,
    training_path: str | Path,
    new_data_path: str | Path | None = None,
    cli_vars: dict[str, str] | None = None,
) -> Dataset:
    """Load a recipe, prep it on training data and bake.

    When ``new_data_path`` is None the processed training data is returned.

    Raises:
        RecipeError: If recipe loading fails
        TextPrepError: If prep or bake fails

    Example:
        >>> from textprep import run_recipe_from_yaml
        >>> baked = run_recipe_from_yaml("recipe.yaml", "train.csv", "test.csv")
    """
    config = from_yaml(recipe_path, cli_vars=cli_vars)
    training = read_dataset(training_path)
    recipe = build_recipe(config, training)
    prepped = recipe.prep(training, retain=new_data_path is None or config.runtime.retain)

    if new_data_path is None:
        return prepped.juice()
    return prepped.bake(read_dataset(new_data_path))
