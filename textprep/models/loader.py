"""Recipe loader with YAML parsing and template rendering."""

from pathlib import Path
from typing import Dict

import yaml

from textprep.core.exceptions import RecipeError
from textprep.models.recipe_config import RecipeConfig
from textprep.models.templates import render_templates


def load_recipe(path: str, cli_vars: Dict[str, str] | None = None) -> RecipeConfig:
    """
    Load a recipe configuration from a YAML file.

    The steps are instantiated once so unknown step types and invalid step
    fields are reported here rather than at prep time.

    Args:
        path: Path to recipe YAML file
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        Validated RecipeConfig

    Raises:
        RecipeError: If the file is missing, is not valid YAML, or fails validation
    """
    recipe_path = Path(path)
    try:
        with open(recipe_path, "r", encoding="utf-8") as f:
            recipe_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise RecipeError(f"Recipe file not found: {path}", context={"path": str(path)})
    except yaml.YAMLError as e:
        raise RecipeError(
            f"Invalid YAML in recipe file: {e}", context={"path": str(path)}
        ) from e

    if not isinstance(recipe_dict, dict):
        raise RecipeError(
            "Recipe file must contain a YAML dictionary",
            context={"path": str(path)},
        )

    recipe_dict = render_templates(recipe_dict, cli_vars)

    try:
        config = RecipeConfig.from_dict(recipe_dict)
        config.build_steps()
    except Exception as e:
        raise RecipeError(
            f"Recipe validation failed: {e}", context={"path": str(path)}
        ) from e

    return config
