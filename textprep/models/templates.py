"""Template rendering for recipe values with Jinja2-style syntax."""

import os
import re
from typing import Any, Dict

from textprep.core.exceptions import RecipeError

_TEMPLATE_PATTERN = re.compile(r"\{\{\s*([^}]+?)\s*\}\}")
_FUNC_PATTERN = re.compile(r"(\w+)\(['\"]([^'\"]+)['\"]\)")


def render_templates(
    recipe_dict: Dict[str, Any], cli_vars: Dict[str, str] | None = None
) -> Dict[str, Any]:
    """
    Render Jinja2-style templates in a recipe dictionary.

    Supports:
    - {{ env_var('VAR_NAME') }} - environment variable lookup
    - {{ var('VAR_NAME') }} - CLI variable lookup
    - {{ recipe.name }} - recipe metadata

    Args:
        recipe_dict: Recipe dictionary (may contain template expressions)
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        Recipe dictionary with templates rendered
    """
    context = {
        "recipe": {"name": recipe_dict.get("name", "")},
        "env_var": _get_env_var,
        "var": lambda key: _get_cli_var(key, cli_vars or {}),
    }
    return _render_value(recipe_dict, context)


def _get_env_var(key: str) -> str:
    value = os.environ.get(key)
    if value is None:
        raise RecipeError(
            f"Environment variable '{key}' not found",
            context={"key": key},
        )
    return value


def _get_cli_var(key: str, cli_vars: Dict[str, str]) -> str:
    if key not in cli_vars:
        raise RecipeError(
            f"CLI variable '{key}' not provided",
            context={"key": key, "available": list(cli_vars.keys())},
        )
    return cli_vars[key]


def _render_value(value: Any, context: Dict[str, Any]) -> Any:
    if isinstance(value, dict):
        return {key: _render_value(item, context) for key, item in value.items()}
    if isinstance(value, list):
        return [_render_value(item, context) for item in value]
    if isinstance(value, str):
        return _render_string(value, context)
    return value


def _render_string(text: str, context: Dict[str, Any]) -> str:
    def replace(match: re.Match) -> str:
        expr = match.group(1).strip()
        func_match = _FUNC_PATTERN.fullmatch(expr)
        if func_match:
            func_name, arg = func_match.groups()
            func = context.get(func_name)
            if not callable(func):
                raise RecipeError(
                    f"Unknown function: {func_name}",
                    context={"expression": expr, "available": ["env_var", "var"]},
                )
            return str(func(arg))

        try:
            result: Any = context
            for part in expr.split("."):
                result = result[part]
        except (KeyError, TypeError) as e:
            raise RecipeError(
                f"Template rendering failed: {expr}",
                context={"expression": expr, "error": str(e)},
            ) from e
        return str(result)

    return _TEMPLATE_PATTERN.sub(replace, text)
