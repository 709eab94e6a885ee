"""CLI command for validating recipes."""

import sys

import click

from textprep.cli.options import parse_cli_vars, vars_option
from textprep.core.exceptions import RecipeError
from textprep.models.loader import load_recipe


@click.command()
@click.argument("recipe_path", type=click.Path(exists=True))
@vars_option
def validate(recipe_path: str, vars: tuple):
    """Validate a recipe YAML file.

    Checks:
    - YAML syntax
    - Recipe schema validation
    - Template variable resolution
    - Step types and step fields

    Examples:

        textprep validate recipe.yaml
        textprep validate recipe.yaml --vars column=review
    """
    cli_vars = parse_cli_vars(vars)
    try:
        config = load_recipe(recipe_path, cli_vars=cli_vars)
    except RecipeError as e:
        click.echo(f"✗ Recipe validation failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Recipe '{config.name}' is valid")
    click.echo(f"  Outcomes: {', '.join(config.outcomes) or '(none)'}")
    click.echo(f"  Steps: {len(config.steps)}")
    for step in config.build_steps():
        click.echo(f"    - {step.format(config.runtime.print_width)}")
