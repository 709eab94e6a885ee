"""CLI command for summarizing a trained recipe."""

import sys

import click

from textprep.api import build_recipe
from textprep.cli.options import parse_cli_vars, vars_option
from textprep.core.exceptions import RecipeError, TextPrepError
from textprep.core.io import read_dataset
from textprep.core.logging import configure_logging
from textprep.models.loader import load_recipe


@click.command()
@click.argument("recipe_path", type=click.Path(exists=True))
@click.argument("training_path", type=click.Path(exists=True))
@click.option("--step", "step_index", type=int, help="Index of the step to describe")
@vars_option
def tidy(recipe_path: str, training_path: str, step_index: int | None, vars: tuple):
    """Prep a recipe and print its steps, or one step's columns.

    Examples:

        textprep tidy recipe.yaml train.csv
        textprep tidy recipe.yaml train.csv --step 1
    """
    cli_vars = parse_cli_vars(vars)
    try:
        config = load_recipe(recipe_path, cli_vars=cli_vars)
        configure_logging(
            level=config.runtime.log_level,
            json_format=config.runtime.json_logs,
            recipe_name=config.name,
        )
        training = read_dataset(training_path)
        prepped = build_recipe(config, training).prep(training, retain=False)
    except RecipeError as e:
        click.echo(f"Recipe error: {e}", err=True)
        sys.exit(1)
    except TextPrepError as e:
        click.echo(f"Execution error: {e}", err=True)
        sys.exit(1)

    if step_index is not None and not 0 <= step_index < len(prepped.steps):
        click.echo(f"Error: step index {step_index} out of range", err=True)
        sys.exit(1)

    table = prepped.tidy(step_index)
    click.echo("\t".join(table.column_names))
    for row in table.to_pylist():
        click.echo("\t".join("" if v is None else str(v) for v in row.values()))
