"""CLI command for prepping and baking recipes."""

import sys

import click

from textprep.api import build_recipe
from textprep.cli.options import parse_cli_vars, vars_option
from textprep.core.exceptions import RecipeError, TextPrepError
from textprep.core.io import iter_json_lines, read_dataset, write_dataset
from textprep.core.logging import configure_logging
from textprep.models.loader import load_recipe


@click.command()
@click.argument("recipe_path", type=click.Path(exists=True))
@click.argument("training_path", type=click.Path(exists=True))
@click.option(
    "--new-data",
    "new_data_path",
    type=click.Path(exists=True),
    help="Data to bake (default: the processed training data)",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(),
    help="Output file (.parquet or .jsonl); JSON lines on stdout if omitted",
)
@vars_option
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: from recipe runtime, else INFO)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)
def bake(
    recipe_path: str,
    training_path: str,
    new_data_path: str | None,
    output_path: str | None,
    vars: tuple,
    log_level: str | None,
    json_logs: bool,
):
    """Prep a recipe on training data and bake new data.

    Examples:

        textprep bake recipe.yaml train.csv
        textprep bake recipe.yaml train.csv --new-data test.csv --output baked.parquet
        textprep bake recipe.yaml train.csv --log-level DEBUG --json-logs
    """
    cli_vars = parse_cli_vars(vars)
    try:
        config = load_recipe(recipe_path, cli_vars=cli_vars)
    except RecipeError as e:
        click.echo(f"Recipe error: {e}", err=True)
        sys.exit(1)

    configure_logging(
        level=log_level or config.runtime.log_level,
        json_format=json_logs or config.runtime.json_logs,
        recipe_name=config.name,
    )

    try:
        training = read_dataset(training_path)
        recipe = build_recipe(config, training)
        prepped = recipe.prep(training, retain=new_data_path is None or config.runtime.retain)
        if new_data_path is None:
            result = prepped.juice()
        else:
            result = prepped.bake(read_dataset(new_data_path))

        if output_path:
            write_dataset(result, output_path)
            click.echo(f"Wrote {result.row_count} rows to {output_path}", err=True)
        else:
            for line in iter_json_lines(result):
                click.echo(line)
    except TextPrepError as e:
        click.echo(f"Execution error: {e}", err=True)
        sys.exit(1)
