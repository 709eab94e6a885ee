"""CLI command for listing available steps."""

import click

from textprep.steps import list_stemmers, list_step_types


@click.command("list-steps")
def list_steps():
    """List available step types and stemmers."""
    click.echo("Available Steps:")
    for step_type in list_step_types():
        click.echo(f"  - {step_type}")

    click.echo("Available Stemmers:")
    for stemmer in list_stemmers():
        click.echo(f"  - {stemmer}")
