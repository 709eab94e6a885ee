"""Options and helpers shared by CLI commands."""

import sys

import click

vars_option = click.option(
    "--vars",
    multiple=True,
    help="CLI variables in key=value format (can be used multiple times)",
)


def parse_cli_vars(vars: tuple) -> dict[str, str] | None:
    """Parse ``key=value`` pairs; exit with status 1 on a malformed pair."""
    cli_vars = {}
    for var in vars:
        if "=" not in var:
            click.echo(f"Error: Invalid variable format: {var}. Use key=value", err=True)
            sys.exit(1)
        key, value = var.split("=", 1)
        cli_vars[key] = value
    return cli_vars or None
