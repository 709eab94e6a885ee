"""Main CLI entry point for textprep."""

import click

from textprep import __version__
from textprep.cli.commands.bake import bake
from textprep.cli.commands.list import list_steps
from textprep.cli.commands.tidy import tidy
from textprep.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """textprep - Recipe steps for preprocessing text columns."""
    pass


main.add_command(validate)
main.add_command(list_steps)
main.add_command(bake)
main.add_command(tidy)


if __name__ == "__main__":
    main()
