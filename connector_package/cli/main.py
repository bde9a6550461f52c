"""Main CLI entry point for connector_package."""

import click

from connector_package import __version__
from connector_package.cli.commands.render import render
from connector_package.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """Connector Package - versioned connector configuration tools."""
    pass


# Register commands
main.add_command(validate)
main.add_command(render)


if __name__ == "__main__":
    main()
