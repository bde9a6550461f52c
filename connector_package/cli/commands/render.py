"""CLI command for printing a connector config in its normalized form."""

import sys

import click

from connector_package.core.exceptions import ConnectorConfigError
from connector_package.models.loader import from_file, to_yaml, write_to_file


@click.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the normalized config to this file instead of stdout",
)
def render(config_path: str, output: str | None):
    """Render a connector config as normalized, tagged YAML.

    The schema version of the input is kept; unset optional fields are
    dropped and scalar values are written in canonical form.

    Examples:

        connector-package render connector.yaml
        connector-package render connector.yaml -o normalized.yaml
    """
    try:
        config = from_file(config_path)
        if output:
            write_to_file(config, output)
            click.echo(f"✓ Wrote {output}")
        else:
            click.echo(to_yaml(config), nl=False)
    except ConnectorConfigError as e:
        click.echo(f"✗ Connector config validation failed: {e}", err=True)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"✗ Could not read or write connector config: {e}", err=True)
        sys.exit(1)
