"""CLI command for validating connector configs."""

import sys

import click

from connector_package.core.exceptions import ConnectorConfigError
from connector_package.core.logging import configure_logging
from connector_package.models.loader import from_file


@click.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: WARNING)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)
def validate(config_path: str, log_level: str, json_logs: bool):
    """Validate a connector config YAML file.

    Checks:
    - YAML syntax
    - apiVersion and config schema
    - Secret names

    Examples:

        connector-package validate connector.yaml
        connector-package validate connector.yaml --log-level DEBUG
    """
    configure_logging(level=log_level, json_format=json_logs)

    try:
        config = from_file(config_path)
    except ConnectorConfigError as e:
        click.echo(f"✗ Connector config validation failed: {e}", err=True)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"✗ Could not read connector config: {e}", err=True)
        sys.exit(1)

    meta = config.meta
    transforms = config.transforms
    click.echo(f"✓ Connector config '{meta.name}' is valid")
    click.echo(f"  API version: {config.api_version.value}")
    click.echo(f"  Type: {meta.type}")
    click.echo(f"  Version: {meta.version}")
    click.echo(f"  Topic: {meta.topic}")
    click.echo(f"  Direction: {config.direction.value}")
    click.echo(f"  Image: {config.image}")
    click.echo(f"  Secrets: {len(config.secrets())}")
    click.echo(f"  Transform steps: {len(transforms.transforms) if transforms else 0}")
