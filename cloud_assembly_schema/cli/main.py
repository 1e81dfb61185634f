"""
Entry point of the cdk-manifest command-line tool.
"""

import click

from .. import __version__
from ..config import CliConfig
from ..core import Manifest
from ..observability import configure_logging
from .commands.migrate import migrate
from .commands.show import show
from .commands.validate import validate


@click.group()
@click.version_option(version=__version__, prog_name="cdk-manifest")
@click.option(
    "--log-level",
    default=None,
    help="Log level (defaults to CDK_MANIFEST_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Inspect and validate cloud assembly manifests."""
    try:
        config = CliConfig(log_level=log_level)
        config.validate()
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    configure_logging(config.log_level)
    ctx.obj = config


@cli.command("schema-version")
def schema_version() -> None:
    """Print the schema version supported by this build."""
    click.echo(Manifest.version())


cli.add_command(validate)
cli.add_command(show)
cli.add_command(migrate)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
