"""
Validate command for CLI.

Loads a manifest through the full protocol: version check plus schema
validation.
"""

import sys
from pathlib import Path

import click

from ...exceptions import CloudAssemblySchemaError
from ..utils import describe_load_error, load_manifest_file, resolve_kind


@click.command()
@click.argument("manifest_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--assets", is_flag=True, help="Treat the file as an asset manifest (assets.json)")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show detailed validation errors",
)
@click.pass_obj
def validate(config, manifest_file: Path, assets: bool, verbose: bool) -> None:
    """
    Validate a manifest file against the schema.

    MANIFEST_FILE: Path to manifest.json (or assets.json with --assets)

    Examples:
        cdk-manifest validate cdk.out/manifest.json
        cdk-manifest validate cdk.out/assets.json --assets --verbose
    """
    try:
        load_manifest_file(manifest_file, resolve_kind(assets))
    except CloudAssemblySchemaError as e:
        click.echo(click.style(f"❌ Manifest '{manifest_file}' is invalid!", fg="red"), err=True)
        click.echo(
            click.style(describe_load_error(e, verbose, config.max_error_lines), fg="red"),
            err=True,
        )
        sys.exit(1)

    click.echo(click.style(f"✅ Manifest '{manifest_file}' is valid!", fg="green"))
