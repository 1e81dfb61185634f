"""
Show command for CLI.

Displays a manifest after it has been loaded and normalized.
"""

from pathlib import Path

import click

from ...exceptions import CloudAssemblySchemaError
from ..utils import (describe_load_error, format_manifest_output,
                     load_manifest_file, resolve_kind)


@click.command()
@click.argument("manifest_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--assets", is_flag=True, help="Treat the file as an asset manifest (assets.json)")
@click.option(
    "--format",
    "format_type",
    type=click.Choice(["json", "pretty"]),
    default="json",
    show_default=True,
    help="Output format",
)
@click.pass_obj
def show(config, manifest_file: Path, assets: bool, format_type: str) -> None:
    """
    Display a manifest as this version of the protocol reads it.

    Legacy stack tags are shown in their normalized key/value form.

    Examples:
        cdk-manifest show cdk.out/manifest.json
        cdk-manifest show cdk.out/manifest.json --format pretty
    """
    kind = resolve_kind(assets)
    try:
        manifest = load_manifest_file(manifest_file, kind)
    except CloudAssemblySchemaError as e:
        raise click.ClickException(describe_load_error(e, True, config.max_error_lines)) from e

    click.echo(format_manifest_output(manifest, format_type, kind))
