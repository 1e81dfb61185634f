"""
Migrate command for CLI.

Rewrites a manifest in the current canonical shape, stamped with the
current schema version.
"""

from pathlib import Path

import click

from ...core import Manifest
from ...exceptions import CloudAssemblySchemaError
from ..utils import (describe_load_error, load_manifest_file, resolve_kind,
                     save_manifest_file)


@click.command()
@click.argument("manifest_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--assets", is_flag=True, help="Treat the file as an asset manifest (assets.json)")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the migrated manifest here instead of overwriting MANIFEST_FILE",
)
@click.pass_obj
def migrate(config, manifest_file: Path, assets: bool, output: Path | None) -> None:
    """
    Rewrite a manifest with the current schema version.

    Legacy stack tags ({"Key", "Value"}) are written in key/value form.
    Manifests produced by a newer schema version are refused.

    Examples:
        cdk-manifest migrate cdk.out/manifest.json
        cdk-manifest migrate old/manifest.json -o new/manifest.json
    """
    kind = resolve_kind(assets)
    try:
        manifest = load_manifest_file(manifest_file, kind)
    except CloudAssemblySchemaError as e:
        raise click.ClickException(describe_load_error(e, True, config.max_error_lines)) from e

    destination = output or manifest_file
    previous_version = manifest.get("version")
    save_manifest_file(destination, manifest, kind)
    click.echo(
        click.style(
            f"✅ Wrote '{destination}' (schema version {previous_version} -> {Manifest.version()})",
            fg="green",
        )
    )
