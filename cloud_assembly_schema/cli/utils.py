"""
Utility functions for CLI commands.

This module provides shared utilities for CLI operations.
"""

import json
from pathlib import Path
from typing import Any

import click

from ..constants import (ASSEMBLY_MANIFEST_KIND, ASSET_MANIFEST_KIND,
                         UPGRADE_HINT)
from ..core import Manifest, is_version_mismatch
from ..core.validation import ValidationResult
from ..exceptions import CloudAssemblySchemaError, ManifestValidationError


def resolve_kind(assets: bool) -> str:
    """Map the --assets flag to a document kind."""
    return ASSET_MANIFEST_KIND if assets else ASSEMBLY_MANIFEST_KIND


def load_manifest_file(file_path: Path, kind: str) -> dict[str, Any]:
    """
    Load a manifest file through the manifest protocol.

    Args:
        file_path: Path to the manifest file
        kind: Document kind

    Returns:
        Normalized, validated manifest dictionary

    Raises:
        CloudAssemblySchemaError: If the manifest cannot be loaded
        click.ClickException: If the file cannot be read
    """
    try:
        if kind == ASSET_MANIFEST_KIND:
            return Manifest.load_asset_manifest(file_path)
        return Manifest.load(file_path)
    except OSError as e:
        raise click.ClickException(f"Failed to read manifest file: {e}") from e


def save_manifest_file(file_path: Path, manifest: dict[str, Any], kind: str) -> None:
    """
    Save a manifest through the manifest protocol.

    Raises:
        click.ClickException: If file cannot be written
    """
    try:
        if kind == ASSET_MANIFEST_KIND:
            Manifest.save_asset_manifest(manifest, file_path)
        else:
            Manifest.save(manifest, file_path)
    except OSError as e:
        raise click.ClickException(f"Failed to write manifest file: {e}") from e


def describe_load_error(error: CloudAssemblySchemaError, verbose: bool, max_lines: int) -> str:
    """
    Render a load failure for the terminal.

    A version mismatch is rendered with an upgrade hint; validation failures
    list their violations when verbose is set.
    """
    if is_version_mismatch(error):
        return f"{error.message}\n{UPGRADE_HINT}"

    if isinstance(error, ManifestValidationError):
        result = ValidationResult(violations=error.violations)
        if verbose:
            return result.format(error.message.splitlines()[0], limit=max_lines)
        return (
            f"{error.message.splitlines()[0]} {len(error.violations)} violation(s) found "
            f"(use --verbose to list them)"
        )

    return error.message


def format_manifest_output(manifest: dict[str, Any], format_type: str, kind: str) -> str:
    """
    Format manifest for output.

    Args:
        manifest: Manifest dictionary
        format_type: Output format ('json', 'pretty')
        kind: Document kind

    Returns:
        Formatted string representation
    """
    if format_type != "pretty":
        return json.dumps(manifest, indent=2, ensure_ascii=False)

    lines = [f"Schema Version: {manifest.get('version', 'N/A')}"]
    if kind == ASSET_MANIFEST_KIND:
        lines.append(f"File assets: {len(manifest.get('files', {}))}")
        lines.append(f"Docker image assets: {len(manifest.get('dockerImages', {}))}")
        return "\n".join(lines)

    artifacts = manifest.get("artifacts", {})
    lines.append(f"Artifacts: {len(artifacts)}")
    for artifact_id, artifact in artifacts.items():
        lines.append(f"  - {artifact_id} ({artifact.get('type', 'none')})")
    if manifest.get("missing"):
        lines.append(f"Missing context: {len(manifest['missing'])}")
    return "\n".join(lines)
