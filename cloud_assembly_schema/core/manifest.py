"""
Manifest protocol: saving and loading versioned manifests.

This module provides:
- Version stamping of manifests on save
- Transparent migration of legacy stack tags on load
- A monotonic maximum-supported-version check
- JSON Schema validation that reports every violation

SCHEMA VERSIONING STRATEGY
==========================

Every persisted manifest carries a top-level "version" field holding the
semantic version of the schema it was written with. Saving always stamps
the version bundled with this build.

On load:
- Versions lower than or equal to the bundled version are accepted. There
  is no lower bound: older manifests are always readable.
- Versions greater than the bundled version are rejected with an error whose
  message starts with VERSION_MISMATCH, so that command-line tools can ask
  the user to upgrade instead of reporting a validation failure.

Load pipeline:
    read -> parse -> normalize legacy shapes -> check version -> validate

The "version" field belongs to the protocol. It is checked by the version
rule and is not passed to the schema grammar.
"""

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..constants import (ASSEMBLY_MANIFEST_KIND, ASSET_MANIFEST_KIND,
                         JSON_INDENT, MANIFEST_ENCODING, VERSION_FIELD,
                         VERSION_MISMATCH)
from ..exceptions import (CloudAssemblySchemaError, InvalidVersionFormatError,
                          MalformedManifestError, ManifestValidationError,
                          VersionMismatchError)
from ..observability import (clear_manifest_context, get_logger,
                             log_operation, set_manifest_context)
from .embedded import CURRENT_VERSION, get_validator
from .normalization import normalize_stack_tags
from .types import AssemblyManifestDict, AssetManifestDict
from .validation import SchemaValidator
from .versioning import compare_greater_than, parse_version

logger = get_logger(__name__)

PathLike = Union[str, Path]

_VALIDATION_HEADERS: Dict[str, str] = {
    ASSEMBLY_MANIFEST_KIND: "Invalid assembly manifest:",
    ASSET_MANIFEST_KIND: "Invalid asset manifest:",
}


def get_current_version() -> str:
    """Fetch the current schema version number."""
    return CURRENT_VERSION


def stamp_version(manifest: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a new manifest with "version" set to the current schema version.

    The version comes first and appears exactly once. A version already
    present on the input is replaced. The input is not modified.
    """
    previous = manifest.get(VERSION_FIELD)
    if previous is not None and previous != CURRENT_VERSION:
        logger.debug(f"Replacing version '{previous}' with '{CURRENT_VERSION}' on save")

    stamped: Dict[str, Any] = {VERSION_FIELD: CURRENT_VERSION}
    stamped.update((k, v) for k, v in manifest.items() if k != VERSION_FIELD)
    return stamped


def dumps_manifest(manifest: Dict[str, Any]) -> str:
    """
    Serialize a manifest with the version stamp, indented by two spaces.

    Raises:
        MalformedManifestError: If the manifest holds a value JSON cannot
            represent (NaN, Infinity, or a non-JSON type)
    """
    try:
        return json.dumps(
            stamp_version(manifest), indent=JSON_INDENT, ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as e:
        raise MalformedManifestError(f"Manifest cannot be encoded as JSON: {e}") from e


def is_version_mismatch(error: BaseException) -> bool:
    """Return True if `error` signals a manifest newer than this build supports."""
    return str(error).startswith(VERSION_MISMATCH)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


def parse_manifest(content: Union[str, bytes], file_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Parse the content of a manifest.

    Args:
        content: JSON text, or its UTF-8 encoded bytes
        file_path: Path the content was read from (for error reporting)

    Raises:
        MalformedManifestError: If content is not UTF-8, not JSON or not a
            JSON object
    """
    if isinstance(content, bytes):
        try:
            content = content.decode(MANIFEST_ENCODING)
        except UnicodeDecodeError as e:
            raise MalformedManifestError(
                f"Manifest is not valid {MANIFEST_ENCODING}: {e}", file_path=file_path
            ) from e

    try:
        manifest = json.loads(content, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedManifestError(f"Invalid JSON in manifest: {e}", file_path=file_path) from e

    if not isinstance(manifest, dict):
        raise MalformedManifestError(
            f"Manifest must be a JSON object, got {type(manifest).__name__}",
            file_path=file_path,
        )
    return manifest


def _schema_content(manifest: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in manifest.items() if k != VERSION_FIELD}


def _validate(
    manifest: Dict[str, Any],
    version: Any,
    *,
    kind: str = ASSEMBLY_MANIFEST_KIND,
    schema: Optional[Dict[str, Any]] = None,
    max_version: Optional[str] = None,
) -> None:
    """
    Check the version rule, then validate the manifest against its grammar.

    Args:
        manifest: Parsed (and normalized) manifest
        version: Version declared by the manifest
        kind: Document kind, selects the bundled grammar
        schema: Grammar to use instead of the bundled one
        max_version: Maximum supported version (default: current version)

    Raises:
        InvalidVersionFormatError: If either version is missing or not semver
        VersionMismatchError: If the manifest version is newer than supported
        ManifestValidationError: If the manifest violates the grammar
    """
    max_supported = parse_version(CURRENT_VERSION if max_version is None else max_version)
    if version is None:
        raise InvalidVersionFormatError(
            f"Manifest is missing the '{VERSION_FIELD}' field", version=None
        )
    actual = parse_version(version)

    # first validate the version should be accepted
    if compare_greater_than(actual, max_supported):
        raise VersionMismatchError(max_supported=str(max_supported), actual=str(actual))

    validator = get_validator(kind) if schema is None else SchemaValidator(schema)
    result = validator.validate(_schema_content(manifest))
    if not result.is_valid:
        header = _VALIDATION_HEADERS.get(kind, "Invalid manifest:")
        raise ManifestValidationError(
            result.format(header), violations=result.violations, kind=kind
        )


def validate_manifest(
    manifest: Dict[str, Any], kind: str = ASSEMBLY_MANIFEST_KIND
) -> Dict[str, Any]:
    """
    Apply the load checks to an in-memory manifest.

    Assembly manifests are normalized first; asset manifests are not.

    Args:
        manifest: Parsed manifest
        kind: Document kind

    Returns:
        The normalized, validated manifest (a new dictionary)

    Raises:
        InvalidVersionFormatError, VersionMismatchError, ManifestValidationError
    """
    if kind == ASSEMBLY_MANIFEST_KIND:
        normalized = normalize_stack_tags(manifest)
    else:
        normalized = dict(manifest)
    _validate(normalized, normalized.get(VERSION_FIELD), kind=kind)
    return normalized


def load_from_string(
    content: Union[str, bytes], kind: str = ASSEMBLY_MANIFEST_KIND, file_path: Optional[str] = None
) -> Dict[str, Any]:
    """
    Parse and validate a manifest from its JSON text (or UTF-8 bytes).

    Raises:
        MalformedManifestError: If content is not a JSON object
        InvalidVersionFormatError, VersionMismatchError, ManifestValidationError
    """
    return validate_manifest(parse_manifest(content, file_path=file_path), kind=kind)


def _save(manifest: Dict[str, Any], file_path: PathLike, kind: str) -> None:
    path = Path(file_path)
    set_manifest_context(file_path=str(path), kind=kind)
    start = time.perf_counter()
    try:
        path.write_text(dumps_manifest(manifest), encoding=MANIFEST_ENCODING)
    except (OSError, CloudAssemblySchemaError) as e:
        log_operation(
            logger,
            f"save_{kind}",
            level=logging.WARNING,
            success=False,
            duration_ms=(time.perf_counter() - start) * 1000,
            error=str(e),
        )
        raise
    else:
        log_operation(
            logger,
            f"save_{kind}",
            level=logging.DEBUG,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
    finally:
        clear_manifest_context()


def _load(file_path: PathLike, kind: str) -> Dict[str, Any]:
    path = Path(file_path)
    set_manifest_context(file_path=str(path), kind=kind)
    start = time.perf_counter()
    try:
        content = path.read_bytes()
        manifest = load_from_string(content, kind=kind, file_path=str(path))
    except (OSError, CloudAssemblySchemaError) as e:
        log_operation(
            logger,
            f"load_{kind}",
            level=logging.WARNING,
            success=False,
            duration_ms=(time.perf_counter() - start) * 1000,
            error=type(e).__name__,
        )
        raise
    else:
        log_operation(
            logger,
            f"load_{kind}",
            level=logging.DEBUG,
            duration_ms=(time.perf_counter() - start) * 1000,
            manifest_version=manifest.get(VERSION_FIELD),
        )
        return manifest
    finally:
        clear_manifest_context()


class Manifest:
    """
    Protocol utility class.

    Provides the save/load entry points for the cloud assembly manifest
    (manifest.json) and the asset manifest (assets.json).
    """

    def __init__(self):
        raise TypeError("Manifest only provides static methods")

    @staticmethod
    def save(manifest: AssemblyManifestDict, file_path: PathLike) -> None:
        """
        Save manifest to file.

        Args:
            manifest: Assembly manifest dictionary
            file_path: Destination path (replaced if it exists)

        Raises:
            OSError: If the file cannot be written
            MalformedManifestError: If the manifest cannot be encoded as JSON
        """
        _save(manifest, file_path, ASSEMBLY_MANIFEST_KIND)

    @staticmethod
    def load(file_path: PathLike) -> AssemblyManifestDict:
        """
        Load manifest from file.

        Legacy stack tags are rewritten to the canonical key/value form before
        the manifest is validated.

        Args:
            file_path: Path to the manifest file

        Returns:
            Normalized, validated manifest dictionary

        Raises:
            OSError: If the file cannot be read
            MalformedManifestError: If the file is not UTF-8 or not a JSON object
            InvalidVersionFormatError: If the version is missing or not semver
            VersionMismatchError: If the manifest is newer than supported
            ManifestValidationError: If the manifest violates the schema
        """
        return _load(file_path, ASSEMBLY_MANIFEST_KIND)

    @staticmethod
    def save_asset_manifest(asset_manifest: AssetManifestDict, file_path: PathLike) -> None:
        """
        Save an asset manifest (assets.json) to file.

        Args:
            asset_manifest: Asset manifest dictionary
            file_path: Destination path (replaced if it exists)
        """
        _save(asset_manifest, file_path, ASSET_MANIFEST_KIND)

    @staticmethod
    def load_asset_manifest(file_path: PathLike) -> AssetManifestDict:
        """
        Load an asset manifest (assets.json) and validate it against the schema.

        Args:
            file_path: Path to the asset manifest file

        Returns:
            Validated asset manifest dictionary
        """
        return _load(file_path, ASSET_MANIFEST_KIND)

    @staticmethod
    def load_from_string(content: str, kind: str = ASSEMBLY_MANIFEST_KIND) -> Dict[str, Any]:
        """Parse and validate a manifest from its JSON text."""
        return load_from_string(content, kind=kind)

    @staticmethod
    def validate(manifest: Dict[str, Any], kind: str = ASSEMBLY_MANIFEST_KIND) -> Dict[str, Any]:
        """Apply the load checks to an in-memory manifest."""
        return validate_manifest(manifest, kind=kind)

    @staticmethod
    def version() -> str:
        """Fetch the current schema version number."""
        return get_current_version()

    @staticmethod
    def _validate(
        manifest: Dict[str, Any],
        version: Any,
        *,
        kind: str = ASSEMBLY_MANIFEST_KIND,
        schema: Optional[Dict[str, Any]] = None,
        max_version: Optional[str] = None,
    ) -> None:
        _validate(manifest, version, kind=kind, schema=schema, max_version=max_version)
