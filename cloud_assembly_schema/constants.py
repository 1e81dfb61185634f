"""
Constants for CLOUD_ASSEMBLY_SCHEMA.

This module contains all shared constants used across the codebase to avoid
magic strings and improve maintainability.
"""

from typing import Final

# ============================================================================
# PROTOCOL CONSTANTS
# ============================================================================

VERSION_MISMATCH: Final[str] = "Cloud assembly schema version mismatch"
"""
Well-known prefix of the error raised when a manifest was produced by a newer
schema version than this build supports. Command-line tools match on it to
tell the user to upgrade instead of reporting a generic validation failure.
"""

VERSION_FIELD: Final[str] = "version"
"""Top-level field carrying the schema version of a persisted document."""

JSON_INDENT: Final[int] = 2
"""Indentation used when serializing manifests."""

MANIFEST_ENCODING: Final[str] = "utf-8"
"""Text encoding of persisted manifests."""

# ============================================================================
# DOCUMENT KINDS
# ============================================================================

ASSEMBLY_MANIFEST_KIND: Final[str] = "assembly"
"""Document kind of the cloud assembly manifest (manifest.json)."""

ASSET_MANIFEST_KIND: Final[str] = "assets"
"""Document kind of the asset manifest (assets.json)."""

DOCUMENT_KINDS: Final[tuple[str, ...]] = (ASSEMBLY_MANIFEST_KIND, ASSET_MANIFEST_KIND)
"""All document kinds understood by the protocol."""

DEFAULT_MANIFEST_FILENAME: Final[str] = "manifest.json"
DEFAULT_ASSET_MANIFEST_FILENAME: Final[str] = "assets.json"

# ============================================================================
# EMBEDDED SCHEMA FILES
# ============================================================================

SCHEMA_PACKAGE: Final[str] = "cloud_assembly_schema.schema"
"""Package holding the bundled schema documents."""

ASSEMBLY_SCHEMA_FILE: Final[str] = "cloud-assembly.schema.json"
ASSET_SCHEMA_FILE: Final[str] = "assets.schema.json"
VERSION_FILE: Final[str] = "cloud-assembly.version.json"

# ============================================================================
# LEGACY TAG FIELDS
# ============================================================================

LEGACY_TAG_KEY: Final[str] = "Key"
LEGACY_TAG_VALUE: Final[str] = "Value"
TAG_KEY: Final[str] = "key"
TAG_VALUE: Final[str] = "value"

# ============================================================================
# CLI CONSTANTS
# ============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
"""Default log level of the command-line tool."""

UPGRADE_HINT: Final[str] = (
    "This manifest was produced by a newer version of the toolkit. "
    "Upgrade cloud-assembly-schema to read it."
)
"""Hint printed by the CLI when a version mismatch is detected."""
