"""
Core cloud assembly schema components.

This module contains the manifest protocol and the pieces it is built from:
version comparison, schema validation and legacy shape normalization.
"""

from .embedded import (ASSEMBLY_SCHEMA, ASSET_SCHEMA, CURRENT_VERSION,
                       SCHEMAS, get_schema, get_validator)
from .manifest import (Manifest, dumps_manifest, get_current_version,
                       is_version_mismatch, load_from_string, parse_manifest,
                       stamp_version, validate_manifest)
from .normalization import is_legacy_tag, normalize_stack_tags, normalize_tag
from .types import ArtifactMetadataEntryType, ArtifactType
from .validation import (SchemaValidator, SchemaViolation, ValidationResult,
                         validate_document)
from .versioning import compare_greater_than, parse_version

__all__ = [
    # Protocol
    "Manifest",
    "get_current_version",
    "stamp_version",
    "dumps_manifest",
    "parse_manifest",
    "load_from_string",
    "validate_manifest",
    "is_version_mismatch",
    # Versions
    "parse_version",
    "compare_greater_than",
    # Validation
    "SchemaValidator",
    "SchemaViolation",
    "ValidationResult",
    "validate_document",
    # Normalization
    "normalize_stack_tags",
    "normalize_tag",
    "is_legacy_tag",
    # Types
    "ArtifactType",
    "ArtifactMetadataEntryType",
    # Embedded constants
    "CURRENT_VERSION",
    "ASSEMBLY_SCHEMA",
    "ASSET_SCHEMA",
    "SCHEMAS",
    "get_schema",
    "get_validator",
]
