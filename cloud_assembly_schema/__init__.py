"""
CLOUD_ASSEMBLY_SCHEMA - Cloud Assembly Manifest Protocol

Versioned save/load of cloud assembly and asset manifests, with schema
validation and transparent migration of legacy field encodings.
"""

from .constants import VERSION_MISMATCH
from .core import (CURRENT_VERSION, ArtifactMetadataEntryType, ArtifactType,
                   Manifest, compare_greater_than, is_version_mismatch,
                   normalize_stack_tags, parse_version, validate_document)
from .exceptions import (CloudAssemblySchemaError, InvalidVersionFormatError,
                         MalformedManifestError, ManifestValidationError,
                         SchemaDefinitionError, VersionMismatchError)

__version__ = "0.1.0"

__all__ = [
    # Protocol
    "Manifest",
    "VERSION_MISMATCH",
    "CURRENT_VERSION",
    "is_version_mismatch",
    # Building blocks
    "parse_version",
    "compare_greater_than",
    "validate_document",
    "normalize_stack_tags",
    "ArtifactType",
    "ArtifactMetadataEntryType",
    # Errors
    "CloudAssemblySchemaError",
    "MalformedManifestError",
    "InvalidVersionFormatError",
    "VersionMismatchError",
    "ManifestValidationError",
    "SchemaDefinitionError",
]
