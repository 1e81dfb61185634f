"""
Type definitions for cloud assembly manifest structures.

Only the parts of the document the protocol itself inspects are modelled
here: the artifact and metadata discriminators and the stack tag shapes.
Everything else is governed by the bundled JSON schemas.
"""

from enum import Enum
from typing import Any, Dict, List, TypedDict


class ArtifactType(str, Enum):
    """Discriminator of an artifact entry."""

    NONE = "none"
    AWS_CLOUDFORMATION_STACK = "aws:cloudformation:stack"
    CDK_TREE = "cdk:tree"
    ASSET_MANIFEST = "cdk:asset-manifest"
    NESTED_CLOUD_ASSEMBLY = "cdk:cloud-assembly"


class ArtifactMetadataEntryType(str, Enum):
    """Discriminator of a metadata entry attached to an artifact."""

    ASSET = "aws:cdk:asset"
    INFO = "aws:cdk:info"
    WARN = "aws:cdk:warning"
    ERROR = "aws:cdk:error"
    LOGICAL_ID = "aws:cdk:logicalId"
    STACK_TAGS = "aws:cdk:stack-tags"


# ============================================================================
# Tag Types
# ============================================================================


class TagDict(TypedDict):
    """Canonical stack tag."""

    key: str
    value: str


class LegacyTagDict(TypedDict):
    """Stack tag as written by producers that predate the lowercase convention."""

    Key: str
    Value: str


# ============================================================================
# Manifest Types
# ============================================================================


class MetadataEntryDict(TypedDict, total=False):
    """A single metadata entry."""

    type: str
    data: Any
    trace: List[str]


class ArtifactManifestDict(TypedDict, total=False):
    """An artifact entry in the assembly manifest."""

    type: str
    environment: str
    metadata: Dict[str, List[MetadataEntryDict]]
    dependencies: List[str]
    properties: Dict[str, Any]
    displayName: str


class AssemblyManifestDict(TypedDict, total=False):
    """The cloud assembly manifest (manifest.json)."""

    version: str
    artifacts: Dict[str, ArtifactManifestDict]
    missing: List[Dict[str, Any]]
    runtime: Dict[str, Any]


class AssetManifestDict(TypedDict, total=False):
    """The asset manifest (assets.json)."""

    version: str
    files: Dict[str, Dict[str, Any]]
    dockerImages: Dict[str, Dict[str, Any]]
