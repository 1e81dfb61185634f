"""
Legacy shape normalization for cloud assembly manifests.

Stack tags used to be persisted as {"Key": ..., "Value": ...} objects. The
current schema describes them as {"key": ..., "value": ...}. Manifests that
are already on disk still carry the capitalized shape, so every loaded
manifest is passed through normalize_stack_tags() before it is validated.

Traversal is typed: artifacts are dispatched on ArtifactType and metadata
entries on ArtifactMetadataEntryType. Only the cloud stack artifact and the
stack tags metadata entry have handlers; every other kind passes through
unchanged.

Legacy tags are detected by the presence of the capitalized fields, not by a
document-wide shape marker. A future tag shape that reintroduces a field
literally named "Key" would be rewritten as well.
"""

import copy
import logging
from typing import Any, Callable, Dict, Optional, Tuple, Union

from ..constants import LEGACY_TAG_KEY, LEGACY_TAG_VALUE, TAG_KEY, TAG_VALUE
from .types import (ArtifactManifestDict, ArtifactMetadataEntryType,
                    ArtifactType, LegacyTagDict, MetadataEntryDict, TagDict)

logger = logging.getLogger(__name__)

_LEGACY_TAG_FIELDS: Dict[str, str] = {
    LEGACY_TAG_KEY: TAG_KEY,
    LEGACY_TAG_VALUE: TAG_VALUE,
}


def is_legacy_tag(tag: Any) -> bool:
    """Return True if `tag` carries the capitalized Key/Value fields."""
    return isinstance(tag, dict) and any(name in tag for name in _LEGACY_TAG_FIELDS)


def normalize_tag(tag: Union[LegacyTagDict, TagDict, Any]) -> Tuple[Union[TagDict, Any], bool]:
    """
    Rewrite a single legacy tag to the canonical shape.

    Field order and any additional fields are preserved. When both spellings
    are present the legacy value wins.

    Args:
        tag: Tag object

    Returns:
        Tuple of (tag, rewritten). Tags without legacy fields are returned as is.
    """
    if not is_legacy_tag(tag):
        return tag, False

    rewritten: Dict[str, Any] = {}
    for name, value in tag.items():
        rewritten[_LEGACY_TAG_FIELDS.get(name, name)] = value
    for legacy_name, canonical_name in _LEGACY_TAG_FIELDS.items():
        if legacy_name in tag:
            rewritten[canonical_name] = tag[legacy_name]
    return rewritten, True


def _normalize_stack_tags_entry(entry: MetadataEntryDict) -> int:
    data = entry.get("data")
    if not data or not isinstance(data, list):
        return 0

    count = 0
    tags = []
    for tag in data:
        tag, rewritten = normalize_tag(tag)
        tags.append(tag)
        count += int(rewritten)
    entry["data"] = tags
    return count


# Metadata entry kinds that carry a legacy encoding
_METADATA_HANDLERS: Dict[ArtifactMetadataEntryType, Callable[[MetadataEntryDict], int]] = {
    ArtifactMetadataEntryType.STACK_TAGS: _normalize_stack_tags_entry,
}


def _metadata_kind(entry: Any) -> Optional[ArtifactMetadataEntryType]:
    if not isinstance(entry, dict):
        return None
    try:
        return ArtifactMetadataEntryType(entry.get("type"))
    except ValueError:
        return None


def _normalize_stack_artifact(artifact: ArtifactManifestDict) -> int:
    metadata = artifact.get("metadata")
    if not isinstance(metadata, dict):
        return 0

    count = 0
    for entries in metadata.values():
        if not isinstance(entries, list):
            continue
        for entry in entries:
            handler = _METADATA_HANDLERS.get(_metadata_kind(entry))
            if handler:
                count += handler(entry)
    return count


# Artifact kinds whose metadata may carry a legacy encoding
_ARTIFACT_HANDLERS: Dict[ArtifactType, Callable[[ArtifactManifestDict], int]] = {
    ArtifactType.AWS_CLOUDFORMATION_STACK: _normalize_stack_artifact,
}


def _artifact_kind(artifact: Any) -> Optional[ArtifactType]:
    if not isinstance(artifact, dict):
        return None
    try:
        return ArtifactType(artifact.get("type"))
    except ValueError:
        return None


def normalize_stack_tags(manifest: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of `manifest` with legacy stack tags in canonical shape.

    The input is not modified. Running the function on its own output is a
    no-op.

    Args:
        manifest: Parsed assembly manifest

    Returns:
        Normalized copy of the manifest

    Example:
        >>> normalize_stack_tags({"artifacts": {"S": {
        ...     "type": "aws:cloudformation:stack",
        ...     "metadata": {"/S": [{"type": "aws:cdk:stack-tags",
        ...                          "data": [{"Key": "env", "Value": "prod"}]}]}}}})
        {'artifacts': {'S': {'type': 'aws:cloudformation:stack', 'metadata': {'/S': [{'type': 'aws:cdk:stack-tags', 'data': [{'key': 'env', 'value': 'prod'}]}]}}}}
    """
    normalized = copy.deepcopy(manifest)
    artifacts = normalized.get("artifacts")
    if not isinstance(artifacts, dict):
        return normalized

    count = 0
    for artifact_id, artifact in artifacts.items():
        handler = _ARTIFACT_HANDLERS.get(_artifact_kind(artifact))
        if handler:
            rewritten = handler(artifact)
            if rewritten:
                logger.debug(
                    f"Rewrote {rewritten} legacy stack tag(s) on artifact '{artifact_id}'"
                )
            count += rewritten

    if count:
        logger.info(f"Normalized {count} legacy stack tag(s) to key/value form")
    return normalized
