"""
Build-time constants bundled with the package.

The current schema version and the schema grammars are read once, when this
module is imported, and are only read afterwards.
"""

import functools
import json
from importlib import resources
from typing import Any, Dict, Final

from ..constants import (ASSEMBLY_MANIFEST_KIND, ASSEMBLY_SCHEMA_FILE,
                         ASSET_MANIFEST_KIND, ASSET_SCHEMA_FILE,
                         SCHEMA_PACKAGE, VERSION_FIELD, VERSION_FILE)
from .validation import SchemaValidator


def _read_bundled_json(filename: str) -> Any:
    content = resources.files(SCHEMA_PACKAGE).joinpath(filename).read_text(encoding="utf-8")
    return json.loads(content)


CURRENT_VERSION: Final[str] = _read_bundled_json(VERSION_FILE)[VERSION_FIELD]
"""Maximum schema version this build accepts."""

ASSEMBLY_SCHEMA: Final[Dict[str, Any]] = _read_bundled_json(ASSEMBLY_SCHEMA_FILE)
"""Grammar of the cloud assembly manifest."""

ASSET_SCHEMA: Final[Dict[str, Any]] = _read_bundled_json(ASSET_SCHEMA_FILE)
"""Grammar of the asset manifest."""

SCHEMAS: Final[Dict[str, Dict[str, Any]]] = {
    ASSEMBLY_MANIFEST_KIND: ASSEMBLY_SCHEMA,
    ASSET_MANIFEST_KIND: ASSET_SCHEMA,
}


def get_schema(kind: str) -> Dict[str, Any]:
    """
    Get the bundled grammar for a document kind.

    Raises:
        ValueError: If kind is unknown
    """
    try:
        return SCHEMAS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown document kind '{kind}'. Expected one of: {', '.join(SCHEMAS)}"
        ) from None


@functools.lru_cache(maxsize=None)
def get_validator(kind: str) -> SchemaValidator:
    """Get the validator for a document kind, checking its grammar on first use."""
    return SchemaValidator(get_schema(kind))
