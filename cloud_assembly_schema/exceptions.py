"""
Custom exceptions for CLOUD_ASSEMBLY_SCHEMA.

These exceptions provide specific error types for every way loading or
saving a manifest can fail, while maintaining compatibility with
RuntimeError.
"""

from typing import Any, Dict, List, Optional

from .constants import VERSION_MISMATCH


class CloudAssemblySchemaError(RuntimeError):
    """
    Base exception for cloud assembly schema errors.

    Attributes:
        message: Error message
        context: Optional dictionary with additional context (file_path,
                 kind, etc.)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            context: Optional dictionary with additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class MalformedManifestError(CloudAssemblySchemaError):
    """
    Raised when a manifest file does not contain a JSON object.

    Attributes:
        message: Error message
        file_path: Path of the offending file (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if file_path:
            context["file_path"] = file_path
        super().__init__(message, context=context)
        self.file_path = file_path


class InvalidVersionFormatError(CloudAssemblySchemaError):
    """
    Raised when a version string is missing or is not a semantic version.

    Applies both to the `version` field of a loaded document and to the
    build's own embedded schema version.

    Attributes:
        message: Error message
        version: The offending value (None when the field was absent)
    """

    def __init__(
        self,
        message: str,
        version: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, context=context)
        self.version = version


class VersionMismatchError(CloudAssemblySchemaError):
    """
    Raised when a document was written by a newer schema version than this
    build supports.

    The message always starts with VERSION_MISMATCH so callers can tell this
    condition apart from a generic validation failure.

    Attributes:
        message: Error message (prefixed with VERSION_MISMATCH)
        max_supported: Maximum schema version supported by this build
        actual: Schema version found in the document
    """

    def __init__(
        self,
        max_supported: str,
        actual: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        message = (
            f"{VERSION_MISMATCH}: Maximum schema version supported is "
            f"{max_supported}, but found {actual}"
        )
        super().__init__(message, context=context)
        self.max_supported = max_supported
        self.actual = actual


class ManifestValidationError(CloudAssemblySchemaError):
    """
    Raised when a manifest does not conform to its schema.

    The message enumerates every violation found, not just the first.

    Attributes:
        message: Error message listing all violations
        violations: List of SchemaViolation objects
        error_paths: List of paths with validation errors
        kind: Document kind that was validated
    """

    def __init__(
        self,
        message: str,
        violations: Optional[List[Any]] = None,
        kind: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if kind:
            context["kind"] = kind
        super().__init__(message, context=context)
        self.violations = list(violations or [])
        self.error_paths = [v.path for v in self.violations]
        self.kind = kind


class SchemaDefinitionError(CloudAssemblySchemaError):
    """
    Raised when a schema grammar is itself not a valid JSON Schema.

    Attributes:
        message: Error message
        schema_path: Location inside the schema that is invalid (if available)
    """

    def __init__(
        self,
        message: str,
        schema_path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if schema_path:
            context["schema_path"] = schema_path
        super().__init__(message, context=context)
        self.schema_path = schema_path
