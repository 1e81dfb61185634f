"""
JSON Schema validation of manifest documents.

Validation collects every violation instead of stopping at the first one.
Errors raised by composite keywords (anyOf, oneOf, allOf) are flattened so
that each nested failure is reported with its own path.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from jsonschema import Draft7Validator, SchemaError, ValidationError
from jsonschema.validators import validator_for

from ..exceptions import SchemaDefinitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaViolation:
    """A single schema violation."""

    path: str
    message: str
    validator: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary."""
        return {"path": self.path, "message": self.message, "validator": self.validator}


@dataclass
class ValidationResult:
    """Outcome of validating a document. Valid when there are no violations."""

    violations: List[SchemaViolation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def error_paths(self) -> List[str]:
        return [v.path for v in self.violations]

    def as_tuple(self) -> Tuple[bool, Optional[str], Optional[List[str]]]:
        """
        Return (is_valid, error_message, error_paths).

        error_message and error_paths are None when the document is valid.
        """
        if self.is_valid:
            return True, None, None
        return False, "; ".join(v.message for v in self.violations), self.error_paths

    def format(self, header: str, limit: int = 0) -> str:
        """
        Render the violations as a multi-line message.

        Args:
            header: First line of the message
            limit: Maximum number of violations to list (0 lists all)
        """
        shown = self.violations if limit <= 0 else self.violations[:limit]
        lines = [header]
        lines.extend(f"  - {v}" for v in shown)
        hidden = len(self.violations) - len(shown)
        if hidden > 0:
            lines.append(f"  ... and {hidden} more")
        return "\n".join(lines)


def _format_path(error: ValidationError) -> str:
    path_parts = list(error.absolute_path)
    if path_parts:
        return ".".join(str(p) for p in path_parts)
    return "root"


def _path_key(error: ValidationError) -> Tuple[Tuple[int, Any], ...]:
    # list indices sort numerically and before property names
    return tuple((0, p) if isinstance(p, int) else (1, str(p)) for p in error.absolute_path)


def _flatten(errors: Iterable[ValidationError]) -> Iterator[ValidationError]:
    for error in errors:
        yield error
        if error.context:
            yield from _flatten(error.context)


class SchemaValidator:
    """
    Validator bound to a single schema grammar.

    The grammar is checked once when the validator is built; the validator
    class is picked from the grammar's "$schema" keyword (draft-07 when absent).
    """

    def __init__(self, schema: Dict[str, Any]):
        """
        Initialize validator.

        Args:
            schema: JSON Schema document

        Raises:
            SchemaDefinitionError: If the schema itself is invalid
        """
        validator_cls = validator_for(schema, default=Draft7Validator)
        try:
            validator_cls.check_schema(schema)
        except SchemaError as e:
            schema_path = ".".join(str(p) for p in e.path) or None
            raise SchemaDefinitionError(
                f"Invalid schema definition: {e.message}", schema_path=schema_path
            ) from e
        self.schema = schema
        self._validator = validator_cls(schema)

    def validate(self, document: Any) -> ValidationResult:
        """
        Validate a document against the grammar.

        Args:
            document: Parsed JSON document

        Returns:
            ValidationResult listing every violation, in document order
        """
        seen = set()
        keyed: List[Tuple[Tuple[Tuple[int, Any], ...], SchemaViolation]] = []
        for error in _flatten(self._validator.iter_errors(document)):
            violation = SchemaViolation(
                path=_format_path(error),
                message=error.message,
                validator=str(error.validator),
            )
            if (violation.path, violation.message) in seen:
                continue
            seen.add((violation.path, violation.message))
            keyed.append((_path_key(error), violation))

        keyed.sort(key=lambda item: (item[0], item[1].message))
        violations = [violation for _, violation in keyed]
        if violations:
            logger.debug(f"Schema validation found {len(violations)} violation(s)")
        return ValidationResult(violations=violations)


def validate_document(document: Any, schema: Dict[str, Any]) -> ValidationResult:
    """
    Validate a document against a schema grammar.

    Neither argument is modified.

    Args:
        document: Parsed JSON document
        schema: JSON Schema document

    Returns:
        ValidationResult listing every violation
    """
    return SchemaValidator(schema).validate(document)
