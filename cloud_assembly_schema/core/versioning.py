"""
Schema version parsing and ordering.

Versions follow Semantic Versioning 2.0.0. Ordering uses SemVer precedence:
major, minor and patch compare numerically, a pre-release sorts before the
release it precedes, and build metadata is ignored.
"""

from typing import Any, Union

import semver

from ..exceptions import InvalidVersionFormatError

VersionLike = Union[str, semver.Version]


def parse_version(text: Any) -> semver.Version:
    """
    Parse a semantic version string.

    A single leading "v" or "=" is accepted and dropped.

    Args:
        text: Version string (None when the field was absent)

    Returns:
        Parsed semver.Version

    Raises:
        InvalidVersionFormatError: If text is missing or not a valid semver string
    """
    if not isinstance(text, str):
        raise InvalidVersionFormatError(f'Invalid semver string: "{text}"', version=text)

    candidate = text.strip()
    if candidate[:1] in ("v", "="):
        candidate = candidate[1:]

    try:
        return semver.Version.parse(candidate)
    except (ValueError, TypeError) as e:
        raise InvalidVersionFormatError(f'Invalid semver string: "{text}"', version=text) from e


def _as_version(value: VersionLike) -> semver.Version:
    if isinstance(value, semver.Version):
        return value
    return parse_version(value)


def compare_greater_than(a: VersionLike, b: VersionLike) -> bool:
    """Return True if `a` is a strictly later release than `b`."""
    return _as_version(a).compare(_as_version(b)) > 0
