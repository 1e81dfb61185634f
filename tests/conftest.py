"""
Pytest configuration and shared fixtures for CLOUD_ASSEMBLY_SCHEMA tests.

This module provides:
- Sample manifests (current and legacy shapes)
- Helpers for writing manifests to disk
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from cloud_assembly_schema.observability import clear_manifest_context

# ============================================================================
# TEST DATA FACTORIES
# ============================================================================


def _stack_tags_entry(tags: list) -> Dict[str, Any]:
    return {"type": "aws:cdk:stack-tags", "data": tags}


@pytest.fixture
def sample_manifest() -> Dict[str, Any]:
    """Provide a valid assembly manifest without a version stamp."""
    return {
        "artifacts": {
            "MyStack": {
                "type": "aws:cloudformation:stack",
                "environment": "aws://123456789012/us-east-1",
                "properties": {"templateFile": "MyStack.template.json"},
                "metadata": {
                    "/MyStack": [
                        _stack_tags_entry([{"key": "env", "value": "prod"}]),
                        {"type": "aws:cdk:logicalId", "data": "MyBucket"},
                    ]
                },
            },
            "Tree": {"type": "cdk:tree", "properties": {"file": "tree.json"}},
        },
        "runtime": {"libraries": {"aws-cdk-lib": "2.0.0"}},
    }


@pytest.fixture
def legacy_manifest() -> Dict[str, Any]:
    """Provide a manifest whose stack tags use the capitalized Key/Value shape."""
    return {
        "version": "1.0.0",
        "artifacts": {
            "MyStack": {
                "type": "aws:cloudformation:stack",
                "environment": "aws://123456789012/us-east-1",
                "metadata": {
                    "/MyStack": [
                        _stack_tags_entry(
                            [
                                {"Key": "env", "Value": "prod"},
                                {"Key": "team", "Value": "platform"},
                            ]
                        ),
                    ]
                },
            },
        },
    }


@pytest.fixture
def sample_asset_manifest() -> Dict[str, Any]:
    """Provide a valid asset manifest without a version stamp."""
    return {
        "files": {
            "abc123": {
                "source": {"path": "asset.abc123", "packaging": "zip"},
                "destinations": {
                    "current_account-current_region": {
                        "bucketName": "cdk-assets-bucket",
                        "objectKey": "abc123.zip",
                    }
                },
            }
        },
        "dockerImages": {
            "def456": {
                "source": {"directory": "asset.def456"},
                "destinations": {
                    "current_account-current_region": {
                        "repositoryName": "cdk-assets-repo",
                        "imageTag": "def456",
                    }
                },
            }
        },
    }


@pytest.fixture
def closed_schema() -> Dict[str, Any]:
    """Provide a minimal closed grammar with an artifacts object."""
    return {
        "type": "object",
        "properties": {"artifacts": {"type": "object"}},
        "additionalProperties": False,
    }


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[..., Path]:
    """Write a JSON value to a file under tmp_path and return its path."""

    def _write(data: Any, name: str = "manifest.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logging_context():
    """Make sure no manifest context leaks between tests."""
    yield
    clear_manifest_context()
