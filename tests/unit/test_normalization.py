"""
Unit tests for legacy stack tag normalization.
"""

import copy

import pytest

from cloud_assembly_schema.core.normalization import (is_legacy_tag,
                                                      normalize_stack_tags,
                                                      normalize_tag)


def _stack(entries, artifact_type="aws:cloudformation:stack"):
    return {"artifacts": {"MyStack": {"type": artifact_type, "metadata": {"/MyStack": entries}}}}


def _tags_of(manifest, index=0):
    return manifest["artifacts"]["MyStack"]["metadata"]["/MyStack"][index]["data"]


class TestNormalizeTag:
    """Test rewriting of a single tag."""

    def test_legacy_tag_rewritten(self):
        """Test the capitalized shape is lowered."""
        tag, rewritten = normalize_tag({"Key": "env", "Value": "prod"})
        assert tag == {"key": "env", "value": "prod"}
        assert rewritten is True

    def test_canonical_tag_untouched(self):
        """Test canonical tags are returned as is."""
        original = {"key": "env", "value": "prod"}
        tag, rewritten = normalize_tag(original)
        assert tag is original
        assert rewritten is False

    def test_other_fields_preserved(self):
        """Test that unrelated fields survive in place."""
        tag, _ = normalize_tag({"Key": "env", "Extra": True, "Value": "prod"})
        assert list(tag.items()) == [("key", "env"), ("Extra", True), ("value", "prod")]

    def test_legacy_value_wins(self):
        """Test that the legacy value wins when both spellings are present."""
        tag, _ = normalize_tag({"key": "old", "Key": "new", "Value": "v"})
        assert tag == {"key": "new", "value": "v"}

    @pytest.mark.parametrize("value", ["env", None, 3, ["Key"]])
    def test_non_objects_untouched(self, value):
        """Test that non-object payload elements are left alone."""
        assert normalize_tag(value) == (value, False)
        assert is_legacy_tag(value) is False


class TestNormalizeStackTags:
    """Test manifest-wide normalization."""

    def test_rewrites_stack_tags(self):
        """Test the documented legacy payload."""
        manifest = _stack([{"type": "aws:cdk:stack-tags", "data": [{"Key": "env", "Value": "prod"}]}])
        normalized = normalize_stack_tags(manifest)
        assert _tags_of(normalized) == [{"key": "env", "value": "prod"}]

    def test_idempotent(self):
        """Test that a second pass is a no-op."""
        manifest = _stack([{"type": "aws:cdk:stack-tags", "data": [{"Key": "env", "Value": "prod"}]}])
        once = normalize_stack_tags(manifest)
        twice = normalize_stack_tags(once)
        assert twice == once

    def test_input_not_mutated(self, legacy_manifest):
        """Test that a new value is returned and the input is left alone."""
        before = copy.deepcopy(legacy_manifest)
        normalized = normalize_stack_tags(legacy_manifest)
        assert legacy_manifest == before
        assert normalized is not legacy_manifest
        assert _tags_of(normalized) is not _tags_of(legacy_manifest)

    def test_order_preserved(self, legacy_manifest):
        """Test that tag order is kept."""
        normalized = normalize_stack_tags(legacy_manifest)
        assert _tags_of(normalized) == [
            {"key": "env", "value": "prod"},
            {"key": "team", "value": "platform"},
        ]

    def test_mixed_payload(self):
        """Test a payload holding both shapes."""
        manifest = _stack(
            [
                {
                    "type": "aws:cdk:stack-tags",
                    "data": [{"key": "a", "value": "1"}, {"Key": "b", "Value": "2"}],
                }
            ]
        )
        assert _tags_of(normalize_stack_tags(manifest)) == [
            {"key": "a", "value": "1"},
            {"key": "b", "value": "2"},
        ]

    def test_other_artifact_types_ignored(self):
        """Test that only cloud stack artifacts are traversed."""
        manifest = _stack(
            [{"type": "aws:cdk:stack-tags", "data": [{"Key": "env", "Value": "prod"}]}],
            artifact_type="cdk:tree",
        )
        assert normalize_stack_tags(manifest) == manifest

    def test_other_metadata_types_ignored(self):
        """Test that only stack tags entries are rewritten."""
        manifest = _stack([{"type": "aws:cdk:info", "data": [{"Key": "env", "Value": "prod"}]}])
        assert normalize_stack_tags(manifest) == manifest

    @pytest.mark.parametrize("data", [None, [], "tags"])
    def test_empty_or_odd_payload(self, data):
        """Test that empty or non-list payloads are left alone."""
        manifest = _stack([{"type": "aws:cdk:stack-tags", "data": data}])
        assert normalize_stack_tags(manifest) == manifest

    @pytest.mark.parametrize(
        "manifest",
        [
            {},
            {"artifacts": None},
            {"artifacts": {"A": "not-an-object"}},
            {"artifacts": {"A": {"type": "aws:cloudformation:stack", "metadata": []}}},
            {"artifacts": {"A": {"type": "aws:cloudformation:stack", "metadata": {"/A": {}}}}},
            {"artifacts": {"A": {"type": "unknown:type"}}},
        ],
    )
    def test_irregular_structures_pass_through(self, manifest):
        """Test that structures the schema would reject are not touched here."""
        assert normalize_stack_tags(manifest) == manifest
