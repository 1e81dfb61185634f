"""
Tests for show command.

Tests the manifest display CLI command.
"""

import json

from click.testing import CliRunner

from cloud_assembly_schema.cli.main import cli
from cloud_assembly_schema.constants import UPGRADE_HINT


class TestShowCommand:
    """Test the show command."""

    def test_show_manifest_json(self, write_json, sample_manifest):
        """Test showing manifest in JSON format."""
        path = write_json({"version": "1.0.0", **sample_manifest})
        result = CliRunner().invoke(cli, ["show", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"version": "1.0.0", **sample_manifest}

    def test_show_normalizes_legacy_tags(self, write_json, legacy_manifest):
        """Test that legacy tags are shown in key/value form."""
        result = CliRunner().invoke(cli, ["show", str(write_json(legacy_manifest))])
        assert result.exit_code == 0
        shown = json.loads(result.output)
        tags = shown["artifacts"]["MyStack"]["metadata"]["/MyStack"][0]["data"]
        assert tags[0] == {"key": "env", "value": "prod"}

    def test_show_manifest_pretty(self, write_json, sample_manifest):
        """Test showing manifest in pretty format."""
        path = write_json({"version": "1.0.0", **sample_manifest})
        result = CliRunner().invoke(cli, ["show", str(path), "--format", "pretty"])
        assert result.exit_code == 0
        assert "Schema Version: 1.0.0" in result.output
        assert "Artifacts: 2" in result.output
        assert "MyStack (aws:cloudformation:stack)" in result.output

    def test_show_asset_manifest_pretty(self, write_json, sample_asset_manifest):
        """Test showing an asset manifest in pretty format."""
        path = write_json({"version": "1.0.0", **sample_asset_manifest}, name="assets.json")
        result = CliRunner().invoke(cli, ["show", str(path), "--assets", "--format", "pretty"])
        assert result.exit_code == 0
        assert "File assets: 1" in result.output
        assert "Docker image assets: 1" in result.output

    def test_show_newer_manifest(self, write_json):
        """Test that a newer manifest cannot be shown."""
        path = write_json({"version": "999.0.0", "artifacts": {}})
        result = CliRunner().invoke(cli, ["show", str(path)])
        assert result.exit_code == 1
        assert UPGRADE_HINT in result.output
