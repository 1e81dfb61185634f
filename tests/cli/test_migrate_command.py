"""
Tests for migrate and schema-version commands.
"""

import json

from click.testing import CliRunner

from cloud_assembly_schema import __version__
from cloud_assembly_schema.cli.main import cli
from cloud_assembly_schema.core import Manifest


class TestMigrateCommand:
    """Test the migrate command."""

    def test_migrate_in_place(self, write_json, legacy_manifest):
        """Test rewriting a legacy manifest in place."""
        path = write_json(legacy_manifest)
        result = CliRunner().invoke(cli, ["migrate", str(path)])
        assert result.exit_code == 0
        assert f"1.0.0 -> {Manifest.version()}" in result.output

        migrated = json.loads(path.read_text(encoding="utf-8"))
        assert migrated["version"] == Manifest.version()
        tags = migrated["artifacts"]["MyStack"]["metadata"]["/MyStack"][0]["data"]
        assert tags == [
            {"key": "env", "value": "prod"},
            {"key": "team", "value": "platform"},
        ]

    def test_migrate_to_output(self, write_json, tmp_path, legacy_manifest):
        """Test writing the migrated manifest elsewhere."""
        path = write_json(legacy_manifest)
        output = tmp_path / "out.json"
        result = CliRunner().invoke(cli, ["migrate", str(path), "-o", str(output)])
        assert result.exit_code == 0
        assert json.loads(path.read_text(encoding="utf-8")) == legacy_manifest
        assert Manifest.load(output)["version"] == Manifest.version()

    def test_migrate_refuses_newer_manifest(self, write_json):
        """Test that a newer manifest is left untouched."""
        document = {"version": "999.0.0", "artifacts": {}}
        path = write_json(document)
        result = CliRunner().invoke(cli, ["migrate", str(path)])
        assert result.exit_code == 1
        assert json.loads(path.read_text(encoding="utf-8")) == document


class TestSchemaVersionCommand:
    """Test schema-version and --version."""

    def test_schema_version(self):
        """Test printing the supported schema version."""
        result = CliRunner().invoke(cli, ["schema-version"])
        assert result.exit_code == 0
        assert result.output.strip() == Manifest.version()

    def test_package_version(self):
        """Test the --version option."""
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
