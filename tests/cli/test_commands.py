"""Tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from src.cli.main import app
from src.cli.utils.config import CliConfig, ConfigManager

runner = CliRunner()

RECORD_ARGS = [
    "--priv", "priv1", "--pub", "pub1", "--sin", "sinABC", "--created", "1610000000",
]


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Point ConfigManager at an empty temporary directory."""
    path = tmp_path / "sin"
    monkeypatch.setattr(ConfigManager, "DEFAULT_DIR", path)
    monkeypatch.delenv("SIN_LOG_LEVEL", raising=False)
    return path


class TestShowCommand:
    """Tests for sin show command."""

    def test_show_masks_private_key_by_default(self):
        result = runner.invoke(app, ["show", *RECORD_ARGS])

        assert result.exit_code == 0
        assert "SIN Record" in result.stdout
        assert "[REDACTED]" in result.stdout
        assert "priv1" not in result.stdout
        assert "pub1" in result.stdout
        assert "sinABC" in result.stdout
        assert "1610000000" in result.stdout

    def test_show_reveal(self):
        result = runner.invoke(app, ["show", *RECORD_ARGS, "--reveal"])

        assert result.exit_code == 0
        assert "priv1" in result.stdout

    def test_show_config_disables_masking(self, config_dir):
        ConfigManager(config_dir).save(CliConfig(mask_private=False))

        result = runner.invoke(app, ["show", *RECORD_ARGS])

        assert result.exit_code == 0
        assert "priv1" in result.stdout

    def test_show_json_output(self):
        result = runner.invoke(app, ["show", *RECORD_ARGS, "--json", "--reveal"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["record"] == {
            "created": 1610000000, "priv": "priv1", "pub": "pub1", "sin": "sinABC",
        }

    def test_show_json_masks_private_key(self):
        result = runner.invoke(app, ["show", *RECORD_ARGS, "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["record"]["priv"] == "[REDACTED]"

    def test_show_blank_private_key_fails(self):
        result = runner.invoke(
            app,
            ["show", "--priv", "   ", "--pub", "pub1", "--sin", "sinABC", "--created", "1"],
        )

        assert result.exit_code == 1
        assert "priv cannot be empty" in result.stdout
        assert "--priv" in result.stdout

    def test_show_negative_timestamp_fails(self):
        result = runner.invoke(
            app,
            ["show", "--priv", "k", "--pub", "pub1", "--sin", "sinABC", "--created", "-5"],
        )

        assert result.exit_code == 2
        assert "cannot be negative" in result.stdout

    def test_show_missing_option_is_usage_error(self):
        result = runner.invoke(app, ["show", "--priv", "k", "--pub", "p", "--sin", "s"])

        assert result.exit_code != 0

    def test_invalid_config_fails(self, config_dir):
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("mask_private: maybe\n")

        result = runner.invoke(app, ["show", *RECORD_ARGS])

        assert result.exit_code == 1
        assert "mask_private" in result.stdout


class TestCheckCommand:
    """Tests for sin check command."""

    def test_identical_records_are_equal(self):
        result = runner.invoke(app, ["check", *RECORD_ARGS])

        assert result.exit_code == 0
        assert "Records are equal" in result.stdout
        assert "Yes" in result.stdout

    def test_whitespace_does_not_break_equality(self):
        result = runner.invoke(app, ["check", *RECORD_ARGS, "--other-sin", " sinABC "])

        assert result.exit_code == 0

    def test_different_field_reported(self):
        result = runner.invoke(app, ["check", *RECORD_ARGS, "--other-created", "1610000001"])

        assert result.exit_code == 1
        assert "created" in result.stdout

    def test_json_output(self):
        result = runner.invoke(
            app, ["check", *RECORD_ARGS, "--other-priv", "priv2", "--json"],
        )

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["equal"] is False
        assert data["differing_fields"] == ["priv"]

    def test_json_output_equal(self):
        result = runner.invoke(app, ["check", *RECORD_ARGS, "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {"equal": True, "hash_match": True, "differing_fields": []}

    def test_empty_other_private_key_fails(self):
        result = runner.invoke(app, ["check", *RECORD_ARGS, "--other-priv", ""])

        assert result.exit_code == 1
        assert "priv cannot be empty" in result.stdout
