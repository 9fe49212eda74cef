"""Tests for the beanctx command line interface."""

import pytest
import yaml
from typer.testing import CliRunner

from beanctx import __version__
from beanctx.cli.app import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing commands."""
    return CliRunner()


class TestScanCommand:
    """Test the scan command."""

    def test_scan_lists_components(self, runner):
        result = runner.invoke(app, ["scan", "shop_app"])

        assert result.exit_code == 0
        assert "Total components: 4" in result.output

    def test_scan_with_exclusion_from_config(self, runner, tmp_path):
        config = tmp_path / "beanctx.yaml"
        config.write_text(yaml.safe_dump({
            "base_package": "shop_app",
            "discovery": {"exclude": ["shop_app.reports"]},
        }))

        result = runner.invoke(app, ["--config", str(config), "scan"])

        assert result.exit_code == 0
        assert "Total components: 3" in result.output

    def test_scan_missing_package(self, runner):
        result = runner.invoke(app, ["scan", "no_such_package_anywhere"])

        assert result.exit_code == 1
        assert "DISCOVERY" in result.output

    def test_scan_without_package(self, runner):
        result = runner.invoke(app, ["scan"])

        assert result.exit_code == 2
        assert "no base_package configured" in result.output


class TestCheckCommand:
    """Test the check command."""

    def test_check_resolves_everything(self, runner):
        result = runner.invoke(app, ["check", "shop_app"])

        assert result.exit_code == 0
        assert "All beans resolved" in result.output

    def test_check_reports_cycles(self, runner):
        result = runner.invoke(app, ["check", "cyclic_app"])

        assert result.exit_code == 1
        assert "3 bean(s) failed to resolve" in result.output

    def test_check_reports_duplicate_names(self, runner):
        result = runner.invoke(app, ["check", "dup_app"])

        assert result.exit_code == 1
        assert "Duplicate bean name: widget" in result.output


class TestGlobalOptions:
    """Test callback options."""

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_config_file(self, runner, tmp_path):
        config = tmp_path / "beanctx.yaml"
        config.write_text(yaml.safe_dump({"logging": {"level": "LOUD"}}))

        result = runner.invoke(app, ["--config", str(config), "scan", "shop_app"])

        assert result.exit_code == 1
        assert "CONFIGURATION" in result.output
