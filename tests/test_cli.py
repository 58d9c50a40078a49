"""Tests for the projmanip command line."""

import json
import tempfile
import yaml
from pathlib import Path
from click.testing import CliRunner

from projmanip.cli import main
from projmanip.version import VERSION


class TestApplyCommand:
    """Test the apply command."""

    def test_apply_version_and_dependencies(self, write_package):
        """Options drive both manipulators and the result file lists the outcome."""
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as temp_dir:
            path = write_package(temp_dir)
            versions = Path(temp_dir) / "versions.yml"
            versions.write_text(yaml.safe_dump({"pnc-example": ["2.0.0-redhat-00001"]}))
            result_file = Path(temp_dir) / "out" / "result.json"

            result = runner.invoke(main, [
                "apply", str(path.parent),
                "--version-suffix", "redhat",
                "-d", "cors=2.7.1",
                "-D", "grunt=~1.0.1",
                "--available-versions", str(versions),
                "--result", str(result_file),
            ])

            assert result.exit_code == 0, result.output
            assert "Updated pnc-example (2.0.0-redhat-00002)" in result.output
            saved = json.loads(path.read_text())
            assert saved["version"] == "2.0.0-redhat-00002"
            assert saved["dependencies"]["cors"] == "2.7.1"
            assert saved["devDependencies"]["grunt"] == "~1.0.1"

            report = json.loads(result_file.read_text())
            assert report["changed"] == ["pnc-example"]
            assert report["projects"][0]["version"] == "2.0.0-redhat-00002"
            assert report["projects"][0]["path"] == str(path)

    def test_apply_with_config_file(self, write_package):
        """A config file works alone and the command line overrides it."""
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as temp_dir:
            path = write_package(temp_dir)
            config = Path(temp_dir) / "projmanip.yml"
            config.write_text(yaml.safe_dump({"version": {"incremental_suffix": "redhat", "padding": 2}}))

            result = runner.invoke(main, ["apply", str(path), "-c", str(config), "--version-override", "9.9.9"])

            assert result.exit_code == 0, result.output
            assert json.loads(path.read_text())["version"] == "9.9.9"

    def test_apply_nothing_configured(self, write_package):
        """Without options nothing is changed."""
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as temp_dir:
            path = write_package(temp_dir)
            before = path.read_text()

            result = runner.invoke(main, ["apply", str(path)])

            assert result.exit_code == 0, result.output
            assert "No changes" in result.output
            assert path.read_text() == before

    def test_apply_error_exit_code(self, write_package):
        """Manipulation errors end the command with a message and exit code 1."""
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as temp_dir:
            path = write_package(temp_dir, {"name": "broken", "version": "BUILD-NUMBER"})

            result = runner.invoke(main, ["apply", str(path), "--version-suffix", "redhat"])

            assert result.exit_code == 1
            assert "no numeric core" in result.output

    def test_apply_bad_assignment(self, write_package):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as temp_dir:
            path = write_package(temp_dir)
            result = runner.invoke(main, ["apply", str(path), "-d", "express"])

            assert result.exit_code == 1
            assert "NAME=VERSION" in result.output


class TestNextVersionCommand:
    """Test the next-version command."""

    def test_next_version(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "next-version", "1.0.0-jboss-00004",
            "--version-suffix", "jboss",
            "-a", "1.0.0-jboss-1",
            "-a", "1.0.0-jboss-00002",
        ])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "1.0.0-jboss-00003"

    def test_next_version_override(self):
        runner = CliRunner()
        result = runner.invoke(main, ["next-version", "1.0.0", "--version-override", "2.0.0-foo-001"])

        assert result.output.strip() == "2.0.0-foo-001"

    def test_next_version_without_suffix(self):
        runner = CliRunner()
        result = runner.invoke(main, ["next-version", "1.0.0"])

        assert result.exit_code == 1
        assert "No version suffix" in result.output

    def test_next_version_bad_padding(self):
        runner = CliRunner()
        result = runner.invoke(main, ["next-version", "1.0.0", "--version-suffix", "jboss", "--version-padding", "0"])

        assert result.exit_code == 2


def test_version_option():
    result = CliRunner().invoke(main, ["--version"])
    assert VERSION in result.output
