"""Tests for the cssrules CLI commands."""

from __future__ import annotations

import json

from click.testing import CliRunner

from cssrules import __version__
from cssrules.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "parse" in result.output
        assert "check" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


class TestParseCommand:
    def test_raw_mapping(self) -> None:
        result = CliRunner().invoke(cli, ["parse", "fill: red; broken"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"fill": "red", "broken": None}

    def test_coerced_fields(self) -> None:
        result = CliRunner().invoke(
            cli,
            [
                "parse",
                "width: 10px; rotate: 370deg; margin: 1px 2px; extra: 1",
                "--field", "width=css_unit",
                "--field", "rotate=deg",
                "-f", "margin=css_unit3",
            ],
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "width": {"value": 10.0, "unit": "px"},
            "rotate": 10.0,
            "margin": [
                {"value": 1.0, "unit": "px"},
                {"value": 2.0, "unit": "px"},
                {"value": 2.0, "unit": "px"},
            ],
        }

    def test_nan_rendered_as_null(self) -> None:
        result = CliRunner().invoke(cli, ["parse", "n: abc", "--field", "n=number"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"n": None}

    def test_unknown_coercer(self) -> None:
        result = CliRunner().invoke(cli, ["parse", "a: 1", "--field", "a=colour"])
        assert result.exit_code == 2
        assert "Unknown coercer" in result.output

    def test_malformed_field(self) -> None:
        result = CliRunner().invoke(cli, ["parse", "a: 1", "--field", "a"])
        assert result.exit_code == 2
        assert "NAME=COERCER" in result.output


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_valid(self) -> None:
        result = CliRunner().invoke(cli, ["check", "fill: red"])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_errors_exit_1(self) -> None:
        result = CliRunner().invoke(cli, ["check", "fill: red; broken"])
        assert result.exit_code == 1
        assert "ERROR [key=broken]" in result.output
        assert "Summary: 1 error(s)" in result.output

    def test_warnings_exit_0(self) -> None:
        result = CliRunner().invoke(cli, ["check", "a: 1; a: 2"])
        assert result.exit_code == 0
        assert "WARNING [key=a]" in result.output
        assert "Summary: 0 error(s), 1 warning(s), 0 info" in result.output

    def test_with_schema(self) -> None:
        result = CliRunner().invoke(
            cli, ["check", "a: 1; b: 2", "--field", "a=number", "--field", "c=string"]
        )
        assert result.exit_code == 0
        assert "WARNING [key=b]" in result.output
        assert "INFO [key=c]" in result.output
