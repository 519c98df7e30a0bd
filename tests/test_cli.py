"""Tests for the command line interface."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from slugger import __version__
from slugger.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestSlugCommand:
    """slugger slug."""

    def test_arguments(self, runner):
        """Each argument prints one slug."""
        result = runner.invoke(cli, ["slug", "Hello World", "Straße München"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["hello-world", "strasse-munchen"]

    def test_stdin(self, runner):
        """Without arguments lines are read from stdin."""
        result = runner.invoke(cli, ["slug"], input="Café & Restaurant\nPrice: $29.99\n")
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["cafe-and-restaurant", "price-dollar29-99"]

    def test_flags(self, runner):
        """Flags map onto slug options."""
        result = runner.invoke(
            cli,
            ["slug", "-s", "_", "--keep-case", "-m", "8", "Hello World"],
        )
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "Hello_Wo"

    def test_no_strict_no_trim(self, runner):
        """Collapse and trim can be switched off."""
        result = runner.invoke(cli, ["slug", "--no-strict", "--no-trim", " a  b "])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "-a--b-"

    def test_replace_option(self, runner):
        """Replacements are parsed from KEY=VALUE."""
        result = runner.invoke(cli, ["slug", "-r", "$=usd", "-r", "©=c", "$5 ©"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "usd5-c"

    def test_bad_replace(self, runner):
        """Malformed replacements are usage errors."""
        result = runner.invoke(cli, ["slug", "-r", "novalue", "x"])
        assert result.exit_code == 2
        assert "KEY=VALUE" in result.output

    def test_config_defaults(self, runner, config_file):
        """Config file supplies defaults for unset flags."""
        config_file("slug:\n  separator: '.'\n")
        result = runner.invoke(cli, ["slug", "a b"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "a.b"

        result = runner.invoke(cli, ["slug", "-s", "+", "a b"])
        assert result.output.strip() == "a+b"

    def test_broken_config_exits(self, runner, config_file):
        """An unreadable config file exits with status 1."""
        config_file("slug: [unclosed\n")
        result = runner.invoke(cli, ["slug", "a b"])
        assert result.exit_code == 1
        assert "Error loading configuration" in result.output


class TestOtherCommands:
    """table, bench and version."""

    def test_version(self, runner):
        """--version prints the package version."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_table_group(self, runner):
        """A single group can be listed."""
        result = runner.invoke(cli, ["table", "--group", "currency"])
        assert result.exit_code == 0, result.output
        assert "dollar" in result.output
        assert "plus-minus" not in result.output

    def test_table_unknown_group(self, runner):
        """Unknown groups are rejected."""
        result = runner.invoke(cli, ["table", "--group", "emoji"])
        assert result.exit_code == 2
        assert "currency" in result.output

    def test_bench_json(self, runner):
        """bench --json prints machine readable results."""
        result = runner.invoke(cli, ["bench", "-n", "1", "--warmup", "0", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [entry["name"] for entry in data][0] == "slugify (default options)"
        assert all(entry["iterations"] == 1 for entry in data)

    def test_bench_rejects_zero_iterations(self, runner):
        """Iterations must be positive."""
        result = runner.invoke(cli, ["bench", "-n", "0"])
        assert result.exit_code == 2
