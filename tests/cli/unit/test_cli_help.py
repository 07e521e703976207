"""CLI smoke tests."""

from click.testing import CliRunner
from typextract.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "extract" in result.output
    assert "generate-config" in result.output
