"""CLI smoke tests."""

from click.testing import CliRunner
from shellsuite.cli import cli, main


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for option in ("--path", "--validator", "--flags", "--debug"):
        assert option in result.output
    assert "bashate|shellcheck|shfmt" in result.output


def test_main_help_exits_cleanly(capsys) -> None:
    assert main(["-h"]) == 0
    assert "Usage: shellsuite" in capsys.readouterr().out
