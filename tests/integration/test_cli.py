from __future__ import annotations

import pytest
from typer.testing import CliRunner

from payroll import main as cli

runner = CliRunner()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "PAYROLL_MAX_RATE", "PAYROLL_MAX_QUANTITY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(cli, "configure_logging", lambda **_: None)


@pytest.mark.usefixtures("clean_env")
def test_info_shows_effective_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PAYROLL_MAX_QUANTITY", "50")

    result = runner.invoke(cli.app, ["info"])

    assert result.exit_code == 0
    assert "max_rate=100000" in result.stdout
    assert "max_quantity=50" in result.stdout


@pytest.mark.usefixtures("clean_env")
def test_menu_runs_a_session_from_stdin():
    script = "\n".join(["1", "Hour", "100", "3", "Smith", "2", "5", "1", "1", "5", "7", "0"]) + "\n"

    result = runner.invoke(cli.app, ["menu"], input=script)

    assert result.exit_code == 0
    assert "Total payout to all workers = 500.00" in result.stdout
    assert "Program finished." in result.stdout


@pytest.mark.usefixtures("clean_env")
def test_menu_stops_at_end_of_input():
    result = runner.invoke(cli.app, ["menu"], input="4\n")

    assert result.exit_code == 0
    assert "The worker list is empty." in result.stdout
    assert "End of input." in result.stdout


def test_main_reports_keyboard_interrupt(monkeypatch: pytest.MonkeyPatch, capsys):
    def _interrupt() -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "app", _interrupt)

    with pytest.raises(SystemExit) as info:
        cli.main()

    assert info.value.code == 130
    assert "Cancelled by user." in capsys.readouterr().err
