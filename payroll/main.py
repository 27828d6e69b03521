from __future__ import annotations

import sys

import typer
from rich.console import Console

from payroll.config import get_settings
from payroll.menu import MenuSession
from payroll.registry import PayrollRegistry
from payroll.utils.logging import configure_logging

app = typer.Typer(help="Payroll department console.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json={settings.log_json} | "
        f"max_rate={settings.max_rate} max_quantity={settings.max_quantity} "
        f"max_lookup_id={settings.max_lookup_id}"
    )


@app.command()
def menu() -> None:
    """
    Start the interactive payroll menu with an empty registry.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    registry = PayrollRegistry.from_settings(settings)
    MenuSession(registry, console=Console(), settings=settings).run()


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
