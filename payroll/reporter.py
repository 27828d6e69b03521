from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, Union

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from payroll.domain.models import WorkType, Worker

_CENTS = Decimal("0.01")


def format_money(amount: Union[Decimal, int, float]) -> str:
    """
    Render an amount with exactly two decimals, rounding half up.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    with localcontext() as ctx:
        # Wide enough to hold every integer digit plus the two cents digits.
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return f"{value.quantize(_CENTS, rounding=ROUND_HALF_UP):.2f}"



def format_quantity(quantity: Decimal) -> str:
    """Render a quantity without a trailing '.0' for whole numbers."""
    if quantity == quantity.to_integral_value():
        return str(quantity.to_integral_value())
    return str(quantity.normalize())


def render_work_types(console: Console, work_types: Iterable[WorkType]) -> None:
    """
    Render the work-type catalogue as a rich table.
    """
    rows = list(work_types)
    if not rows:
        console.print("[yellow]The work type list is empty.[/yellow]")
        return

    table = Table(title="Work types", box=box.ROUNDED)
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Rate", justify="right", style="green")

    for work_type in rows:
        table.add_row(str(work_type.id), escape(work_type.name), format_money(work_type.rate))

    console.print(table)


def render_workers(console: Console, workers: Iterable[Worker]) -> None:
    """
    Render the worker list as a rich table.
    """
    rows = list(workers)
    if not rows:
        console.print("[yellow]The worker list is empty.[/yellow]")
        return

    table = Table(title="Workers", box=box.ROUNDED)
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Surname", style="magenta")
    table.add_column("Position", style="blue")

    for worker in rows:
        table.add_row(str(worker.id), escape(worker.surname), worker.position.label)

    console.print(table)
