"""
Demo data generation for the payroll console.

Fills a fresh registry with deterministic pseudo-random work types, workers and
work records, then prints every worker's salary and the total payout.
"""

from __future__ import annotations

import random
import sys
import time

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from payroll.domain.models import Position
from payroll.registry import PayrollRegistry
from payroll.reporter import format_money

app = typer.Typer(help="Generate synthetic payroll data and print the resulting payouts.")

WORK_TYPE_NAMES = ["Hour", "Shift", "Part", "Assembly", "Inspection", "Delivery", "Report"]
SURNAMES = ["Smith", "Ivanov", "Garcia", "Novak", "Schmidt", "Rossi", "Kowalski", "Tanaka"]


def _populate_registry(
    registry: PayrollRegistry,
    work_types: int,
    workers: int,
    records_per_worker: int,
    seed: int,
) -> PayrollRegistry:
    rng = random.Random(seed)

    work_type_ids = []
    for i in range(work_types):
        name = WORK_TYPE_NAMES[i % len(WORK_TYPE_NAMES)]
        if i >= len(WORK_TYPE_NAMES):
            name = f"{name} {i // len(WORK_TYPE_NAMES) + 1}"
        rate = round(rng.uniform(10, 2_000), 2)
        work_type_ids.append(registry.add_work_type(name, rate).unwrap())

    positions = list(Position)
    for _ in range(workers):
        worker_id = registry.add_worker(rng.choice(SURNAMES), rng.choice(positions)).unwrap()
        if not work_type_ids:
            continue
        for _ in range(records_per_worker):
            registry.add_work_record(
                worker_id, rng.choice(work_type_ids), rng.randint(1, 100)
            ).unwrap()

    return registry


def _payout_table(registry: PayrollRegistry) -> Table:
    table = Table(title="Payroll", box=box.ROUNDED, caption="Salaries by worker")
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Surname", style="magenta")
    table.add_column("Position", style="blue")
    table.add_column("Records", justify="right")
    table.add_column("Salary", justify="right", style="bold green")

    for worker in registry.workers:
        table.add_row(
            str(worker.id),
            worker.surname,
            worker.position.label,
            str(len(worker.records)),
            format_money(registry.calculate_salary(worker)),
        )
    return table


@app.command()
def main(
    work_types: int = typer.Option(5, "--work-types", "-t", help="Number of work types."),
    workers: int = typer.Option(10, "--workers", "-w", help="Number of workers."),
    records: int = typer.Option(
        3, "--records", "-r", help="Work records to attach to each worker."
    ),
    seed: int = typer.Option(42, "--seed", help="Deterministic RNG seed."),
) -> None:
    """
    Generate synthetic payroll data and print salaries and the total payout.
    """
    start = time.perf_counter()
    registry = _populate_registry(
        PayrollRegistry(), work_types=work_types, workers=workers,
        records_per_worker=records, seed=seed,
    )
    duration = time.perf_counter() - start

    console = Console()
    console.print(_payout_table(registry))
    console.print(f"Total payout = {format_money(registry.get_total_payout())}")
    typer.echo(f"Generated {work_types} work types and {workers} workers in {duration:.3f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
