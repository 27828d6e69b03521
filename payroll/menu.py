"""
Interactive command loop of the payroll console.

`MenuSession` reads menu choices and dispatches them to the registry; it owns
no state of its own besides the injected registry, console and settings.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from rich.console import Console
from rich.markup import escape

from payroll.config import Settings, get_settings
from payroll.domain.models import Position, position_label
from payroll.domain.results import ErrorKind, Result
from payroll.prompts import (
    Reader,
    ask_int_in_range,
    ask_menu_choice,
    ask_non_empty,
    ask_positive_decimal,
    ask_positive_int,
)
from payroll.registry import PayrollRegistry
from payroll.reporter import format_money, format_quantity, render_work_types, render_workers
from payroll.utils.logging import get_logger

log = get_logger(__name__)

MENU_ITEMS = (
    (1, "Add a work type"),
    (2, "Show all work types"),
    (3, "Add a worker"),
    (4, "Show all workers"),
    (5, "Record completed work for a worker"),
    (6, "Calculate a worker's salary (by surname)"),
    (7, "Show the total payout to all workers"),
    (0, "Exit"),
)

_FAILURE_LABELS = {
    ErrorKind.NOT_FOUND: "Not found",
    ErrorKind.INVALID_INPUT: "Invalid input",
}


class MenuSession:
    """
    One run of the payroll menu against a registry.

    Parameters
    ----------
    registry : PayrollRegistry
        Store the commands operate on.
    console : Console | None
        Output console. Defaults to a new rich console on stdout.
    settings : Settings | None
        Input bounds. Defaults to `get_settings()`.
    read : Reader | None
        Line reader used for every prompt. Defaults to `console.input`.
    """

    def __init__(
        self,
        registry: PayrollRegistry,
        console: Optional[Console] = None,
        settings: Optional[Settings] = None,
        read: Optional[Reader] = None,
    ) -> None:
        self.registry = registry
        self.console = console or Console()
        self.settings = settings or get_settings()
        self._read: Reader = read or (lambda prompt: self.console.input(prompt))
        self._commands: Dict[int, Callable[[], None]] = {
            1: self.add_work_type,
            2: self.list_work_types,
            3: self.add_worker,
            4: self.list_workers,
            5: self.add_work_record,
            6: self.salary_by_surname,
            7: self.total_payout,
        }

    def run(self) -> None:
        """Loop until the operator picks Exit or input runs out."""
        log.info("Menu session started")
        try:
            while True:
                self.print_menu()
                choice = ask_menu_choice(
                    self.console, "Choose a menu item: ", 0, max(self._commands), read=self._read
                )
                if choice == 0:
                    self.console.print("Exiting.")
                    break
                self._commands[choice]()
        except EOFError:
            self.console.print()
            self.console.print("End of input.")
        self.console.print("Program finished.")
        log.info("Menu session finished")

    def print_menu(self) -> None:
        self.console.print()
        self.console.print("[bold]=== Payroll department menu ===[/bold]")
        for number, title in MENU_ITEMS:
            self.console.print(f"{number}. {title}")
        self.console.print("===============================")

    def _report_failure(self, result: Result) -> None:
        label = _FAILURE_LABELS.get(result.error, "Error")  # type: ignore[arg-type]
        self.console.print(f"[red]{label}:[/red] {escape(result.message)}")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_work_type(self) -> None:
        name = ask_non_empty(self.console, "Work type name: ", read=self._read)
        max_rate = self.settings.max_rate
        while True:
            rate = ask_positive_decimal(self.console, "Rate (payment per unit): ", read=self._read)
            if rate <= max_rate:
                break
            self.console.print(f"[red]Error:[/red] the rate must not exceed {max_rate}. Try again.")

        result = self.registry.add_work_type(name, rate)
        if result:
            self.console.print(f"Work type added, ID = {result.value}")
        else:
            self._report_failure(result)

    def list_work_types(self) -> None:
        render_work_types(self.console, self.registry.work_types)

    def add_worker(self) -> None:
        surname = ask_non_empty(self.console, "Worker surname: ", read=self._read)
        position = self.choose_position()
        result = self.registry.add_worker(surname, position)
        if result:
            self.console.print(f"Worker added, ID = {result.value}")
        else:
            self._report_failure(result)

    def choose_position(self) -> Position:
        self.console.print("Choose a position:")
        for position in Position:
            self.console.print(f"{position.value}. {position_label(position)}")
        choice = ask_int_in_range(
            self.console, "Your choice (1-3): ", 1, len(Position), read=self._read
        )
        return Position(choice)

    def list_workers(self) -> None:
        render_workers(self.console, self.registry.workers)

    def add_work_record(self) -> None:
        max_id = self.settings.max_lookup_id

        self.list_workers()
        worker_id = ask_int_in_range(
            self.console, "ID of the worker to record work for: ", 1, max_id, read=self._read
        )
        worker = self.registry.find_worker_by_id(worker_id)
        if worker is None:
            self.console.print("No worker with this ID.")
            return

        self.list_work_types()
        work_type_id = ask_int_in_range(
            self.console, "Work type ID: ", 1, max_id, read=self._read
        )
        work_type = self.registry.find_work_type_by_id(work_type_id)
        if work_type is None:
            self.console.print("No work type with this ID.")
            return

        max_quantity = self.settings.max_quantity
        quantity = ask_positive_int(
            self.console,
            f"Units completed (whole number, at most {max_quantity}): ",
            max_allowed=max_quantity,
            read=self._read,
        )

        result = self.registry.add_work_record(worker_id, work_type_id, quantity)
        if result:
            self.console.print(
                f"Record added: {escape(worker.surname)} completed "
                f"{format_quantity(result.value.quantity)} unit(s) of '{escape(work_type.name)}'"
            )
        else:
            self._report_failure(result)

    def salary_by_surname(self) -> None:
        surname = ask_non_empty(
            self.console, "Surname of the worker to calculate salary for: ", read=self._read
        )
        result = self.registry.salary_by_surname(surname)
        if result:
            self.console.print(f"Salary of {escape(surname)} = {format_money(result.value)}")
        else:
            self.console.print(f"No worker with surname '{escape(surname)}'.")

    def total_payout(self) -> None:
        total = self.registry.get_total_payout()
        self.console.print(f"Total payout to all workers = {format_money(total)}")


__all__ = ["MENU_ITEMS", "MenuSession"]
