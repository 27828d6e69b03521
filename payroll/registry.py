"""
In-memory payroll registry.

Owns the work-type catalogue and the worker list, assigns ids, checks the
work-type reference of every record before attaching it, and computes salaries
from quantity x rate.

Usage:
    from payroll.registry import PayrollRegistry

    registry = PayrollRegistry()
    hour_id = registry.add_work_type("Hour", 100).unwrap()
    smith_id = registry.add_worker("Smith", Position.EMPLOYEE).unwrap()
    registry.add_work_record(smith_id, hour_id, 5)
    registry.calculate_salary(registry.find_worker_by_id(smith_id))  # Decimal("500")
"""

from __future__ import annotations

import threading
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, List, Optional, Tuple, Union

from pydantic import ValidationError

from payroll.domain.models import Position, WorkRecord, WorkType, Worker
from payroll.domain.results import ErrorKind, Result
from payroll.utils.logging import get_logger

if TYPE_CHECKING:
    from payroll.config import Settings

log = get_logger(__name__)

Number = Union[Decimal, int, float, str]


def _to_decimal(value: Number) -> Optional[Decimal]:
    """Convert a numeric input to Decimal, or None if it is not a finite number."""
    if isinstance(value, bool):
        return None
    try:
        # str() first so 0.1 stays 0.1 rather than its binary expansion.
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def _bound(name: str, value: Optional[Number]) -> Optional[Decimal]:
    """Parse an optional upper bound; a given bound must be a positive finite number."""
    if value is None:
        return None
    number = _to_decimal(value)
    if number is None or number <= 0:
        raise ValueError(f"{name} must be a positive number, got {value!r}")
    return number


def _validation_message(exc: ValidationError) -> str:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg", "")


class PayrollRegistry:
    """
    Process-lifetime store of work types and workers.

    Construct one instance at start-up and hand it to whatever needs it. The
    registry cannot be copied or pickled; every operation runs under a single
    re-entrant lock so id assignment and appends stay atomic.

    Parameters
    ----------
    max_rate : Decimal | None
        Upper bound accepted by `add_work_type`. None means only positivity is checked.
    max_quantity : Decimal | None
        Upper bound accepted by `add_work_record`. None means only positivity is checked.

    Raises
    ------
    ValueError
        When a bound is given but is not a positive finite number.
    """

    def __init__(
        self,
        max_rate: Optional[Number] = None,
        max_quantity: Optional[Number] = None,
    ) -> None:
        self._work_types: List[WorkType] = []
        self._workers: List[Worker] = []
        self._next_work_type_id = 1
        self._next_worker_id = 1
        self._max_rate = _bound("max_rate", max_rate)
        self._max_quantity = _bound("max_quantity", max_quantity)
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PayrollRegistry":
        """Build a registry enforcing the rate and quantity bounds from settings."""
        return cls(max_rate=settings.max_rate, max_quantity=settings.max_quantity)

    def __copy__(self) -> "PayrollRegistry":
        raise TypeError("PayrollRegistry cannot be copied")

    def __deepcopy__(self, memo: Any) -> "PayrollRegistry":
        raise TypeError("PayrollRegistry cannot be copied")

    def __reduce__(self) -> Any:
        raise TypeError("PayrollRegistry cannot be pickled")

    @property
    def max_rate(self) -> Optional[Decimal]:
        return self._max_rate

    @property
    def max_quantity(self) -> Optional[Decimal]:
        return self._max_quantity

    # ------------------------------------------------------------------
    # Work types
    # ------------------------------------------------------------------

    @property
    def work_types(self) -> Tuple[WorkType, ...]:
        """Snapshot of all work types in creation order."""
        with self._lock:
            return tuple(self._work_types)

    def add_work_type(self, name: str, rate: Number) -> Result[int]:
        """
        Register a new work type and return its id.

        Fails with INVALID_INPUT when the name is empty, the rate is not a
        positive number, or the rate exceeds `max_rate`.
        """
        amount = _to_decimal(rate)
        if amount is None:
            return self._invalid(f"rate: not a number: {rate!r}")
        if self._max_rate is not None and amount > self._max_rate:
            return self._invalid(f"rate: must not exceed {self._max_rate}")

        with self._lock:
            try:
                work_type = WorkType(id=self._next_work_type_id, name=name, rate=amount)
            except ValidationError as exc:
                return self._invalid(_validation_message(exc))
            self._next_work_type_id += 1
            self._work_types.append(work_type)

        log.info(
            "Work type added",
            extra={"work_type_id": work_type.id, "work_type": work_type.name, "rate": str(amount)},
        )
        return Result.success(work_type.id)

    def find_work_type_by_id(self, work_type_id: int) -> Optional[WorkType]:
        with self._lock:
            for work_type in self._work_types:
                if work_type.id == work_type_id:
                    return work_type
        return None

    # ------------------------------------------------------------------
    # Workers
    # ------------------------------------------------------------------

    @property
    def workers(self) -> Tuple[Worker, ...]:
        """Snapshot of all workers in creation order."""
        with self._lock:
            return tuple(self._workers)

    def add_worker(self, surname: str, position: Union[Position, int]) -> Result[int]:
        """
        Register a new worker and return its id.

        Fails with INVALID_INPUT when the surname is empty or the position is
        not one of the known positions.
        """
        with self._lock:
            try:
                worker = Worker(id=self._next_worker_id, surname=surname, position=position)
            except ValidationError as exc:
                return self._invalid(_validation_message(exc))
            self._next_worker_id += 1
            self._workers.append(worker)

        log.info(
            "Worker added",
            extra={
                "worker_id": worker.id,
                "surname": worker.surname,
                "position": worker.position.name,
            },
        )
        return Result.success(worker.id)

    def find_worker_by_id(self, worker_id: int) -> Optional[Worker]:
        with self._lock:
            for worker in self._workers:
                if worker.id == worker_id:
                    return worker
        return None

    def find_worker_by_surname(self, surname: str) -> Optional[Worker]:
        """
        Return the first worker (in creation order) whose surname equals `surname`.

        The match is exact: case-sensitive and without trimming.
        """
        with self._lock:
            for worker in self._workers:
                if worker.surname == surname:
                    return worker
        return None

    # ------------------------------------------------------------------
    # Records and salaries
    # ------------------------------------------------------------------

    def add_work_record(
        self, worker_id: int, work_type_id: int, quantity: Number
    ) -> Result[WorkRecord]:
        """
        Attach a record of completed work to a worker.

        Both ids must resolve (NOT_FOUND otherwise, worker checked first) and
        the quantity must be positive and within `max_quantity` (INVALID_INPUT).
        Nothing is appended unless every check passes.
        """
        with self._lock:
            worker = self.find_worker_by_id(worker_id)
            if worker is None:
                return self._not_found(f"worker {worker_id} not found")
            if self.find_work_type_by_id(work_type_id) is None:
                return self._not_found(f"work type {work_type_id} not found")

            amount = _to_decimal(quantity)
            if amount is None:
                return self._invalid(f"quantity: not a number: {quantity!r}")
            if self._max_quantity is not None and amount > self._max_quantity:
                return self._invalid(f"quantity: must not exceed {self._max_quantity}")
            try:
                record = WorkRecord(work_type_id=work_type_id, quantity=amount)
            except ValidationError as exc:
                return self._invalid(_validation_message(exc))
            worker._append_record(record)

        log.info(
            "Work record added",
            extra={"worker_id": worker_id, "work_type_id": work_type_id, "quantity": str(amount)},
        )
        return Result.success(record)

    def calculate_salary(self, worker: Worker) -> Decimal:
        """
        Sum rate x quantity over the worker's records using current rates.

        A record whose work type no longer resolves contributes nothing. The
        public API never produces such a record, so this is logged as a warning.
        """
        total = Decimal("0")
        with self._lock:
            for record in worker.records:
                work_type = self.find_work_type_by_id(record.work_type_id)
                if work_type is None:
                    log.warning(
                        "Skipping record with unknown work type",
                        extra={"worker_id": worker.id, "work_type_id": record.work_type_id},
                    )
                    continue
                total += work_type.rate * record.quantity
        return total

    def salary_by_surname(self, surname: str) -> Result[Decimal]:
        """Salary of the first worker with the given surname."""
        with self._lock:
            worker = self.find_worker_by_surname(surname)
            if worker is None:
                return self._not_found(f"no worker with surname {surname!r}")
            return Result.success(self.calculate_salary(worker))

    def get_total_payout(self) -> Decimal:
        """Sum of all workers' salaries."""
        with self._lock:
            return sum((self.calculate_salary(worker) for worker in self._workers), Decimal("0"))

    # ------------------------------------------------------------------

    @staticmethod
    def _invalid(message: str) -> Result[Any]:
        log.debug("Rejected invalid input", extra={"reason": message})
        return Result.failure(ErrorKind.INVALID_INPUT, message)

    @staticmethod
    def _not_found(message: str) -> Result[Any]:
        log.debug("Lookup failed", extra={"reason": message})
        return Result.failure(ErrorKind.NOT_FOUND, message)


__all__ = ["PayrollRegistry"]
