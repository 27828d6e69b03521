"""
Domain models for the payroll registry.

Work types, workers and the work records embedded in each worker. Entities are
pydantic models so that construction doubles as validation: a model that exists
always satisfies the non-empty / positive constraints of its fields.
"""
from __future__ import annotations

from decimal import Decimal
from enum import IntEnum
from typing import List, Tuple

from pydantic import BaseModel, Field, PrivateAttr


class Position(IntEnum):
    """
    Closed set of positions a worker can hold.

    The numeric values double as the menu choices shown to the operator.
    """

    EMPLOYEE = 1
    MANAGER = 2
    ACCOUNTANT = 3

    @property
    def label(self) -> str:
        return position_label(self)


_POSITION_LABELS = {
    Position.EMPLOYEE: "Employee",
    Position.MANAGER: "Manager",
    Position.ACCOUNTANT: "Accountant",
}


def position_label(position: Position) -> str:
    """Human-readable name of a position."""
    return _POSITION_LABELS[Position(position)]


class WorkType(BaseModel):
    """
    A billable category of work with a fixed per-unit rate.
    """

    id: int = Field(..., gt=0, description="Registry-assigned identifier.")
    name: str = Field(..., min_length=1, description="Display name of the work type.")
    rate: Decimal = Field(..., gt=0, description="Payment per unit of work.")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": False,
    }


class WorkRecord(BaseModel):
    """
    Quantity of one work type completed by the owning worker.
    """

    work_type_id: int = Field(..., gt=0, description="Id of the referenced work type.")
    quantity: Decimal = Field(..., gt=0, description="Units of work completed.")

    model_config = {
        "frozen": True,
    }


class Worker(BaseModel):
    """
    An employee on the payroll.

    Identity and position are immutable. Work records can only be appended,
    and only the registry does so (after checking the work-type reference).
    """

    id: int = Field(..., gt=0, description="Registry-assigned identifier.")
    surname: str = Field(..., min_length=1, description="Worker surname.")
    position: Position = Field(..., description="Position held by the worker.")

    _records: List[WorkRecord] = PrivateAttr(default_factory=list)

    model_config = {
        "frozen": True,
    }

    @property
    def records(self) -> Tuple[WorkRecord, ...]:
        """Snapshot of the worker's records in insertion order."""
        return tuple(self._records)

    def _append_record(self, record: WorkRecord) -> None:
        self._records.append(record)


__all__ = [
    "Position",
    "WorkRecord",
    "WorkType",
    "Worker",
    "position_label",
]
