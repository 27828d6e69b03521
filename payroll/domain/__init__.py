"""
Domain package for the payroll registry.

Exports the entity models and the result/error contract shared by the registry
and the console layer. Keep this package focused on data definitions and
validation concerns.
"""

from payroll.domain.models import Position, WorkRecord, WorkType, Worker, position_label
from payroll.domain.results import (
    ErrorKind,
    InvalidInputError,
    NotFoundError,
    PayrollError,
    Result,
)

__all__ = [
    "ErrorKind",
    "InvalidInputError",
    "NotFoundError",
    "PayrollError",
    "Position",
    "Result",
    "WorkRecord",
    "WorkType",
    "Worker",
    "position_label",
]
