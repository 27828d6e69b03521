"""
Result contract and error taxonomy for registry operations.

Registry operations report failures as values instead of raising: every
mutating call returns a `Result` carrying either the produced value or an
`ErrorKind` plus a short message. Callers that would rather raise (scripts,
tests) can call `Result.unwrap()`, which maps each kind onto a typed exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, Optional, Type, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Kinds of failure a registry operation can report."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"


class PayrollError(Exception):
    """
    Base class for payroll errors.

    Attributes
    ----------
    code : str
        Machine-readable error code, equal to the matching `ErrorKind` value.
    """

    code: str = "PAYROLL_ERROR"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.code)
        self.message = message


class NotFoundError(PayrollError):
    """A worker, work type or surname did not resolve."""

    code = ErrorKind.NOT_FOUND.value


class InvalidInputError(PayrollError):
    """A required string was empty or a numeric value was out of bounds."""

    code = ErrorKind.INVALID_INPUT.value


_ERRORS_BY_KIND: Dict[ErrorKind, Type[PayrollError]] = {
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.INVALID_INPUT: InvalidInputError,
}


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a registry operation.

    Truthy when the operation succeeded, so `if registry.add_work_record(...)`
    reads the same way a boolean status would.
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str = "") -> "Result[T]":
        return cls(error=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """
        Return the value of a successful result.

        Raises
        ------
        NotFoundError, InvalidInputError
            When the result is a failure of the corresponding kind.
        """
        if self.error is not None:
            raise _ERRORS_BY_KIND[self.error](self.message)
        return self.value  # type: ignore[return-value]


__all__ = [
    "ErrorKind",
    "InvalidInputError",
    "NotFoundError",
    "PayrollError",
    "Result",
]
