"""
Payroll - console payroll department for piece-rate work.

This package keeps an in-memory registry of:

- Work types: billable categories of work with a fixed rate per unit
- Workers: employees with a surname and a position
- Work records: quantities of work each worker completed

and computes each worker's salary (rate x quantity over their records) as well
as the total payout, behind an interactive console menu.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from payroll.config import Settings, get_settings
from payroll.domain import (
    ErrorKind,
    InvalidInputError,
    NotFoundError,
    PayrollError,
    Position,
    Result,
    WorkRecord,
    WorkType,
    Worker,
    position_label,
)
from payroll.registry import PayrollRegistry
from payroll.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Registry
    "PayrollRegistry",
    # Domain
    "Position",
    "WorkRecord",
    "WorkType",
    "Worker",
    "position_label",
    # Results and errors
    "ErrorKind",
    "InvalidInputError",
    "NotFoundError",
    "PayrollError",
    "Result",
    # Logging
    "configure_logging",
    "get_logger",
]
