"""
Console input helpers.

Every helper keeps asking until the operator types something acceptable,
printing a short error line after each rejected attempt. Input is read through
a `read(prompt) -> str` callable so the helpers can be driven by a rich console
in the application and by a scripted list of answers in tests. End of input
(`EOFError`) is not caught here; the menu uses it to end the session.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from rich.console import Console

Reader = Callable[[str], str]

_WHITESPACE = " \t\r\n"


def _default_reader(console: Console) -> Reader:
    return lambda prompt: console.input(prompt)


def _error(console: Console, message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")


def ask_non_empty(
    console: Console, prompt: str, read: Optional[Reader] = None
) -> str:
    """Ask for a string, stripped of surrounding whitespace, that is not empty."""
    read = read or _default_reader(console)
    while True:
        text = read(prompt).strip(_WHITESPACE)
        if text:
            return text
        _error(console, "the value must not be empty. Try again.")


def ask_positive_decimal(
    console: Console, prompt: str, read: Optional[Reader] = None
) -> Decimal:
    """Ask for a finite decimal number greater than zero."""
    read = read or _default_reader(console)
    while True:
        text = read(prompt).strip(_WHITESPACE).replace(",", ".")
        try:
            value = Decimal(text)
        except InvalidOperation:
            _error(console, "enter a number.")
            continue
        if not value.is_finite():
            _error(console, "enter a number.")
            continue
        if value > 0:
            return value
        _error(console, "the value must be greater than 0. Try again.")


def ask_positive_int(
    console: Console,
    prompt: str,
    max_allowed: int = 10_000,
    read: Optional[Reader] = None,
) -> int:
    """Ask for a whole number between 1 and `max_allowed`, digits only."""
    read = read or _default_reader(console)
    while True:
        text = read(prompt).strip(_WHITESPACE)
        if not text:
            _error(console, "the value must not be empty. Try again.")
            continue
        if not (text.isascii() and text.isdigit()):
            _error(console, "enter a whole number.")
            continue
        value = int(text)
        if value <= 0:
            _error(console, "the value must be greater than 0. Try again.")
            continue
        if value > max_allowed:
            _error(console, f"the value must not exceed {max_allowed}. Try again.")
            continue
        return value


def ask_int_in_range(
    console: Console,
    prompt: str,
    low: int,
    high: int,
    read: Optional[Reader] = None,
) -> int:
    """Ask for a whole number in the inclusive range [low, high]."""
    read = read or _default_reader(console)
    while True:
        text = read(prompt).strip(_WHITESPACE)
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not (digits.isascii() and digits.isdigit()):
            _error(console, "enter a whole number.")
            continue
        value = int(text)
        if low <= value <= high:
            return value
        _error(console, f"enter a number in the range [{low}, {high}].")


def ask_menu_choice(
    console: Console,
    prompt: str,
    low: int,
    high: int,
    read: Optional[Reader] = None,
) -> int:
    """Ask for a menu item number in [low, high], digits only."""
    read = read or _default_reader(console)
    while True:
        text = read(prompt).strip(_WHITESPACE)
        if not text:
            _error(console, "the value must not be empty.")
            continue
        if not (text.isascii() and text.isdigit()):
            _error(console, "enter a whole number.")
            continue
        value = int(text)
        if low <= value <= high:
            return value
        _error(console, f"number out of range [{low}, {high}].")


__all__ = [
    "Reader",
    "ask_int_in_range",
    "ask_menu_choice",
    "ask_non_empty",
    "ask_positive_decimal",
    "ask_positive_int",
]
