"""
Pytest configuration for the payroll console.

Provides fixtures for:
- Fresh registries (unbounded and bounded by settings)
- Settings isolated from the environment
- A capturing rich console and scripted operator input
"""

from __future__ import annotations

import io
from typing import Iterable, List

import pytest
from rich.console import Console

from payroll.config import Settings, get_settings
from payroll.domain.models import Position
from payroll.registry import PayrollRegistry


class ScriptedInput:
    """
    Line reader that replays canned answers and records the prompts it was given.

    Raises EOFError once the answers run out, like `input()` at end of stdin.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers: List[str] = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


class CapturingConsole(Console):
    """Plain-text rich console writing into a buffer."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        super().__init__(file=self.buffer, width=120, color_system=None, force_terminal=False)

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """
    Settings with defaults only, regardless of the caller's environment.
    """
    for name in (
        "APP_ENV",
        "LOG_LEVEL",
        "LOG_JSON",
        "PAYROLL_MAX_RATE",
        "PAYROLL_MAX_QUANTITY",
        "PAYROLL_MAX_LOOKUP_ID",
    ):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def registry() -> PayrollRegistry:
    """Empty registry that only enforces positivity."""
    return PayrollRegistry()


@pytest.fixture
def bounded_registry(test_settings: Settings) -> PayrollRegistry:
    """Empty registry enforcing the default rate and quantity bounds."""
    return PayrollRegistry.from_settings(test_settings)


@pytest.fixture
def seeded_registry(registry: PayrollRegistry) -> PayrollRegistry:
    """
    Registry with two work types and three workers.

    Hour (id 1) pays 100, Part (id 2) pays 2.5. Smith (1) did 5 hours and
    10 parts, Jones (2) did 3 hours, Brown (3) has no records.
    """
    registry.add_work_type("Hour", 100).unwrap()
    registry.add_work_type("Part", "2.5").unwrap()
    registry.add_worker("Smith", Position.EMPLOYEE).unwrap()
    registry.add_worker("Jones", Position.MANAGER).unwrap()
    registry.add_worker("Brown", Position.ACCOUNTANT).unwrap()
    registry.add_work_record(1, 1, 5).unwrap()
    registry.add_work_record(1, 2, 10).unwrap()
    registry.add_work_record(2, 1, 3).unwrap()
    return registry


@pytest.fixture
def console() -> CapturingConsole:
    return CapturingConsole()


@pytest.fixture
def scripted():
    """Factory for ScriptedInput readers."""

    def _make(*answers: str) -> ScriptedInput:
        return ScriptedInput(answers)

    return _make
