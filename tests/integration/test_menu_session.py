"""
End-to-end menu sessions driven by scripted operator input.

Each test feeds a full sequence of answers to `MenuSession.run` and checks both
what the operator saw and the resulting registry state.
"""

from __future__ import annotations

from decimal import Decimal

from payroll.domain.models import Position
from payroll.menu import MenuSession
from payroll.registry import PayrollRegistry

EXIT = "0"


def _run(registry, console, settings, read) -> MenuSession:
    session = MenuSession(registry, console=console, settings=settings, read=read)
    session.run()
    return session


class TestMenuSession:
    def test_exit_immediately(self, bounded_registry, console, test_settings, scripted):
        read = scripted(EXIT)
        _run(bounded_registry, console, test_settings, read)

        assert "Payroll department menu" in console.text
        assert "Exiting." in console.text
        assert "Program finished." in console.text
        assert read.remaining == 0

    def test_end_of_input_finishes_session(self, bounded_registry, console, test_settings, scripted):
        _run(bounded_registry, console, test_settings, scripted("2"))

        assert "End of input." in console.text
        assert "Program finished." in console.text

    def test_full_payroll_flow(self, bounded_registry, console, test_settings, scripted):
        read = scripted(
            "1", "  Hour  ", "100",           # add work type
            "3", "Smith", "1",                 # add worker (Employee)
            "5", "1", "1", "5",                # record 5 hours for worker 1
            "6", "Smith",                      # salary by surname
            "7",                               # total payout
            EXIT,
        )

        _run(bounded_registry, console, test_settings, read)

        text = console.text
        assert "Work type added, ID = 1" in text
        assert "Worker added, ID = 1" in text
        assert "Record added: Smith completed 5 unit(s) of 'Hour'" in text
        assert "Salary of Smith = 500.00" in text
        assert "Total payout to all workers = 500.00" in text
        assert bounded_registry.find_work_type_by_id(1).name == "Hour"
        assert bounded_registry.find_worker_by_id(1).position is Position.EMPLOYEE
        assert read.remaining == 0

    def test_rate_above_cap_is_asked_again(self, bounded_registry, console, test_settings, scripted):
        read = scripted("1", "Consulting", "150000", "-1", "99999.99", EXIT)

        _run(bounded_registry, console, test_settings, read)

        assert "must not exceed 100000" in console.text
        assert bounded_registry.find_work_type_by_id(1).rate == Decimal("99999.99")

    def test_unknown_worker_aborts_record(self, bounded_registry, console, test_settings, scripted):
        bounded_registry.add_work_type("Hour", 100)
        read = scripted("5", "42", EXIT)

        _run(bounded_registry, console, test_settings, read)

        assert "No worker with this ID." in console.text
        assert read.remaining == 0

    def test_unknown_work_type_aborts_record(self, bounded_registry, console, test_settings, scripted):
        bounded_registry.add_worker("Smith", Position.MANAGER)
        read = scripted("5", "1", "7", EXIT)

        _run(bounded_registry, console, test_settings, read)

        assert "The work type list is empty." in console.text
        assert "No work type with this ID." in console.text
        assert bounded_registry.find_worker_by_id(1).records == ()

    def test_quantity_is_capped(self, bounded_registry, console, test_settings, scripted):
        bounded_registry.add_work_type("Part", "0.5")
        bounded_registry.add_worker("Smith", Position.EMPLOYEE)
        read = scripted("5", "1", "1", "10001", "1.5", "3", EXIT)

        _run(bounded_registry, console, test_settings, read)

        assert "must not exceed 10000" in console.text
        assert bounded_registry.calculate_salary(bounded_registry.find_worker_by_id(1)) == Decimal("1.5")

    def test_salary_for_unknown_surname(self, bounded_registry, console, test_settings, scripted):
        _run(bounded_registry, console, test_settings, scripted("6", "Nobody", EXIT))

        assert "No worker with surname 'Nobody'." in console.text

    def test_listings(self, seeded_registry, console, test_settings, scripted):
        _run(seeded_registry, console, test_settings, scripted("2", "4", "7", EXIT))

        text = console.text
        assert "Work types" in text and "Hour" in text
        assert "Workers" in text and "Jones" in text and "Manager" in text
        assert "Total payout to all workers = 825.00" in text

    def test_invalid_menu_choice_is_asked_again(self, console, test_settings, scripted):
        read = scripted("9", "abc", EXIT)

        _run(PayrollRegistry(), console, test_settings, read)

        assert "out of range [0, 7]" in console.text
        assert "enter a whole number" in console.text
        assert read.remaining == 0

    def test_very_large_rate_is_listed(self, console, test_settings, scripted):
        settings = test_settings.model_copy(update={"max_rate": Decimal("1e40")})
        registry = PayrollRegistry.from_settings(settings)
        read = scripted("1", "Big", "1e30", "2", "3", "Smith", "1", "5", "1", "1", "2", "7", EXIT)

        _run(registry, console, settings, read)

        text = console.text
        assert "1" + "0" * 30 + ".00" in text
        assert "Total payout to all workers = 2" + "0" * 30 + ".00" in text
        assert "Program finished." in text
