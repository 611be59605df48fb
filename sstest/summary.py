"""Tallies of tests, suites and assertions, and the library version."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import NamedTuple

from sstest.errors import SSTestError


class Version(NamedTuple):
    """Semantic version of the library."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


VERSION = Version(0, 1, 0)
"""Version of the library as a tuple."""

VERSION_STRING = "0.1.0"
"""Version of the library as text."""


@dataclass
class TestTotals:
    """Counts of test functions, test suites and assertions.

    Each group has a total (expected to run), a number that ran and a
    number that passed.
    """

    __test__ = False

    test_functions_total: int = 0
    test_functions_ran: int = 0
    test_functions_passed: int = 0

    test_suites_total: int = 0
    test_suites_ran: int = 0
    test_suites_passed: int = 0

    assertions_total: int = 0
    assertions_ran: int = 0
    assertions_passed: int = 0

    def __add__(self, other: TestTotals) -> TestTotals:
        if not isinstance(other, TestTotals):
            return NotImplemented
        return TestTotals(
            **{
                field.name: getattr(self, field.name) + getattr(other, field.name)
                for field in fields(self)
            }
        )

    @staticmethod
    def _all_passed(
        total: int, ran: int, passed: int, pass_vacuous: bool, pass_skipped: bool
    ) -> bool:
        if total == 0:
            return pass_vacuous
        expected = ran if pass_skipped else total
        return passed == expected

    def all_tests_passed(
        self, pass_vacuous: bool = True, pass_skipped: bool = False
    ) -> bool:
        """True if every test function expected to run has passed.

        With ``pass_vacuous`` an empty run counts as passing; with
        ``pass_skipped`` only the tests that ran must have passed.
        """
        return self._all_passed(
            self.test_functions_total,
            self.test_functions_ran,
            self.test_functions_passed,
            pass_vacuous,
            pass_skipped,
        )

    def all_assertions_passed(
        self, pass_vacuous: bool = True, pass_skipped: bool = False
    ) -> bool:
        """True if every assertion expected to run has passed.

        With ``pass_vacuous`` no assertions counts as passing; with
        ``pass_skipped`` only the assertions that ran must have passed.
        """
        return self._all_passed(
            self.assertions_total,
            self.assertions_ran,
            self.assertions_passed,
            pass_vacuous,
            pass_skipped,
        )

    def validate(self) -> bool:
        """Check that the counts are consistent; raise ``SSTestError`` if not."""
        groups = (
            ("test functions", self.test_functions_total,
             self.test_functions_ran, self.test_functions_passed),
            ("test suites", self.test_suites_total,
             self.test_suites_ran, self.test_suites_passed),
            ("assertions", self.assertions_total,
             self.assertions_ran, self.assertions_passed),
        )
        for name, total, ran, passed in groups:
            if min(total, ran, passed) < 0:
                raise SSTestError(f"negative count of {name}")
            if ran > total:
                raise SSTestError(f"more {name} ran ({ran}) than expected ({total})")
            if passed > ran:
                raise SSTestError(f"more {name} passed ({passed}) than ran ({ran})")
        return True

    def reset(self) -> None:
        """Set every count back to zero."""
        for field in fields(self):
            setattr(self, field.name, 0)


class TestSummary:
    """Accumulates results into a ``TestTotals``."""

    __test__ = False

    def __init__(self, totals: TestTotals | None = None) -> None:
        self._totals = replace(totals) if totals is not None else TestTotals()

    def reset(self) -> None:
        """Return to a blank summary with all counts at zero."""
        self._totals.reset()

    def add_assertion_result(self, passed: bool) -> TestSummary:
        """Count one assertion that ran, and whether it passed."""
        if passed:
            self._totals.assertions_passed += 1
        self._totals.assertions_total += 1
        self._totals.assertions_ran += 1
        return self

    def totals(self) -> TestTotals:
        """A copy of the current counts."""
        return replace(self._totals)

    def __add__(self, other: TestSummary) -> TestSummary:
        if not isinstance(other, TestSummary):
            return NotImplemented
        return TestSummary(self._totals + other._totals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TestSummary):
            return NotImplemented
        return self._totals == other._totals

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TestSummary({self._totals!r})"