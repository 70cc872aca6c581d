"""Checks on assertions about assertions.

These are for testing custom operators: wrap the assertion an operator
produced and check which step it came from and how it ended.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gauntlet.assertions.base import Fail, Pass
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


class MetaOperators:
    def did_pass(
        self, expected_name: str, expected_line: int, *, line: int | None = None
    ) -> Assertion[Any]:
        """Assert that the inner assertion passed with the expected name and line.

        A name or line mismatch is recorded on its own and does not change
        the returned assertion, which carries the inner value when the inner
        assertion passed.
        """
        line = caller_line() if line is None else line
        name = "did_pass"
        self._validate(name, line, expected_name, expected_line)
        return self.evaluate(name, line, lambda inner: inner.result)

    def did_fail(
        self, expected_name: str, expected_line: int, *, line: int | None = None
    ) -> Assertion[Any]:
        """Assert that the inner assertion failed with the expected name and line.

        Passes the inner FailureReason on.
        """
        line = caller_line() if line is None else line
        name = "did_fail"
        self._validate(name, line, expected_name, expected_line)

        def check(inner: Any) -> Pass | Fail:
            if isinstance(inner.result, Fail):
                return Pass(inner.result.reason)
            return Fail.message("Result was a success")

        return self.evaluate(name, line, check)

    def _validate(self, name: str, line: int, expected_name: str, expected_line: int) -> None:
        def check_name(inner: Any) -> Pass | Fail:
            if inner.name == expected_name:
                return Pass.void()
            return Fail.message(
                f'Name "{inner.name}" is not equal to expected name "{expected_name}"'
            )

        def check_line(inner: Any) -> Pass | Fail:
            if inner.line_number == expected_line:
                return Pass.void()
            return Fail.message(
                f'Line "{inner.line_number}" is not equal to expected line "{expected_line}"'
            )

        # Only the recorded failures matter; the nodes are dropped.
        self.evaluate(name, line, check_name)
        self.evaluate(name, line, check_line)
