"""Checks on bool values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gauntlet.assertions.base import Fail, Pass
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


def _describe(value: Any) -> str:
    if value is None:
        return "value is None"
    if value is False:
        return "value is false"
    if value is True:
        return "value is true"
    return f'"{value}" is not a bool'


class BooleanOperators:
    def is_true(self, *, line: int | None = None) -> Assertion[None]:
        """Assert that the value is exactly True. None fails."""
        line = caller_line() if line is None else line

        def check(value: Any) -> Pass | Fail:
            if value is True:
                return Pass.void()
            return Fail.message(_describe(value))

        return self.evaluate("is_true", line, check)

    def is_false(self, *, line: int | None = None) -> Assertion[None]:
        """Assert that the value is exactly False. None fails."""
        line = caller_line() if line is None else line

        def check(value: Any) -> Pass | Fail:
            if value is False:
                return Pass.void()
            return Fail.message(_describe(value))

        return self.evaluate("is_false", line, check)
