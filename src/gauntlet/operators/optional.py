"""None checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gauntlet.assertions.base import Fail, Pass
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


class OptionalOperators:
    def is_none(self, *, line: int | None = None) -> Assertion[None]:
        line = caller_line() if line is None else line

        def check(value: Any) -> Pass | Fail:
            if value is None:
                return Pass.void()
            return Fail.message("value is not None")

        return self.evaluate("is_none", line, check)

    def is_not_none(self, *, line: int | None = None) -> Assertion[Any]:
        """Assert that the value is not None, passing the value on."""
        line = caller_line() if line is None else line

        def check(value: Any) -> Pass | Fail:
            if value is None:
                return Fail.message("value is None")
            return Pass(value)

        return self.evaluate("is_not_none", line, check)
