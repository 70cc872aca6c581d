"""Object identity checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gauntlet.assertions.base import Fail, Pass
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


class IdentityOperators:
    def is_identical_to(self, expected: Any, *, line: int | None = None) -> Assertion[None]:
        line = caller_line() if line is None else line

        def check(value: Any) -> Pass | Fail:
            if value is expected:
                return Pass.void()
            return Fail.message("The objects are not identical")

        return self.evaluate("is_identical_to", line, check)

    def is_not_identical_to(self, unexpected: Any, *, line: int | None = None) -> Assertion[None]:
        line = caller_line() if line is None else line

        def check(value: Any) -> Pass | Fail:
            if value is not unexpected:
                return Pass.void()
            return Fail.message("The objects are identical")

        return self.evaluate("is_not_identical_to", line, check)
