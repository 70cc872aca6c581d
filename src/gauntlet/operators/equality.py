"""Equality checks, exact or within an accuracy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gauntlet.assertions.base import Fail, Pass
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


def values_are_equal(lhs: Any, rhs: Any, accuracy: Any) -> bool:
    """True when `lhs` and `rhs` differ by no more than `accuracy`.

    NaN is never within accuracy of anything since every comparison with it
    is False.
    """
    if lhs == rhs:
        return True
    return abs(lhs - rhs) <= abs(accuracy)


class EqualityOperators:
    def is_equal_to(
        self, expected: Any, accuracy: Any = None, *, line: int | None = None
    ) -> Assertion[None]:
        """Assert that the value equals `expected`, optionally +/- `accuracy`."""
        line = caller_line() if line is None else line

        if accuracy is not None:

            def within_accuracy(value: Any) -> Pass | Fail:
                if values_are_equal(value, expected, accuracy):
                    return Pass.void()
                return Fail.message(
                    f"{value} is not equal to the expected value {expected}. "
                    f"Accuracy: {accuracy}"
                )

            return self.evaluate("is_equal_to(accuracy)", line, within_accuracy)

        def equal(value: Any) -> Pass | Fail:
            if value == expected:
                return Pass.void()
            return Fail.message(
                f'"{value}" is not equal to the expected value "{expected}"'
            )

        return self.evaluate("is_equal_to", line, equal)

    def is_not_equal_to(
        self, unexpected: Any, accuracy: Any = None, *, line: int | None = None
    ) -> Assertion[None]:
        """Assert that the value differs from `unexpected`, optionally by more than `accuracy`."""
        line = caller_line() if line is None else line

        if accuracy is not None:

            def outside_accuracy(value: Any) -> Pass | Fail:
                if not values_are_equal(value, unexpected, accuracy):
                    return Pass.void()
                return Fail.message(
                    f"{value} is equal to the expected value {unexpected}. "
                    f"Accuracy: {accuracy}"
                )

            return self.evaluate("is_not_equal_to(accuracy)", line, outside_accuracy)

        def not_equal(value: Any) -> Pass | Fail:
            if value != unexpected:
                return Pass.void()
            return Fail.message(f'"{value}" is equal to the specified value')

        return self.evaluate("is_not_equal_to", line, not_equal)
