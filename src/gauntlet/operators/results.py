"""Checks on result-like values.

A result-like value is either this package's Pass/Fail, or any object that
follows the common `is_ok()` / `unwrap()` / `unwrap_err()` convention.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gauntlet.assertions.base import Fail, Pass
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


def split_result(result: Any) -> tuple[bool, Any]:
    """Return (is_ok, payload) for a result-like value.

    Raises:
        TypeError: When `result` is not result-like.
    """
    if isinstance(result, Pass):
        return True, result.value
    if isinstance(result, Fail):
        return False, result.reason

    is_ok = getattr(result, "is_ok", None)
    if is_ok is None:
        raise TypeError(f"{type(result).__name__} is not a result type")
    if callable(is_ok):
        is_ok = is_ok()

    if is_ok:
        return True, result.unwrap()
    return False, result.unwrap_err()


class ResultOperators:
    def is_success(self, *, line: int | None = None) -> Assertion[Any]:
        """Assert that the result succeeded, passing the success payload on."""
        line = caller_line() if line is None else line

        def check(result: Any) -> Pass | Fail:
            ok, payload = split_result(result)
            if ok:
                return Pass(payload)
            return Fail.message(f"Result is a failure: {payload}")

        return self.evaluate("is_success", line, check)

    def is_failure(self, *, line: int | None = None) -> Assertion[Any]:
        """Assert that the result failed, passing the error payload on."""
        line = caller_line() if line is None else line

        def check(result: Any) -> Pass | Fail:
            ok, payload = split_result(result)
            if ok:
                return Fail.message("Result is a success")
            return Pass(payload)

        return self.evaluate("is_failure", line, check)
