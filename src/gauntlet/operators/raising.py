"""Checks on captured expressions that may raise."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Awaitable

from gauntlet.assertions.base import Fail, Pass
from gauntlet.assertions.expressions import AsyncThrowableExpression
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


def _raised(error: Exception, expected_type: type | None) -> Pass | Fail:
    if expected_type is None or isinstance(error, expected_type):
        return Pass(error)
    return Fail.message(
        f"Raised {type(error).__name__} is not an instance of expected type "
        f"{expected_type.__name__}"
    )


def _did_not_raise(output: Any) -> Fail:
    return Fail.message(f'Expression did not raise. Returned "{output}"')


def _needs_async(async_operator: str, pending: Any = None) -> Fail:
    # The awaitable never runs, so close it instead of leaving it unawaited.
    if inspect.iscoroutine(pending):
        pending.close()
    return Fail.message(f"Expression is async. Use {async_operator}() instead")


class RaisingOperators:
    def does_not_raise(self, *, line: int | None = None) -> Assertion[Any]:
        """Run the captured expression, passing its return value on.

        An exception it raises becomes a thrown_error failure. An async
        expression fails; await does_not_raise_async() for those.
        """
        line = caller_line() if line is None else line

        def check(expression: Any) -> Pass | Fail:
            if isinstance(expression, AsyncThrowableExpression):
                return _needs_async("does_not_raise_async")
            output = expression.evaluate()
            if inspect.isawaitable(output):
                return _needs_async("does_not_raise_async", output)
            return Pass(output)

        return self.evaluate("does_not_raise", line, check)

    def raises(
        self, expected_type: type | None = None, *, line: int | None = None
    ) -> Assertion[Exception]:
        """Run the captured expression, passing the exception it raised on."""
        line = caller_line() if line is None else line

        def check(expression: Any) -> Pass | Fail:
            if isinstance(expression, AsyncThrowableExpression):
                return _needs_async("raises_async")
            try:
                output = expression.evaluate()
            except Exception as error:
                return _raised(error, expected_type)
            if inspect.isawaitable(output):
                return _needs_async("raises_async", output)
            return _did_not_raise(output)

        return self.evaluate("raises", line, check)

    def does_not_raise_async(self, *, line: int | None = None) -> Awaitable[Assertion[Any]]:
        line = caller_line() if line is None else line

        async def check(expression: Any) -> Pass | Fail:
            return Pass(await expression.evaluate())

        return self.async_evaluate("does_not_raise_async", line, check)

    def raises_async(
        self, expected_type: type | None = None, *, line: int | None = None
    ) -> Awaitable[Assertion[Exception]]:
        line = caller_line() if line is None else line

        async def check(expression: Any) -> Pass | Fail:
            try:
                output = await expression.evaluate()
            except Exception as error:
                return _raised(error, expected_type)
            return _did_not_raise(output)

        return self.async_evaluate("raises_async", line, check)
