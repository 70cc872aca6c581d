"""Terminal steps that hand a passing value to a closure."""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable

from gauntlet.assertions.base import Pass
from gauntlet.location import caller_line


class ThenOperators:
    def then(self, fn: Callable[[Any], Any], *, line: int | None = None) -> None:
        """Call `fn` with the value if this assertion passed.

        An exception raised by `fn` is recorded as a failure of this step.
        """
        line = caller_line() if line is None else line

        def call(value: Any) -> Pass:
            fn(value)
            return Pass.void()

        self.evaluate("then", line, call)

    def then_async(
        self, fn: Callable[[Any], Awaitable[Any]], *, line: int | None = None
    ) -> Awaitable[None]:
        """Async counterpart of `then`; `fn` may be a coroutine function."""
        line = caller_line() if line is None else line

        async def call(value: Any) -> Pass:
            outcome = fn(value)
            if inspect.isawaitable(outcome):
                await outcome
            return Pass.void()

        async def run() -> None:
            await self.async_evaluate("then", line, call)

        return run()
