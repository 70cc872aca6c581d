"""Deferred expressions that may raise, evaluated by a later assertion step."""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")


class ThrowableExpression(Generic[T]):
    """Wraps a zero-argument callable that may raise when evaluated.

    The callable is stored, not called, so `does_not_raise()` / `raises()`
    decide when it runs.
    """

    def __init__(self, expression: Callable[[], T]) -> None:
        self.expression = expression

    def evaluate(self) -> T:
        return self.expression()

    def __repr__(self) -> str:
        return f"ThrowableExpression({self.expression!r})"


class AsyncThrowableExpression(Generic[T]):
    """Wraps a zero-argument callable returning an awaitable that may raise."""

    def __init__(self, expression: Callable[[], Awaitable[T]]) -> None:
        self.expression = expression

    async def evaluate(self) -> T:
        outcome: Any = self.expression()
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return outcome

    def __repr__(self) -> str:
        return f"AsyncThrowableExpression({self.expression!r})"
