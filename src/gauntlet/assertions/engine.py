"""The Assertion chain node and its evaluation primitives."""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

from gauntlet.assertions.base import (
    NEVER_EVALUATED_MESSAGE,
    AssertionResult,
    Fail,
    Pass,
)
from gauntlet.assertions.expressions import (
    AsyncThrowableExpression,
    ThrowableExpression,
)
from gauntlet.operators import (
    BooleanOperators,
    CollectionOperators,
    EqualityOperators,
    IdentityOperators,
    MetaOperators,
    OptionalOperators,
    RaisingOperators,
    ReasonOperators,
    ResultOperators,
    ThenOperators,
    ThreadOperators,
    TypeOperators,
)
from gauntlet.recording.base import FailureRecorder

T = TypeVar("T")
U = TypeVar("U")

Evaluator = Callable[[T], AssertionResult]
AsyncEvaluator = Callable[[T], Union[Awaitable[AssertionResult], AssertionResult]]


class Assertion(
    EqualityOperators,
    BooleanOperators,
    CollectionOperators,
    OptionalOperators,
    TypeOperators,
    IdentityOperators,
    ResultOperators,
    ReasonOperators,
    MetaOperators,
    RaisingOperators,
    ThenOperators,
    ThreadOperators,
    Generic[T],
):
    """An assertion that has been made on a value.

    Every operator (`is_equal_to`, `contains`, `is_success`, ...) calls
    `evaluate` and returns a new Assertion, so checks chain:

        gauntlet.assert_that(result).is_success().is_equal_to("expected")

    Once a link fails, later links skip their checks and carry the failure
    forward under their own name and line. Each failure is recorded exactly
    once, by the step where it first happened.

    A root assertion (created from a captured value) that is discarded
    without ever being evaluated records "This assertion was never
    evaluated." against its own call site.

    Attributes:
        result: Pass(value) or Fail(reason). Never changes after construction.
        name: What this link checked, e.g. "is_equal_to".
        file_path: File captured at the call site.
        line_number: Line captured at the call site.
        recorder: Where failures go. Shared by every link in a chain.
        is_root: True only for the link created directly from a value.
    """

    def __init__(
        self,
        result: AssertionResult,
        name: str,
        file_path: str,
        line_number: int,
        recorder: FailureRecorder,
        is_root: bool = False,
    ) -> None:
        # Constructing never records; call record_failure() for a result
        # that has not been recorded elsewhere.
        self.result = result
        self.name = name
        self.file_path = file_path
        self.line_number = line_number
        self.recorder = recorder
        self.is_root = is_root
        self._has_settled = False

    def __del__(self) -> None:
        if getattr(self, "is_root", False):
            self.report_if_unevaluated()

    def __repr__(self) -> str:
        return (
            f"Assertion(name={self.name!r}, result={self.result!r}, "
            f"file_path={self.file_path!r}, line_number={self.line_number})"
        )

    # --- Construction ---

    @classmethod
    def of_value(
        cls,
        value: T,
        name: str,
        file_path: str,
        line_number: int,
        recorder: FailureRecorder,
        is_root: bool = True,
    ) -> Assertion[T]:
        return cls(Pass(value), name, file_path, line_number, recorder, is_root)

    @classmethod
    def of_throwing(
        cls,
        expression: Callable[[], T],
        name: str,
        file_path: str,
        line_number: int,
        recorder: FailureRecorder,
    ) -> Assertion[ThrowableExpression[T]]:
        """Capture `expression` unevaluated for does_not_raise()/raises()."""
        return cls.of_value(
            ThrowableExpression(expression), name, file_path, line_number, recorder
        )

    @classmethod
    def of_async_throwing(
        cls,
        expression: Callable[[], Awaitable[T]],
        name: str,
        file_path: str,
        line_number: int,
        recorder: FailureRecorder,
    ) -> Assertion[AsyncThrowableExpression[T]]:
        """Capture an async `expression` for does_not_raise_async()/raises_async()."""
        return cls.of_value(
            AsyncThrowableExpression(expression),
            name,
            file_path,
            line_number,
            recorder,
        )

    @classmethod
    async def of_awaitable(
        cls,
        expression: Union[Awaitable[T], Callable[[], Awaitable[T]]],
        name: str,
        file_path: str,
        line_number: int,
        recorder: FailureRecorder,
    ) -> Assertion[T]:
        """Await `expression` and build a root assertion on its value.

        The expression is not expected to raise; use of_async_throwing for
        expressions that might.
        """
        awaitable = expression() if callable(expression) else expression
        value = await awaitable
        return cls.of_value(value, name, file_path, line_number, recorder)

    # --- Evaluation ---

    def evaluate(
        self,
        name: str,
        line_number: int,
        evaluator: Evaluator[T],
    ) -> Assertion[Any]:
        """Return a new Assertion from running `evaluator` on this value.

        The evaluator only runs when this assertion passed. A Fail it
        returns, or an exception it raises, is recorded once under `name`
        and `line_number`. When this assertion already failed the evaluator
        is skipped and the same reason is carried forward, unrecorded.
        """
        self._has_settled = True

        if isinstance(self.result, Fail):
            return self._with_result(self.result, name, line_number)

        try:
            new_result = _checked(name, evaluator(self.result.value))
        except Exception as error:
            new_result = Fail.thrown_error(error)

        new_assertion = self._with_result(new_result, name, line_number)
        new_assertion.record_failure()
        return new_assertion

    async def async_evaluate(
        self,
        name: str,
        line_number: int,
        evaluator: AsyncEvaluator[T],
    ) -> Assertion[Any]:
        """Async counterpart of `evaluate`; the evaluator is awaited once.

        Nothing is awaited when this assertion already failed. Cancellation
        while awaiting propagates and leaves no new assertion behind.
        """
        self._has_settled = True

        if isinstance(self.result, Fail):
            return self._with_result(self.result, name, line_number)

        try:
            outcome = evaluator(self.result.value)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            new_result = _checked(name, outcome)
        except Exception as error:
            new_result = Fail.thrown_error(error)

        new_assertion = self._with_result(new_result, name, line_number)
        new_assertion.record_failure()
        return new_assertion

    def report_if_unevaluated(self) -> None:
        """Record "never evaluated" now for a root that is still unsettled.

        Settles the root, so releasing it later records nothing more.
        """
        if not self.is_root or self._has_settled:
            return

        self._has_settled = True
        self._with_result(Fail.message(NEVER_EVALUATED_MESSAGE)).record_failure()

    def record_failure(self) -> None:
        """Send this assertion's own failure, if any, to the recorder."""
        if not isinstance(self.result, Fail):
            return

        self._has_settled = True
        self.recorder.record(
            self.name, self.result.reason, self.file_path, self.line_number
        )

    def _with_result(
        self,
        new_result: AssertionResult,
        new_name: str | None = None,
        new_line_number: int | None = None,
    ) -> Assertion[Any]:
        """Copy with a new result and optionally a new name and line. Never records."""
        return Assertion(
            result=new_result,
            name=new_name if new_name is not None else self.name,
            file_path=self.file_path,
            line_number=(
                new_line_number if new_line_number is not None else self.line_number
            ),
            recorder=self.recorder,
            is_root=False,
        )


def _checked(name: str, outcome: object) -> AssertionResult:
    if isinstance(outcome, (Pass, Fail)):
        return outcome
    raise TypeError(
        f"{name} evaluator returned {type(outcome).__name__}, expected Pass or Fail"
    )
