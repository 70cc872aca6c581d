"""Entry points for writing assertions inside a test."""

from __future__ import annotations

import gc
import weakref
from typing import Any, Awaitable, Callable, TypeVar, Union

import pytest

from gauntlet.assertions import Assertion, AsyncThrowableExpression, Fail, ThrowableExpression
from gauntlet.config import GauntletConfig
from gauntlet.location import caller_location
from gauntlet.recording import FailureRecorder, PytestFailureRecorder, SilentFailureRecorder

T = TypeVar("T")

TEST_ASSERTION_NAME = "TestAssertion"
TEST_ASSERTION_FILE_PATH = "/test/assertion/file/path"
TEST_FAILED_ASSERTION_NAME = "TestFailedAssertion"


def _root_name(value: Any) -> str:
    return f"assert_that({type(value).__name__})"


class TestContext:
    """Creates root assertions for one test and reports what they recorded.

    The `gauntlet` pytest fixture provides one per test:

        def test_total(gauntlet):
            gauntlet.assert_that(cart.total).is_equal_to(42)
    """

    __test__ = False

    def __init__(
        self,
        recorder: FailureRecorder | None = None,
        config: GauntletConfig | None = None,
    ) -> None:
        self.recorder = recorder if recorder is not None else PytestFailureRecorder()
        self.config = config if config is not None else GauntletConfig()
        self._roots: weakref.WeakSet[Assertion[Any]] = weakref.WeakSet()
        self._reported = 0
        self._skip_verification = False

    def _track(self, root: Assertion[T]) -> Assertion[T]:
        self._roots.add(root)
        return root

    async def _track_awaited(self, pending: Awaitable[Assertion[T]]) -> Assertion[T]:
        return self._track(await pending)

    def assert_that(self, value: T) -> Assertion[T]:
        """Begin a chain on `value`."""
        location = caller_location()
        return self._track(
            Assertion.of_value(
                value,
                _root_name(value),
                location.file_path,
                location.line_number,
                self.recorder,
            )
        )

    def assert_throwing(self, fn: Callable[[], T]) -> Assertion[ThrowableExpression[T]]:
        """Begin a chain on an expression that may raise; follow with raises() or does_not_raise()."""
        location = caller_location()
        return self._track(
            Assertion.of_throwing(
                fn,
                "assert_throwing",
                location.file_path,
                location.line_number,
                self.recorder,
            )
        )

    def assert_async_throwing(
        self, fn: Callable[[], Awaitable[T]]
    ) -> Assertion[AsyncThrowableExpression[T]]:
        location = caller_location()
        return self._track(
            Assertion.of_async_throwing(
                fn,
                "assert_async_throwing",
                location.file_path,
                location.line_number,
                self.recorder,
            )
        )

    def assert_awaited(
        self, expression: Union[Awaitable[T], Callable[[], Awaitable[T]]]
    ) -> Awaitable[Assertion[T]]:
        """Await `expression` and begin a chain on its value."""
        location = caller_location()
        return self._track_awaited(
            Assertion.of_awaitable(
                expression,
                "assert_awaited",
                location.file_path,
                location.line_number,
                self.recorder,
            )
        )

    def fail(self, message: str) -> Assertion[Any]:
        """Record a failure right away."""
        location = caller_location()
        assertion = Assertion(
            Fail.message(message),
            "fail",
            location.file_path,
            location.line_number,
            self.recorder,
            is_root=True,
        )
        assertion.record_failure()
        return assertion

    def test_an_assertion(
        self, value: T, recorder: FailureRecorder | None = None
    ) -> Assertion[T]:
        """A root assertion with fixed metadata, for testing operators.

        Failures go to `recorder`, or nowhere by default.
        """
        return Assertion.of_value(
            value,
            TEST_ASSERTION_NAME,
            TEST_ASSERTION_FILE_PATH,
            0,
            recorder if recorder is not None else SilentFailureRecorder(),
        )

    def test_failed_assertion(self) -> Assertion[Any]:
        return Assertion(
            Fail.message("expected failure"),
            TEST_FAILED_ASSERTION_NAME,
            TEST_ASSERTION_FILE_PATH,
            0,
            SilentFailureRecorder(),
            is_root=True,
        )

    def verify(self, teardown: bool = False) -> None:
        """Fail the current test if any issue was recorded since the last verify.

        With `teardown`, roots made through this context that are still
        alive and unevaluated are first reported as never evaluated.

        Only issues collected by a PytestFailureRecorder are reported.
        """
        if self._skip_verification:
            return
        if self.config.collect_garbage:
            gc.collect()
        if teardown:
            for root in list(self._roots):
                root.report_if_unevaluated()

        if not isinstance(self.recorder, PytestFailureRecorder):
            return
        issues = self.recorder.issues[self._reported :]
        self._reported += len(issues)
        if not issues or not self.config.fail_on_issues:
            return

        cause = next((issue.error for issue in issues if issue.error is not None), None)
        raise pytest.fail.Exception(self.recorder.report(issues), pytrace=False) from cause

    def skip_verification(self) -> None:
        """Make later verify() calls do nothing.

        Used once the test has already failed for another reason.
        """
        self._skip_verification = True
