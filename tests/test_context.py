"""Tests for TestContext."""

import pytest

from gauntlet import (
    NEVER_EVALUATED_MESSAGE,
    Message,
    MockFailureRecorder,
    Pass,
    PytestFailureRecorder,
    RecordedFailure,
    TestContext,
)
from gauntlet.config import GauntletConfig


class SaveError(Exception):
    pass


def test_assert_that_captures_call_site(ctx, recorder, lineno):
    root = ctx.assert_that(5)
    line = lineno() - 1

    assert root.name == "assert_that(int)"
    assert root.file_path == __file__
    assert root.line_number == line
    assert root.is_root
    root.is_equal_to(5)


def test_chain_from_assert_that(ctx, recorder, lineno):
    ctx.assert_that("Hello").is_not_none().is_equal_to("Goodbye")
    line = lineno() - 1

    assert recorder.recorded_failures == [
        RecordedFailure(
            "is_equal_to",
            Message('"Hello" is not equal to the expected value "Goodbye"'),
            __file__,
            line,
        )
    ]


def test_unevaluated_assert_that_records_at_call_site(ctx, recorder, lineno, collect):
    ctx.assert_that([1, 2])
    line = lineno() - 1
    collect()

    assert recorder.recorded_failures == [
        RecordedFailure("assert_that(list)", Message(NEVER_EVALUATED_MESSAGE), __file__, line)
    ]


def test_fail_records_immediately(ctx, recorder, lineno):
    assertion = ctx.fail("should not get here")
    line = lineno() - 1

    assert assertion.name == "fail"
    assert recorder.recorded_failures == [
        RecordedFailure("fail", Message("should not get here"), __file__, line)
    ]


def test_test_an_assertion_metadata(ctx):
    assertion = ctx.test_an_assertion("value")

    assert assertion.name == "TestAssertion"
    assert assertion.file_path == "/test/assertion/file/path"
    assert assertion.line_number == 0
    assert assertion.result == Pass("value")
    assertion.is_not_none()


def test_test_an_assertion_is_silent_by_default(ctx, recorder):
    ctx.test_an_assertion(1).is_equal_to(2)

    assert recorder.recorded_failures == []


def test_test_failed_assertion(ctx, recorder):
    failed = ctx.test_failed_assertion()

    assert failed.name == "TestFailedAssertion"
    assert failed.result.reason == Message("expected failure")
    assert recorder.recorded_failures == []


@pytest.mark.asyncio
async def test_assert_awaited(ctx, recorder, lineno):
    async def total():
        return 42

    assertion = await ctx.assert_awaited(total())
    line = lineno() - 1

    assert assertion.name == "assert_awaited"
    assert assertion.line_number == line
    assertion.is_equal_to(42)
    assert recorder.recorded_failures == []


def test_verify_passes_without_issues():
    context = TestContext(PytestFailureRecorder())
    context.assert_that(1).is_equal_to(1)

    context.verify()


def test_verify_fails_with_report():
    context = TestContext(PytestFailureRecorder())
    context.assert_that(1).is_equal_to(2)

    with pytest.raises(pytest.fail.Exception) as excinfo:
        context.verify()

    assert "1 assertion failure:" in str(excinfo.value)
    assert 'is_equal_to failed - "1" is not equal to the expected value "2"' in str(excinfo.value)


def test_verify_chains_first_thrown_error():
    context = TestContext(PytestFailureRecorder())
    error = SaveError("disk")

    def save():
        raise error

    context.assert_throwing(save).does_not_raise()

    with pytest.raises(pytest.fail.Exception) as excinfo:
        context.verify()

    assert excinfo.value.__cause__ is error


def test_verify_reports_discarded_roots():
    context = TestContext(PytestFailureRecorder())

    def forget():
        context.assert_that("dropped")

    forget()

    with pytest.raises(pytest.fail.Exception) as excinfo:
        context.verify()

    assert NEVER_EVALUATED_MESSAGE in str(excinfo.value)


def test_verify_only_logs_when_fail_on_issues_is_off():
    context = TestContext(PytestFailureRecorder(), GauntletConfig(fail_on_issues=False))
    context.assert_that(1).is_equal_to(2)

    context.verify()


def test_verify_ignores_non_pytest_recorders():
    recorder = MockFailureRecorder()
    context = TestContext(recorder)
    context.assert_that(1).is_equal_to(2)

    context.verify()

    assert len(recorder.recorded_failures) == 1


def test_teardown_verify_reports_live_unevaluated_roots(lineno, collect):
    context = TestContext(PytestFailureRecorder())
    pending = context.assert_that(42)
    line = lineno() - 1

    context.verify()

    with pytest.raises(pytest.fail.Exception) as excinfo:
        context.verify(teardown=True)

    assert f"{__file__}:{line}: assert_that(int) failed - {NEVER_EVALUATED_MESSAGE}" in str(excinfo.value)

    del pending
    collect()
    assert len(context.recorder.issues) == 1


def test_teardown_verify_leaves_evaluated_roots_alone():
    context = TestContext(PytestFailureRecorder())
    checked = context.assert_that(42)
    checked.is_equal_to(42)

    context.verify(teardown=True)

    assert context.recorder.issues == []


def test_verify_reports_each_issue_once():
    context = TestContext(PytestFailureRecorder())
    context.assert_that(1).is_equal_to(2)

    with pytest.raises(pytest.fail.Exception):
        context.verify()

    context.verify(teardown=True)

    context.assert_that(3).is_equal_to(4)
    with pytest.raises(pytest.fail.Exception) as excinfo:
        context.verify(teardown=True)

    assert "1 assertion failure:" in str(excinfo.value)
    assert '"3" is not equal to the expected value "4"' in str(excinfo.value)


def test_skip_verification():
    context = TestContext(PytestFailureRecorder())
    context.assert_that(1).is_equal_to(2)

    context.skip_verification()

    context.verify()
    context.verify(teardown=True)
