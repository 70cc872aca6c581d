"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")

NEVER_EVALUATED_MESSAGE = "This assertion was never evaluated."


@dataclass(frozen=True)
class Message:
    """The assertion failed with a human-readable description.

    Attributes:
        text: Why the assertion failed, e.g. '"a" is not equal to the expected value "b"'.
    """

    text: str

    @property
    def detail(self) -> str:
        return self.text


@dataclass(frozen=True, eq=False)
class ThrownError:
    """The assertion failed because an exception was raised.

    The exception object itself is kept (never stringified) so that hosts
    can attach it to the reported failure and tests can compare it.

    Attributes:
        error: The exception that was raised.
    """

    error: BaseException

    @property
    def detail(self) -> str:
        return f"threw error {self.error!r}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThrownError):
            return False
        return _errors_equal(self.error, other.error)

    def __hash__(self) -> int:
        return hash((ThrownError, type(self.error)))


FailureReason = Union[Message, ThrownError]


def _errors_equal(lhs: BaseException, rhs: BaseException) -> bool:
    if lhs is rhs:
        return True
    if type(lhs) is not type(rhs):
        return False
    try:
        return bool(lhs == rhs) or lhs.args == rhs.args
    except Exception:
        return False


@dataclass(frozen=True)
class Pass(Generic[T]):
    """The assertion passed, carrying a value for the next link in the chain."""

    value: T

    is_pass = True
    is_fail = False

    @classmethod
    def void(cls) -> Pass[None]:
        """A passing result with no value."""
        return cls(None)


@dataclass(frozen=True)
class Fail:
    """The assertion failed.

    Attributes:
        reason: Why it failed; either a Message or a ThrownError.
    """

    reason: FailureReason

    is_pass = False
    is_fail = True

    @classmethod
    def message(cls, text: str) -> Fail:
        return cls(Message(text))

    @classmethod
    def thrown_error(cls, error: BaseException) -> Fail:
        return cls(ThrownError(error))


AssertionResult = Union[Pass[Any], Fail]
