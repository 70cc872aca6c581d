"""Type conformance checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gauntlet.assertions.base import Fail, Pass
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


def _type_name(kind: Any) -> str:
    if isinstance(kind, tuple):
        return " | ".join(_type_name(k) for k in kind)
    return getattr(kind, "__qualname__", repr(kind))


class TypeOperators:
    def is_instance_of(self, expected_type: Any, *, line: int | None = None) -> Assertion[Any]:
        """Assert that the value is an instance of `expected_type`, passing it on."""
        line = caller_line() if line is None else line

        def check(value: Any) -> Pass | Fail:
            if isinstance(value, expected_type):
                return Pass(value)
            return Fail.message(
                f"Value of type {_type_name(type(value))} does not conform to "
                f"expected type {_type_name(expected_type)}"
            )

        return self.evaluate("is_instance_of", line, check)
