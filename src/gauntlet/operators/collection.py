"""Checks on sized containers and strings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gauntlet.assertions.base import Fail, Pass
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


def _items(count: int) -> str:
    return "item" if count == 1 else "items"


class CollectionOperators:
    def is_empty(self, *, line: int | None = None) -> Assertion[None]:
        """Assert that the collection has no items."""
        line = caller_line() if line is None else line

        def check(collection: Any) -> Pass | Fail:
            count = len(collection)
            if count == 0:
                return Pass.void()
            return Fail.message(f"The collection has {count} {_items(count)}")

        return self.evaluate("is_empty", line, check)

    def is_not_empty(self, *, line: int | None = None) -> Assertion[Any]:
        """Assert that the collection has items, passing the collection on."""
        line = caller_line() if line is None else line

        def check(collection: Any) -> Pass | Fail:
            if len(collection) > 0:
                return Pass(collection)
            return Fail.message("The collection is empty")

        return self.evaluate("is_not_empty", line, check)

    def has_count(self, expected_count: int, *, line: int | None = None) -> Assertion[Any]:
        line = caller_line() if line is None else line

        def check(collection: Any) -> Pass | Fail:
            count = len(collection)
            if count == expected_count:
                return Pass(collection)
            return Fail.message(
                f"Count of {count} is not equal to the expected count {expected_count}"
            )

        return self.evaluate("has_count", line, check)

    def contains(
        self, item: Any, ignoring_case: bool = False, *, line: int | None = None
    ) -> Assertion[Any]:
        """Assert that the value contains `item`, passing the value on.

        For a str value this is a substring check. For any other container
        it is a membership check; `ignoring_case` then matches str elements
        case-insensitively.
        """
        line = caller_line() if line is None else line

        def check(value: Any) -> Pass | Fail:
            if isinstance(value, str):
                source = value.lower() if ignoring_case else value
                substring = item.lower() if ignoring_case else item
                if substring in source:
                    return Pass(value)
                options = "ignoring case" if ignoring_case else "case sensitive"
                return Fail.message(f'"{value}" does not contain "{item}" ({options})')

            if ignoring_case and isinstance(item, str):
                found = any(
                    isinstance(element, str) and element.lower() == item.lower()
                    for element in value
                )
            else:
                found = item in value

            if found:
                return Pass(value)
            return Fail.message(f'The collection does not contain "{item}"')

        return self.evaluate("contains", line, check)
