"""Thread affinity checks."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from gauntlet.assertions.base import Fail, Pass
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


class ThreadOperators:
    def is_current_thread(self, *, line: int | None = None) -> Assertion[threading.Thread]:
        """Assert that the code runs on the thread held by this assertion.

        Use it inside callbacks to check they were delivered on the thread
        the caller asked for.
        """
        line = caller_line() if line is None else line

        def check(thread: Any) -> Pass | Fail:
            current = threading.current_thread()
            if current is thread:
                return Pass(thread)
            return Fail.message(
                f"The current thread ({current.name}) does not match the "
                f"expected thread ({thread.name})"
            )

        return self.evaluate("is_current_thread", line, check)
