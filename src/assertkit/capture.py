"""capture(): turn an assertion failure back into an error value."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType

from assertkit._logging import log_event
from assertkit.errors import AssertionFailure

__all__ = ['Capture', 'capture']


class Capture:
    """Context manager that hands assertion failures to a handler.

    An AssertionFailure raised inside the block is absorbed and its cause is
    passed to the handler. Every other exception is forwarded unchanged.
    """

    __slots__ = ('_handler',)

    def __init__(self, handler: Callable[[BaseException], object]) -> None:
        self._handler = handler

    def __enter__(self) -> Capture:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        return self.handle(exc)

    async def __aenter__(self) -> Capture:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        return self.handle(exc)

    def handle(self, exc: BaseException | None) -> bool:
        """Dispatch an in-flight exception.

        Returns:
            True if exc was an assertion failure and has been handled,
            False if it must keep propagating (or there was none).
        """
        if exc is None:
            return False
        if not isinstance(exc, AssertionFailure):
            return False
        cause = exc.unwrap()
        log_event('assertion_captured', cause)
        self._handler(cause)
        return True


def capture(handler: Callable[[BaseException], object]) -> Capture:
    """Capture assertion failures raised inside a with block.

    Args:
        handler: Called with the failure's cause, never the failure itself.

    Example:
        ```python
        errors = []
        with capture(errors.append):
            assert_that(user.active, 'user is inactive')
        # errors == [AssertionReason('user is inactive')]

        with capture(errors.append):
            raise KeyError('id')  # propagates, handler not called
        ```
    """
    return Capture(handler)
