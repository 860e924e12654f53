"""@captured and @captured_async decorators for function-scope capture."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from assertkit.capture import Capture

__all__ = ['captured', 'captured_async']


def captured(
    handler: Callable[[BaseException], object],
    *,
    default: Any = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator that captures assertion failures raised by the function.

    When the wrapped function raises an AssertionFailure, handler is called
    with its cause and the call returns ``default``. Other exceptions
    propagate. Coroutine functions are detected and awaited.

    Args:
        handler: Called with the failure's cause.
        default: Value returned when a failure was captured.

    Example:
        ```python
        errors = []

        @captured(errors.append, default=0)
        def parse_port(raw: str) -> int:
            assert_that(raw.isdigit(), f'not a port: {raw!r}')
            return int(raw)

        parse_port('8080')
        # 8080
        parse_port('http')
        # 0, errors == [AssertionReason("not a port: 'http'")]
        ```
    """

    def decorate(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):
            return captured_async(handler, default=default)(func)

        @wrapt.decorator
        def sync_wrapper(
            wrapped: Callable[..., Any],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Any:
            with Capture(handler):
                return wrapped(*args, **kwargs)
            return default

        return sync_wrapper(func)

    return decorate


def captured_async(
    handler: Callable[[BaseException], object],
    *,
    default: Any = None,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Any]]]:
    """Async variant of @captured.

    Example:
        ```python
        @captured_async(log_failure)
        async def load(key: str) -> bytes:
            blob = await store.get(key)
            assert_none(blob.error, 'store returned an error')
            return blob.data
        ```
    """

    def decorate(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        @wrapt.decorator
        async def async_wrapper(
            wrapped: Callable[..., Awaitable[Any]],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Any:
            async with Capture(handler):
                return await wrapped(*args, **kwargs)
            return default

        return async_wrapper(func)

    return decorate
