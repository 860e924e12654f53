"""Assertion failure types: the raised marker, its causes, and a struct variant."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'AssertionFailed',
    'AssertionFailure',
    'AssertionReason',
    'UnknownCause',
    'normalize_cause',
]

UNKNOWN_CAUSE_MESSAGE = 'unknown error object used'


class AssertionReason(Exception):
    """Cause built from a plain-text reason."""


class UnknownCause(AssertionReason):
    """Cause used when a reason is neither text nor an exception."""

    def __init__(self) -> None:
        super().__init__(UNKNOWN_CAUSE_MESSAGE)


def normalize_cause(value: Any) -> BaseException:
    """Turn any reason value into an exception usable as a cause.

    Text becomes an AssertionReason, exceptions are returned unchanged and
    everything else becomes an UnknownCause. Never raises.
    """
    if isinstance(value, str):
        return AssertionReason(value)
    if isinstance(value, BaseException):
        return value
    return UnknownCause()


class AssertionFailed(msgspec.Struct, frozen=True, gc=False):
    """Assertion failed - struct variant for Result-based or serialized code."""

    message: str
    cause_type: str = 'AssertionReason'

    def to_exception(self) -> AssertionFailure:
        """Convert to exception for raise-based code."""
        return AssertionFailure(AssertionReason(self.message))


class AssertionFailure(AssertionError):
    """Marker raised when an assertion does not hold.

    Wraps exactly one cause. Capture points recognize the failure by type and
    hand the cause, not the marker, to their handler. The cause is also set as
    ``__cause__`` so standard exception-chain inspection reaches it.

    ``raise AssertionFailure(...) from other`` replaces ``__cause__`` but not the
    wrapped cause. unwrap() is what capture() and @captured hand to handlers;
    ``__cause__`` is only traceback context.
    """

    __slots__ = ('_cause',)

    def __init__(self, cause: Any = '') -> None:
        """Initialize the marker.

        Args:
            cause: The underlying cause. Normalized with normalize_cause().
        """
        cause = normalize_cause(cause)
        object.__setattr__(self, '_cause', cause)
        super().__init__(f'AssersionError: {cause}')
        self.__cause__ = cause

    def __setattr__(self, name: str, value: Any) -> None:
        # Python's raise machinery writes these dunders on every raise.
        if name in ('__cause__', '__context__', '__traceback__', '__suppress_context__', '__notes__'):
            object.__setattr__(self, name, value)
            return
        msg = f'{type(self).__name__} is immutable'
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._cause,))

    @property
    def cause(self) -> BaseException:
        """The wrapped cause."""
        return self._cause

    def unwrap(self) -> BaseException:
        """Return the wrapped cause, regardless of later changes to ``__cause__``."""
        return self._cause

    def to_struct(self) -> AssertionFailed:
        """Convert to struct for Result-based code."""
        return AssertionFailed(str(self._cause), type(self._cause).__name__)
