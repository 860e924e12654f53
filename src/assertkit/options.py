"""Reason inputs and option merging for assertions.

A reason is either text (``TextReason``) or a configurator (``Configurator``)
that edits the pending ``AssertOptions``. Plain strings and one-argument
callables are accepted as shorthands. Reasons are applied in order and the
last one to set the reason wins.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from assertkit.errors import AssertionFailure

__all__ = [
    'AssertOptions',
    'Configurator',
    'Reason',
    'TextReason',
    'merge_options',
    'with_error',
    'with_reason',
]


@dataclass
class AssertOptions:
    """Options being resolved for one failing assertion."""

    reason: AssertionFailure = field(default_factory=AssertionFailure)


@dataclass(frozen=True, slots=True)
class TextReason:
    """A reason given as plain text."""

    text: str

    def apply(self, options: AssertOptions) -> None:
        options.reason = AssertionFailure(self.text)


@dataclass(frozen=True, slots=True)
class Configurator:
    """A reason given as a function that edits the pending options."""

    fn: Callable[[AssertOptions], None]

    def apply(self, options: AssertOptions) -> None:
        self.fn(options)


type Reason = TextReason | Configurator | str | Callable[[AssertOptions], None]


def _as_variant(reason: Any) -> TextReason | Configurator:
    if isinstance(reason, TextReason | Configurator):
        return reason
    if isinstance(reason, str):
        return TextReason(reason)
    if callable(reason) and not isinstance(reason, type):
        return Configurator(reason)
    kind = reason.__name__ if isinstance(reason, type) else type(reason).__name__
    msg = f'reason must be text or a configurator, got {kind}'
    raise TypeError(msg)


def merge_options(reasons: Iterable[Reason]) -> AssertOptions:
    """Resolve reasons, in order, into a fresh AssertOptions.

    Raises:
        TypeError: If a reason is neither text nor a configurator. Classes
            are rejected even though they are callable.
    """
    options = AssertOptions()
    for reason in reasons:
        _as_variant(reason).apply(options)
    return options


def with_reason(value: Any) -> Configurator:
    """Configurator that sets the reason from any value.

    Text and exceptions are used as the cause; other values become an
    UnknownCause.

    Example:
        ```python
        assert_that(port > 0, with_reason(ValueError('port must be positive')))
        ```
    """

    def configure(options: AssertOptions) -> None:
        options.reason = AssertionFailure(value)

    return Configurator(configure)


def with_error(error: BaseException) -> Configurator:
    """Configurator that sets an existing exception as the cause."""
    if not isinstance(error, BaseException):
        msg = f'with_error() expects an exception, got {type(error).__name__}'
        raise TypeError(msg)
    return with_reason(error)
