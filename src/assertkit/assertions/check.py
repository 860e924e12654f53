"""assert_that, assert_none and assert_no_error.

Unlike the built-in ``assert`` statement these always run, even with
``python -O``. A failed check raises AssertionFailure, which capture() and
@captured turn back into an ordinary error value.
"""

from __future__ import annotations

from typing import Any

from assertkit._logging import log_event
from assertkit.errors import AssertionFailure
from assertkit.options import Reason, merge_options

__all__ = ['assert_no_error', 'assert_none', 'assert_that']


def assert_that(condition: Any, *reasons: Reason) -> None:
    """Raise AssertionFailure if condition is falsy.

    Args:
        condition: The condition to check.
        *reasons: Text or configurators describing the failure. Applied in
            order; the last one to set a reason wins. Only evaluated on
            failure.

    Raises:
        AssertionFailure: If condition is falsy. Without reasons the
            failure wraps an empty cause.

    Example:
        ```python
        assert_that(len(items) > 0, 'items must not be empty')
        assert_that(False)
        # AssertionFailure: AssersionError:
        ```
    """
    if condition:
        return
    failure = merge_options(reasons).reason
    log_event('assertion_failed', failure.unwrap())
    raise failure


def assert_none(value: Any, *reasons: Reason) -> None:
    """Raise AssertionFailure unless value is None.

    Absence is identity with None. Empty containers, zero, False and wrapper
    objects holding None are all present and fail the check.
    """
    assert_that(value is None, *reasons)


def assert_no_error(error: BaseException | None) -> None:
    """Raise AssertionFailure wrapping error unless it is None.

    The failure unwraps to ``error`` itself.

    Example:
        ```python
        err = validate(payload)
        assert_no_error(err)
        ```
    """
    if error is not None:
        failure = AssertionFailure(error)
        log_event('assertion_failed', failure.unwrap())
        raise failure
