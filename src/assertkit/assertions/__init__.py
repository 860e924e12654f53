"""Assertions: assert_that, assert_none and assert_no_error."""

from assertkit.assertions.check import assert_no_error, assert_none, assert_that

__all__ = [
    'assert_no_error',
    'assert_none',
    'assert_that',
]
