"""Decorators: @captured and @captured_async."""

from assertkit.decorators.captured import captured, captured_async

__all__ = [
    'captured',
    'captured_async',
]
