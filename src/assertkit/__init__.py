"""assertkit: always-on assertions with scoped recovery.

Assertions raise a tagged AssertionFailure; capture() or @captured at a chosen
boundary turns it back into an ordinary error value and lets every other
exception through.

Flat imports (preferred):
    from assertkit import assert_that, assert_none, assert_no_error, capture

Submodule imports (for organization):
    from assertkit.assertions import assert_that
    from assertkit.errors import AssertionFailure
    from assertkit.decorators import captured
"""

# Assertions
from assertkit.assertions import assert_no_error, assert_none, assert_that

# Recovery
from assertkit.capture import Capture, capture

# Configuration
from assertkit._config import AssertConfig, get_config, init
from assertkit._logging import configure_logging, get_logger

# Decorators
from assertkit.decorators import captured, captured_async

# Errors
from assertkit.errors import (
    AssertionFailed,
    AssertionFailure,
    AssertionReason,
    UnknownCause,
    normalize_cause,
)

# Reasons
from assertkit.options import (
    AssertOptions,
    Configurator,
    Reason,
    TextReason,
    merge_options,
    with_error,
    with_reason,
)

__all__ = [
    'AssertConfig',
    'AssertOptions',
    'AssertionFailed',
    'AssertionFailure',
    'AssertionReason',
    'Capture',
    'Configurator',
    'Reason',
    'TextReason',
    'UnknownCause',
    'assert_no_error',
    'assert_none',
    'assert_that',
    'capture',
    'captured',
    'captured_async',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'merge_options',
    'normalize_cause',
    'with_error',
    'with_reason',
]
