"""
MyHelpers
=========
Small shared helpers.
"""

__version__ = "1.0.0"

# Retry
from myhelpers.retry import (
    InvalidArgument,
    RetryConfig,
    RetryExecutor,
    RetryExhausted,
    RetryOutcome,
    call_with_retry,
    execute,
    execute_action,
    with_retry,
)

# Logging
from myhelpers.logging_setup import setup_logging

__all__ = [
    # Retry
    "InvalidArgument",
    "RetryConfig",
    "RetryExecutor",
    "RetryExhausted",
    "RetryOutcome",
    "call_with_retry",
    "execute",
    "execute_action",
    "with_retry",
    # Logging
    "setup_logging",
]
