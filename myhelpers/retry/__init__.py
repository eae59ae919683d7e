"""
Fixed-Interval Retry
====================
Re-run failing synchronous operations a bounded number of times.
"""

from .exceptions import InvalidArgument, RetryExhausted
from .models import RetryOutcome
from .config import RetryConfig
from .executor import (
    RetryExecutor,
    call_with_retry,
    execute,
    execute_action,
)
from .decorators import with_retry

__all__ = [
    # Exceptions
    "InvalidArgument",
    "RetryExhausted",
    # Models
    "RetryOutcome",
    # Config
    "RetryConfig",
    # Executor
    "RetryExecutor",
    "call_with_retry",
    "execute",
    "execute_action",
    # Decorator
    "with_retry",
]
