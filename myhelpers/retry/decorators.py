"""
Retry Decorator
===============
Decorator for wrapping synchronous functions with fixed-interval retry.
"""

from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from .config import RetryConfig
from .executor import call_with_retry

T = TypeVar("T")


def with_retry(
    retry_count: Optional[int] = None,
    retry_interval_ms: Optional[int] = None,
):
    """
    Decorator for fixed-interval retry.

    Values left as None come from RetryConfig when the function is decorated.

    Usage:
        @with_retry(retry_count=5, retry_interval_ms=250)
        def fetch_rates():
            ...
    """
    count, interval = retry_count, retry_interval_ms
    if count is None or interval is None:
        defaults = RetryConfig()
        if count is None:
            count = defaults.retry_count
        if interval is None:
            interval = defaults.retry_interval_ms

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return call_with_retry(func, count, interval, *args, **kwargs)
        return wrapper
    return decorator
