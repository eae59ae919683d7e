"""
Retry Errors
============
InvalidArgument for unusable call or config arguments, and
RetryExhausted once every attempt has failed.
"""

from typing import Optional


class InvalidArgument(ValueError):
    """Raised when a required argument is unset or unusable."""

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' must not be None")


class RetryExhausted(Exception):
    """Raised when all retry attempts have been exhausted."""

    def __init__(
        self,
        message: str = "Unable to perform action; retry count reached.",
        retry_count: int = 0,
        last_exception: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.retry_count = retry_count
        self.last_exception = last_exception
