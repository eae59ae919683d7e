"""
Retry Configuration
===================
Default retry count and interval, overridable from the environment.
"""

import os
from dataclasses import dataclass, field

from .exceptions import InvalidArgument


def _env_int(name: str, argument: str, default: int) -> int:
    raw = os.environ.get(name, str(default))
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidArgument(
            argument, f"{name} must be an integer, got {raw!r}"
        ) from e


@dataclass
class RetryConfig:
    """Configuration for a retry executor."""
    retry_count: int = field(
        default_factory=lambda: _env_int("RETRY_COUNT", "retry_count", 3)
    )
    retry_interval_ms: int = field(
        default_factory=lambda: _env_int("RETRY_INTERVAL_MS", "retry_interval_ms", 1000)
    )

    def __post_init__(self):
        if self.retry_count < 0:
            raise InvalidArgument(
                "retry_count", f"retry_count must be >= 0, got {self.retry_count}"
            )
        if self.retry_interval_ms < 0:
            raise InvalidArgument(
                "retry_interval_ms",
                f"retry_interval_ms must be >= 0, got {self.retry_interval_ms}",
            )
