"""
Retry Models
============
Value objects handed to retry callbacks.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RetryOutcome:
    """
    Snapshot of a retry loop at the moment a callback fires.

    ``exception`` holds the failure of the attempt on a per-failure
    notification and is ``None`` once the retry count is exceeded.
    """
    attempt: int
    retry_interval_ms: int
    exception: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        return self.exception is not None

    def __str__(self) -> str:
        return (
            f"attempt: {self.attempt}, "
            f"retry_interval_ms: {self.retry_interval_ms}, "
            f"exception: {self.exception!r}"
        )
