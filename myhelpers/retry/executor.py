"""
Retry Executor
==============
Fixed-interval retry of synchronous calls.

Two entry points share the same loop: try, on failure wait the interval,
count the attempt, repeat until the retry count is reached.

Usage:
    from myhelpers.retry import execute_action, execute

    execute_action(
        sync_inventory,
        retry_count=3,
        retry_interval_ms=500,
        on_retry_failure=lambda outcome: print(outcome),
        on_retry_count_exceeded=lambda outcome: alert(outcome),
    )

    balance = execute("get_balance", account_client, 3, 500, account_id)
"""

import functools
import inspect
import time
from typing import Any, Callable, Optional

import structlog

from .config import RetryConfig
from .exceptions import InvalidArgument, RetryExhausted
from .models import RetryOutcome

logger = structlog.get_logger(__name__)

RetryCallback = Callable[[RetryOutcome], None]


def _describe(func: Callable[..., Any]) -> str:
    if isinstance(func, functools.partial):
        func = func.func
    return getattr(func, "__qualname__", repr(func))


def _wait(retry_interval_ms: int) -> None:
    time.sleep(retry_interval_ms / 1000)


def execute_action(
    action: Callable[[], None],
    retry_count: int,
    retry_interval_ms: int,
    on_retry_failure: Optional[RetryCallback] = None,
    on_retry_count_exceeded: Optional[RetryCallback] = None,
) -> None:
    """
    Run an action, retrying it on failure.

    Nothing is raised when the retry count is exceeded; the caller only
    learns about it through ``on_retry_count_exceeded``.

    Args:
        action: Zero-argument callable to run
        retry_count: Maximum number of attempts
        retry_interval_ms: Milliseconds to wait after each failed attempt
        on_retry_failure: Called with a RetryOutcome after each failed attempt
        on_retry_count_exceeded: Called once with a RetryOutcome when all
            attempts failed

    Raises:
        InvalidArgument: If action is None
    """
    if action is None:
        raise InvalidArgument("action")

    count = 0

    while count < retry_count:
        try:
            action()
            return
        except Exception as e:
            logger.warning(
                "Retrying after failure",
                func=_describe(action),
                attempt=count + 1,
                retry_interval_ms=retry_interval_ms,
                error=str(e),
            )

            if on_retry_failure is not None:
                on_retry_failure(RetryOutcome(
                    attempt=count + 1,
                    retry_interval_ms=retry_interval_ms,
                    exception=e,
                ))

            _wait(retry_interval_ms)

            count += 1

    logger.error(
        "Retry count exceeded",
        func=_describe(action),
        attempts=retry_count,
    )

    if on_retry_count_exceeded is not None:
        on_retry_count_exceeded(RetryOutcome(
            attempt=retry_count,
            retry_interval_ms=retry_interval_ms,
        ))


def call_with_retry(
    func: Callable[..., Any],
    retry_count: int,
    retry_interval_ms: int,
    *args,
    **kwargs,
) -> Any:
    """
    Call a function with fixed-interval retry and return its result.

    Raises:
        InvalidArgument: If func is None
        RetryExhausted: If every attempt failed
    """
    if func is None:
        raise InvalidArgument("func")

    count = 0
    last_exception = None

    while count < retry_count:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            last_exception = e
            logger.warning(
                "Retry error",
                func=_describe(func),
                attempt=count + 1,
                error=str(e),
            )

            _wait(retry_interval_ms)

            count += 1

    raise RetryExhausted(
        retry_count=retry_count,
        last_exception=last_exception,
    ) from last_exception


def _is_staticmethod_of(func: Callable[..., Any], instance: Any) -> bool:
    name = getattr(func, "__name__", None)
    if name is None:
        return False
    attr = inspect.getattr_static(type(instance), name, None)
    return isinstance(attr, staticmethod) and attr.__func__ is func


def _bind(method: Any, instance: Any) -> Callable[..., Any]:
    """Resolve a method name, function or bound method against an instance."""
    if isinstance(method, str):
        bound = getattr(instance, method, None)
        if bound is None or not callable(bound):
            raise InvalidArgument(
                "method",
                f"{type(instance).__name__} has no callable attribute '{method}'",
            )
        return bound

    if not callable(method):
        raise InvalidArgument("method", f"{method!r} is not callable")

    # Bound methods, including built-ins like dict.get, already carry their target
    if getattr(method, "__self__", None) is not None:
        return method

    if _is_staticmethod_of(method, instance):
        return method

    return functools.partial(method, instance)


def execute(
    method: Any,
    instance: Any,
    retry_count: int,
    retry_interval_ms: int,
    *args,
    **kwargs,
) -> Any:
    """
    Call a method on an instance, retrying it on failure.

    Args:
        method: Method name, function taking the instance first, or bound method
        instance: Object the method is invoked on
        retry_count: Maximum number of attempts
        retry_interval_ms: Milliseconds to wait after each failed attempt
        *args: Positional arguments passed to every attempt
        **kwargs: Keyword arguments passed to every attempt

    Returns:
        Value returned by the first successful attempt

    Raises:
        InvalidArgument: If method or instance is None
        RetryExhausted: If every attempt failed
    """
    if method is None:
        raise InvalidArgument("method")
    if instance is None:
        raise InvalidArgument("instance")

    return call_with_retry(
        _bind(method, instance),
        retry_count,
        retry_interval_ms,
        *args,
        **kwargs,
    )


class RetryExecutor:
    """
    Retry helper bound to a RetryConfig.

    Example:
        executor = RetryExecutor(RetryConfig(retry_count=5, retry_interval_ms=200))
        executor.execute_action(flush_queue, on_retry_count_exceeded=report)
        user = executor.execute("fetch_user", client, user_id)
    """

    def __init__(self, config: Optional[RetryConfig] = None):
        self.config = config or RetryConfig()

    @property
    def retry_count(self) -> int:
        return self.config.retry_count

    @property
    def retry_interval_ms(self) -> int:
        return self.config.retry_interval_ms

    def execute_action(
        self,
        action: Callable[[], None],
        on_retry_failure: Optional[RetryCallback] = None,
        on_retry_count_exceeded: Optional[RetryCallback] = None,
    ) -> None:
        execute_action(
            action,
            self.retry_count,
            self.retry_interval_ms,
            on_retry_failure=on_retry_failure,
            on_retry_count_exceeded=on_retry_count_exceeded,
        )

    def execute(self, method: Any, instance: Any, *args, **kwargs) -> Any:
        return execute(
            method,
            instance,
            self.retry_count,
            self.retry_interval_ms,
            *args,
            **kwargs,
        )

    def call(self, func: Callable[..., Any], *args, **kwargs) -> Any:
        return call_with_retry(
            func,
            self.retry_count,
            self.retry_interval_ms,
            *args,
            **kwargs,
        )
